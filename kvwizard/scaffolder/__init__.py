"""KVision project scaffolder -- generates complete project trees.

Builds a multi-module KVision project (backend/common/frontend source sets,
Gradle build, webpack configuration, translations) from the bundled template
catalog, substituting the artifact id, group id, package name and dependency
versions into every file.

Quick usage::

    from kvwizard.scaffolder import ProjectGenerator, generator_config_for

    generator = ProjectGenerator(generator_config_for("ktor"))
    result = await generator.generate("/tmp/myapp", "myapp", "com.example")
"""

from kvwizard.scaffolder.filesystem import ProjectDirectory
from kvwizard.scaffolder.generator import ProjectGenerator, generate_project
from kvwizard.scaffolder.models import (
    GenerationResult,
    GeneratorConfig,
    ProjectIdentity,
)
from kvwizard.scaffolder.project_types import PROJECT_TYPES, generator_config_for
from kvwizard.scaffolder.templates import TemplateRenderer

__all__ = [
    "GenerationResult",
    "GeneratorConfig",
    "PROJECT_TYPES",
    "ProjectDirectory",
    "ProjectGenerator",
    "ProjectIdentity",
    "TemplateRenderer",
    "generate_project",
    "generator_config_for",
]

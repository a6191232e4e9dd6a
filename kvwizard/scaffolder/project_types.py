"""Catalog of supported project types.

Each entry is a ``GeneratorConfig`` whose ``template_name`` selects the
backend and build-file templates. Frontend, common and root files are shared
by every type.
"""

from __future__ import annotations

from .models import GeneratorConfig

_BACKEND_SOURCES = ["Main.kt", "Service.kt"]

PROJECT_TYPES: dict[str, GeneratorConfig] = {
    "ktor": GeneratorConfig(
        template_name="ktor",
        backend_files=_BACKEND_SOURCES,
        backend_resources_files=["application.conf", "logback.xml"],
    ),
    "jooby": GeneratorConfig(
        template_name="jooby",
        backend_files=_BACKEND_SOURCES,
        backend_resources_files=["application.conf", "logback.xml"],
    ),
    "micronaut": GeneratorConfig(
        template_name="micronaut",
        backend_files=_BACKEND_SOURCES,
        backend_resources_files=["application.yml", "logback.xml"],
    ),
    "spring": GeneratorConfig(
        template_name="spring",
        backend_files=_BACKEND_SOURCES,
        backend_resources_files=["application.yml"],
    ),
    "vertx": GeneratorConfig(
        template_name="vertx",
        backend_files=_BACKEND_SOURCES,
        backend_resources_files=["logback.xml"],
    ),
    "frontend": GeneratorConfig(
        template_name="frontend",
        frontend_only=True,
        common_files=[],
    ),
}

DEFAULT_PROJECT_TYPE = "ktor"


def generator_config_for(name: str) -> GeneratorConfig:
    """Return a private copy of the configuration registered under *name*.

    Raises:
        KeyError: If *name* is not a known project type.
    """
    try:
        config = PROJECT_TYPES[name]
    except KeyError:
        known = ", ".join(sorted(PROJECT_TYPES))
        raise KeyError(f"Unknown project type '{name}' (expected one of: {known})") from None
    return config.model_copy(deep=True)

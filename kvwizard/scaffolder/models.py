"""Pydantic v2 models for KVision project scaffolding.

Defines the project identity supplied by the host, the per-category filename
configuration of a generator, the planned directory tree, and the result
returned from a generation run.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from kvwizard.version_client import VersionData


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class ErrorKind(str, Enum):
    """Category of a failed generation run."""
    INVALID_INPUT = "invalid_input"
    MATERIALIZATION = "materialization"
    UNEXPECTED = "unexpected"


# ---------------------------------------------------------------------------
# Project identity
# ---------------------------------------------------------------------------

_FORBIDDEN_CHARS = ("/", "\\")


class ProjectIdentity(BaseModel):
    """Artifact and group ids of the project being generated."""

    model_config = ConfigDict(frozen=True)

    artifact_id: str = Field(..., min_length=1, description="Artifact id, e.g. 'myapp'")
    group_id: str = Field(..., min_length=1, description="Group id, e.g. 'com.example'")

    @field_validator("artifact_id", "group_id")
    @classmethod
    def _no_path_separators(cls, value: str) -> str:
        if any(ch in value for ch in _FORBIDDEN_CHARS):
            raise ValueError(f"must not contain path separators: {value!r}")
        return value

    @field_validator("group_id")
    @classmethod
    def _no_empty_segments(cls, value: str) -> str:
        if any(not segment for segment in value.split(".")):
            raise ValueError(f"group id has an empty segment: {value!r}")
        return value

    @field_validator("artifact_id")
    @classmethod
    def _no_dots(cls, value: str) -> str:
        if value in (".", ".."):
            raise ValueError(f"invalid artifact id: {value!r}")
        return value

    @property
    def package_segments(self) -> list[str]:
        """Group id segments followed by the artifact id, in order."""
        return [*self.group_id.split("."), self.artifact_id]

    @property
    def package_name(self) -> str:
        """Fully qualified package name, ``<group_id>.<artifact_id>``."""
        return f"{self.group_id}.{self.artifact_id}"


# ---------------------------------------------------------------------------
# Generator configuration
# ---------------------------------------------------------------------------

class GeneratorConfig(BaseModel):
    """Filename lists per tree category plus the project-type switches.

    Filenames are destination names (``Main.kt``, ``application.conf``), not
    template names; template identifiers are composed from them.
    """

    template_name: str = Field(
        ..., min_length=1,
        description="Project-type tag used for backend and build-file templates",
    )
    frontend_only: bool = Field(
        default=False, description="Skip the whole backendMain subtree"
    )
    backend_files: list[str] = Field(
        default_factory=list,
        description="Sources under src/backendMain/kotlin/<package>",
    )
    backend_resources_files: list[str] = Field(
        default_factory=list,
        description="Files under src/backendMain/resources",
    )
    gradle_files: list[str] = Field(
        default_factory=lambda: [
            "build.gradle.kts",
            "gradle.properties",
            "settings.gradle.kts",
        ],
        description="Build files at the project root, templated per project type",
    )
    root_files: list[str] = Field(
        default_factory=lambda: [
            ".gettext.json",
            ".gitignore",
            "app.json",
            "system.properties",
            "gradlew.bat",
            "gradlew",
            "Procfile",
        ],
        description="Files at the project root whose template id is the filename",
    )
    webpack_files: list[str] = Field(
        default_factory=lambda: [
            "bootstrap.js",
            "css.js",
            "file.js",
            "handlebars.js",
            "jquery.js",
            "minify.js",
            "moment.js",
            "webpack.js",
        ],
        description="Files under webpack.config.d",
    )
    common_files: list[str] = Field(
        default_factory=lambda: ["Service.kt"],
        description="Sources under src/commonMain/kotlin/<package>",
    )
    frontend_source_files: list[str] = Field(
        default_factory=lambda: ["App.kt", "Model.kt"],
        description="Sources under src/frontendMain/kotlin/<package>",
    )
    frontend_web_files: list[str] = Field(
        default_factory=lambda: ["index.html"],
        description="Files under src/frontendMain/web",
    )
    frontend_resources_files: list[str] = Field(
        default_factory=lambda: ["messages.pot", "messages-en.po", "messages-pl.po"],
        description="Translations under src/frontendMain/resources/i18n",
    )
    frontend_test_files: list[str] = Field(
        default_factory=lambda: ["AppSpec.kt"],
        description="Tests under src/frontendTest/kotlin/test/<package>",
    )
    idea_files: list[str] = Field(
        default_factory=lambda: ["gradle.xml"],
        description="IDE metadata under idea_config",
    )


# ---------------------------------------------------------------------------
# Planned tree
# ---------------------------------------------------------------------------

class FileInstruction(BaseModel):
    """Request to render ``template_id`` into ``filename``."""

    model_config = ConfigDict(frozen=True)

    filename: str
    template_id: str


class TreeNode(BaseModel):
    """A directory (relative to the project root) and the files it receives."""

    model_config = ConfigDict(frozen=True)

    path: tuple[str, ...] = Field(default=(), description="Directory names from the root")
    files: tuple[FileInstruction, ...] = Field(default=())

    def destinations(self) -> list[str]:
        """Return the ``/``-joined relative destination of every file."""
        return ["/".join((*self.path, f.filename)) for f in self.files]


# ---------------------------------------------------------------------------
# Generation result
# ---------------------------------------------------------------------------

class GenerationResult(BaseModel):
    """Outcome of one ``ProjectGenerator.generate`` call."""

    success: bool = Field(default=True, description="Whether the whole tree was written")
    project_root: Optional[Path] = Field(default=None)
    files: list[str] = Field(
        default_factory=list,
        description="Relative paths of files present under the root after the run",
    )
    versions: Optional[VersionData] = Field(default=None)
    error_kind: Optional[ErrorKind] = Field(default=None)
    error: Optional[str] = Field(default=None, description="Error message on failure")

"""Template identifier composition.

A template identifier is ``<project_type>_<location>_<kind>_<filename>`` with
every absent part dropped, for example:

- ``ktor_backend_source_Main.kt``
- ``ktor_backend_resources_application.conf``
- ``frontend_test_AppSpec.kt``
- ``ktor_build.gradle.kts`` (build file at the project root)
- ``.gitignore`` (plain root file)

Only backend and root-level build files are framework specific, so the
project type is dropped for every other location.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

SEPARATOR = "_"


class Location(str, Enum):
    """Which part of the tree a file belongs to."""
    BACKEND = "backend"
    FRONTEND = "frontend"
    COMMON = "common"
    IDEA = "idea"
    WEBPACK = "webpack"
    ROOT = "root"
    NONE = "none"


class SourceKind(str, Enum):
    """Kind of source set directory a file lives in."""
    SOURCE = "source"
    RESOURCES = "resources"
    TEST = "test"
    WEB = "web"
    NONE = "none"


# Locations and kinds that contribute no tag to the identifier.
_UNTAGGED_LOCATIONS = {Location.ROOT, Location.NONE}
_TYPED_LOCATIONS = {Location.BACKEND, Location.ROOT, Location.NONE}


def compose_template_id(
    project_type: Optional[str],
    location: Location,
    kind: SourceKind,
    filename: str,
) -> str:
    """Build the template identifier for *filename*.

    Args:
        project_type: Backend framework tag (``"ktor"``, ``"spring"``...), or
            ``None``. Ignored for frontend, common, idea and webpack files.
        location: Tree location of the file.
        kind: Source set kind of the containing directory.
        filename: Destination filename; always the last part.

    Returns:
        The ``_``-joined identifier.
    """
    if not filename:
        raise ValueError("filename must not be empty")

    parts: list[str] = []
    if project_type and location in _TYPED_LOCATIONS:
        parts.append(project_type)
    if location not in _UNTAGGED_LOCATIONS:
        parts.append(location.value)
    if kind is not SourceKind.NONE:
        parts.append(kind.value)
    parts.append(filename)
    return SEPARATOR.join(parts)

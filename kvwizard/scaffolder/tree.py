"""Project tree planning and materialization.

The tree shape is a static, ordered table of entries. Each entry names a
directory (optionally followed by the package segments), the config field
holding its filenames, and the location/kind tags used to compose template
identifiers. ``plan_tree`` expands the table for one identity/config pair and
``build_tree`` walks the plan against a directory handle.
"""

from __future__ import annotations

from typing import Any, NamedTuple

from .filesystem import ProjectDirectory
from .models import FileInstruction, GeneratorConfig, ProjectIdentity, TreeNode
from .naming import Location, SourceKind, compose_template_id


class _TreeEntry(NamedTuple):
    path: tuple[str, ...]
    files_field: str | None
    location: Location = Location.NONE
    kind: SourceKind = SourceKind.NONE
    typed: bool = False
    backend_only: bool = False
    in_package: bool = False


_TREE: tuple[_TreeEntry, ...] = (
    _TreeEntry(("src", "backendMain", "kotlin"), "backend_files",
               Location.BACKEND, SourceKind.SOURCE, typed=True, backend_only=True, in_package=True),
    _TreeEntry(("src", "backendMain", "resources"), "backend_resources_files",
               Location.BACKEND, SourceKind.RESOURCES, typed=True, backend_only=True),
    _TreeEntry(("src", "commonMain", "kotlin"), "common_files",
               Location.COMMON, SourceKind.NONE, in_package=True),
    _TreeEntry(("src", "frontendMain", "kotlin"), "frontend_source_files",
               Location.FRONTEND, SourceKind.SOURCE, in_package=True),
    _TreeEntry(("src", "frontendMain", "web"), "frontend_web_files",
               Location.FRONTEND, SourceKind.WEB),
    _TreeEntry(("src", "frontendMain", "resources", "i18n"), "frontend_resources_files",
               Location.FRONTEND, SourceKind.RESOURCES),
    _TreeEntry(("src", "frontendTest", "kotlin", "test"), "frontend_test_files",
               Location.FRONTEND, SourceKind.TEST, in_package=True),
    # Wrapper jar and properties are not templated.
    _TreeEntry(("gradle", "wrapper"), None),
    _TreeEntry(("idea_config",), "idea_files", Location.IDEA),
    _TreeEntry(("webpack.config.d",), "webpack_files", Location.WEBPACK),
    _TreeEntry((), "gradle_files", Location.ROOT, typed=True),
    _TreeEntry((), "root_files", Location.ROOT),
)


def plan_tree(identity: ProjectIdentity, config: GeneratorConfig) -> list[TreeNode]:
    """Expand the static tree table for *identity* and *config*.

    Returns:
        Ordered tree nodes. Backend nodes are left out when
        ``config.frontend_only`` is set.

    Raises:
        ValueError: If two file instructions would write the same path.
    """
    nodes: list[TreeNode] = []
    seen: set[str] = set()

    for entry in _TREE:
        if entry.backend_only and config.frontend_only:
            continue

        path = entry.path
        if entry.in_package:
            path = (*path, *identity.package_segments)

        filenames: list[str] = getattr(config, entry.files_field) if entry.files_field else []
        project_type = config.template_name if entry.typed else None
        files = tuple(
            FileInstruction(
                filename=name,
                template_id=compose_template_id(project_type, entry.location, entry.kind, name),
            )
            for name in filenames
        )
        node = TreeNode(path=path, files=files)

        for destination in node.destinations():
            if destination in seen:
                raise ValueError(f"Duplicate destination in project tree: {destination}")
            seen.add(destination)
        nodes.append(node)

    return nodes


async def build_tree(
    root: ProjectDirectory,
    identity: ProjectIdentity,
    attrs: dict[str, Any],
    config: GeneratorConfig,
) -> list[str]:
    """Create every planned directory and file under *root*, in plan order.

    Materialization errors propagate; files written before the failure stay
    on disk.

    Returns:
        The files present under *root* after the walk, from ``root.refresh``.
    """
    handles: dict[tuple[str, ...], ProjectDirectory] = {(): root}

    for node in plan_tree(identity, config):
        directory = root
        for depth, name in enumerate(node.path, start=1):
            key = node.path[:depth]
            if key not in handles:
                handles[key] = await directory.create_directory(name)
            directory = handles[key]

        for instruction in node.files:
            await directory.materialize_file(instruction.filename, instruction.template_id, attrs)

    return await root.refresh(recursive=True)

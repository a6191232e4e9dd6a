"""Main scaffolding orchestrator.

Takes a ``GeneratorConfig`` and generates a complete KVision project tree
(backend/common/frontend source sets, build files, webpack configuration and
translations) into a destination directory, substituting the project's
identity and dependency versions into every file.
"""

from __future__ import annotations

import asyncio
import traceback
from pathlib import Path
from typing import Optional

from pydantic import ValidationError
from rich.markup import escape

from kvwizard.config import Config
from kvwizard.errors import GenerationError, MaterializationError
from kvwizard.utils import console, print_error
from kvwizard.version_client import VersionClient, VersionData, VersionProvider

from .attributes import build_attributes
from .filesystem import ProjectDirectory
from .models import ErrorKind, GenerationResult, GeneratorConfig, ProjectIdentity
from .project_types import generator_config_for
from .templates import TemplateRenderer
from .tree import build_tree


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Generates one KVision project per ``generate`` call.

    The generator keeps no state between calls: identity, versions and the
    attribute map are created inside ``generate`` and dropped afterwards.
    """

    def __init__(
        self,
        config: GeneratorConfig,
        renderer: Optional[TemplateRenderer] = None,
        version_provider: Optional[VersionProvider] = None,
    ) -> None:
        self.config = config
        self.renderer = renderer or TemplateRenderer()
        self.version_provider = version_provider or VersionProvider(VersionClient())

    # -- Public API --------------------------------------------------------

    async def generate(
        self,
        root: ProjectDirectory | str | Path,
        artifact_id: str,
        group_id: str,
    ) -> GenerationResult:
        """Generate the project tree under *root*.

        Never raises. On failure the error is printed and returned in the
        result; files written before the failure are left in place.

        Args:
            root: Destination directory handle, or a path to create one for.
            artifact_id: Project artifact id, e.g. ``"myapp"``.
            group_id: Project group id, e.g. ``"com.example"``.
        """
        handle: Optional[ProjectDirectory] = None
        versions: Optional[VersionData] = None
        try:
            identity = ProjectIdentity(artifact_id=artifact_id, group_id=group_id)
            handle = await self._open_root(root)
            versions = await self.version_provider.resolve()
            attrs = build_attributes(identity, versions)
            files = await build_tree(handle, identity, attrs, self.config)
            return GenerationResult(
                success=True,
                project_root=handle.path,
                files=files,
                versions=versions,
            )
        except Exception as exc:  # noqa: BLE001
            error = _classify(exc)
            print_error(f"Project generation failed ({error.kind}): {escape(str(error))}")
            console.print(traceback.format_exc(), style="dim", markup=False)
            return GenerationResult(
                success=False,
                project_root=handle.path if handle else None,
                files=await _partial_files(handle),
                versions=versions,
                error_kind=ErrorKind(error.kind),
                error=str(error),
            )

    # -- Helpers -----------------------------------------------------------

    async def _open_root(self, root: ProjectDirectory | str | Path) -> ProjectDirectory:
        if isinstance(root, ProjectDirectory):
            handle = root
        else:
            handle = ProjectDirectory(root, self.renderer)
        await asyncio.to_thread(handle.path.mkdir, parents=True, exist_ok=True)
        return handle


# ---------------------------------------------------------------------------
# Convenience entry point
# ---------------------------------------------------------------------------


async def generate_project(
    output_dir: str | Path,
    artifact_id: str,
    group_id: str,
    project_type: str | None = None,
    settings: Config | None = None,
) -> GenerationResult:
    """Generate a project of *project_type* into ``<output_dir>/<artifact_id>``.

    Raises:
        KeyError: If *project_type* is not in the catalog.
    """
    settings = settings or Config()
    config = generator_config_for(project_type or settings.project_type)

    if settings.offline:
        provider = VersionProvider()
    else:
        provider = VersionProvider(
            VersionClient(
                url=settings.versions.url,
                timeout=settings.versions.timeout,
                connect_timeout=settings.versions.connect_timeout,
            )
        )

    generator = ProjectGenerator(
        config,
        renderer=TemplateRenderer(settings.template_dir),
        version_provider=provider,
    )
    return await generator.generate(Path(output_dir) / artifact_id, artifact_id, group_id)


# ---------------------------------------------------------------------------
# Error classification
# ---------------------------------------------------------------------------


def _classify(exc: Exception) -> GenerationError:
    """Map an exception that reached the generator boundary to a ``GenerationError``."""
    if isinstance(exc, MaterializationError):
        return GenerationError(ErrorKind.MATERIALIZATION.value, str(exc))
    if isinstance(exc, ValidationError):
        details = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        return GenerationError(ErrorKind.INVALID_INPUT.value, f"Invalid project identity: {details}")
    if isinstance(exc, ValueError):
        return GenerationError(ErrorKind.INVALID_INPUT.value, str(exc))
    return GenerationError(ErrorKind.UNEXPECTED.value, f"{type(exc).__name__}: {exc}")


async def _partial_files(handle: Optional[ProjectDirectory]) -> list[str]:
    """List whatever a failed run left under *handle*."""
    if handle is None:
        return []
    try:
        return await handle.refresh(recursive=True)
    except OSError:
        return []

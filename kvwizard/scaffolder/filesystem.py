"""Local filesystem view used as the destination of a generation run."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

from kvwizard.utils import make_executable

from .templates import TemplateRenderer

# Files that must be runnable straight after generation.
EXECUTABLE_FILES = frozenset({"gradlew"})


class ProjectDirectory:
    """Directory handle that creates children and materializes templates.

    Every handle created through ``create_directory`` shares the renderer of
    its parent.
    """

    def __init__(self, path: str | Path, renderer: TemplateRenderer | None = None) -> None:
        self.path = Path(path)
        self.renderer = renderer or TemplateRenderer()

    def __repr__(self) -> str:
        return f"ProjectDirectory({str(self.path)!r})"

    async def create_directory(self, name: str) -> "ProjectDirectory":
        """Create (or reuse) the child directory *name* and return its handle."""
        child = self.path / name
        await asyncio.to_thread(child.mkdir, parents=True, exist_ok=True)
        return ProjectDirectory(child, self.renderer)

    async def materialize_file(
        self, name: str, template_id: str, attrs: dict[str, Any]
    ) -> Path:
        """Render *template_id* with *attrs* into the file *name*.

        Raises:
            MaterializationError: If rendering or writing fails.
        """
        out = await self.renderer.render_to_file(template_id, self.path / name, attrs)
        if name in EXECUTABLE_FILES:
            await asyncio.to_thread(make_executable, out)
        return out

    async def refresh(self, recursive: bool = True) -> list[str]:
        """Rescan the directory and return the files it now contains.

        Paths are relative to this directory, ``/``-separated and sorted.
        """
        return await asyncio.to_thread(self._scan, recursive)

    def _scan(self, recursive: bool) -> list[str]:
        if not self.path.is_dir():
            return []
        candidates = self.path.rglob("*") if recursive else self.path.iterdir()
        return sorted(
            p.relative_to(self.path).as_posix() for p in candidates if p.is_file()
        )

"""Jinja2 template store for project scaffolding.

Provides the TemplateRenderer class which loads templates from the
``kvwizard/scaffolder/templates/`` directory by template identifier and
renders them with the attribute map. Placeholders use the ``${key}`` form, so
the environment is configured with ``${`` / ``}`` variable delimiters, and
unknown placeholders fail the render instead of silently rendering empty.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from kvwizard.errors import MaterializationError


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

TEMPLATE_SUFFIX = ".j2"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders ``${key}`` templates looked up by template identifier.

    The identifier ``ktor_backend_source_Main.kt`` maps to the file
    ``ktor_backend_source_Main.kt.j2`` inside the template directory.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            undefined=StrictUndefined,
            variable_start_string="${",
            variable_end_string="}",
            keep_trailing_newline=True,
        )

    # -- Single template rendering -----------------------------------------

    def render(self, template_id: str, context: dict[str, Any]) -> str:
        """Render the template stored under *template_id*.

        Raises:
            jinja2.TemplateNotFound: If no such template exists.
            jinja2.UndefinedError: If the template references a key missing
                from *context*.
        """
        template = self.env.get_template(template_id + TEMPLATE_SUFFIX)
        return template.render(**context)

    # -- File-based rendering (async) --------------------------------------

    async def render_to_file(
        self,
        template_id: str,
        output_path: str | Path,
        context: dict[str, Any],
    ) -> Path:
        """Render a template and write the result to *output_path*.

        Raises:
            MaterializationError: If the template is missing, references an
                unknown key, fails to parse, or the file cannot be written.
        """
        out = Path(output_path)
        try:
            content = self.render(template_id, context)
            await asyncio.to_thread(_write_file, out, content)
        except TemplateError as exc:
            raise MaterializationError(
                f"Cannot render template '{template_id}' for {out}: {exc}",
                template_id=template_id,
                destination=str(out),
            ) from exc
        except OSError as exc:
            raise MaterializationError(
                f"Cannot write {out}: {exc}",
                template_id=template_id,
                destination=str(out),
            ) from exc
        return out

    # -- Utility -----------------------------------------------------------

    def has_template(self, template_id: str) -> bool:
        """Return ``True`` if *template_id* exists in the template directory."""
        return (self.template_dir / (template_id + TEMPLATE_SUFFIX)).is_file()

    def list_templates(self) -> list[str]:
        """Return the sorted identifiers of every template in the store."""
        if not self.template_dir.is_dir():
            return []
        return sorted(
            p.name[: -len(TEMPLATE_SUFFIX)]
            for p in self.template_dir.iterdir()
            if p.is_file() and p.name.endswith(TEMPLATE_SUFFIX)
        )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")

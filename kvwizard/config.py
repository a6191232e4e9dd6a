"""KVision project wizard configuration.

Typed configuration for the wizard. All settings use Pydantic v2 models so
they can be validated at construction time and serialised to/from JSON or
environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_VERSIONS_URL = (
    "https://raw.githubusercontent.com/JakubNeukirch/kvision-project-wizard/master/versions.json"
)

_TRUTHY = {"1", "true", "yes", "on"}


class VersionServiceConfig(BaseModel):
    """Where and how long to look for remote dependency versions."""

    model_config = ConfigDict(validate_assignment=True)

    url: str = Field(default=DEFAULT_VERSIONS_URL)
    timeout: float = Field(default=10.0, gt=0, description="Total request timeout in seconds")
    connect_timeout: float = Field(default=5.0, gt=0, description="Connect timeout in seconds")


class Config(BaseModel):
    """Global wizard configuration.

    Created once by the CLI entry point (or by an embedding host) and passed
    to ``ProjectGenerator``.
    """

    model_config = ConfigDict(validate_assignment=True)

    output_dir: Path = Field(default=Path("."))
    template_dir: Optional[Path] = Field(
        default=None, description="Template catalog; the bundled one when unset"
    )
    project_type: str = Field(default="ktor")
    offline: bool = Field(default=False, description="Skip the remote version lookup")
    versions: VersionServiceConfig = Field(default_factory=VersionServiceConfig)

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            KVWIZARD_OUTPUT_DIR, KVWIZARD_TEMPLATE_DIR, KVWIZARD_PROJECT_TYPE,
            KVWIZARD_OFFLINE, KVWIZARD_VERSIONS_URL, KVWIZARD_VERSIONS_TIMEOUT.
        """
        versions_kwargs: dict[str, Any] = {}
        if os.environ.get("KVWIZARD_VERSIONS_URL"):
            versions_kwargs["url"] = os.environ["KVWIZARD_VERSIONS_URL"]
        if os.environ.get("KVWIZARD_VERSIONS_TIMEOUT"):
            versions_kwargs["timeout"] = float(os.environ["KVWIZARD_VERSIONS_TIMEOUT"])

        template_dir = os.environ.get("KVWIZARD_TEMPLATE_DIR")

        return cls(
            output_dir=Path(os.environ.get("KVWIZARD_OUTPUT_DIR", ".")),
            template_dir=Path(template_dir) if template_dir else None,
            project_type=os.environ.get("KVWIZARD_PROJECT_TYPE", "ktor"),
            offline=os.environ.get("KVWIZARD_OFFLINE", "").strip().lower() in _TRUTHY,
            versions=VersionServiceConfig(**versions_kwargs),
        )

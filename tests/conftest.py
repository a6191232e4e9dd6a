"""Shared pytest fixtures for the KVision project wizard test suite.

Provides reusable fixtures for:
- Temporary destination directories
- Project identities and the version document payload
- Version providers that never touch the network
- A small template store for tree-walk tests
- Mocked httpx clients
"""

from __future__ import annotations

from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from kvwizard.scaffolder.models import GeneratorConfig, ProjectIdentity
from kvwizard.version_client import VersionData, VersionProvider


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_project_dir(tmp_path: Path) -> Path:
    """Destination directory for a generated project (auto-cleanup)."""
    project_dir = tmp_path / "myapp"
    project_dir.mkdir()
    yield project_dir


# ---------------------------------------------------------------------------
# Identity & versions
# ---------------------------------------------------------------------------

@pytest.fixture
def identity() -> ProjectIdentity:
    return ProjectIdentity(artifact_id="myapp", group_id="com.example")


@pytest.fixture
def remote_versions_payload() -> dict[str, Any]:
    """A version document as served by the remote version service."""
    return {
        "kVision": "4.0.0",
        "kotlin": "1.4.20",
        "serialization": "1.0.1",
        "coroutines": "1.4.1",
        "templateJooby": {"jooby": "2.9.4"},
        "templateKtor": {"ktor": "1.4.3"},
        "templateMicronaut": {"micronaut": "2.2.0"},
        "templateSpring": {
            "springBoot": "2.4.0",
            "springDataR2dbc": "1.2.1",
            "r2dbcPostgres": "0.8.6.RELEASE",
            "r2dbcH2": "0.8.4.RELEASE",
        },
        "templateVertx": {"vertxPlugin": "1.2.0"},
    }


@pytest.fixture
def remote_versions(remote_versions_payload) -> VersionData:
    return VersionData.model_validate(remote_versions_payload)


@pytest.fixture
def offline_provider() -> VersionProvider:
    """Provider that returns the bundled versions without network access."""
    return VersionProvider()


# ---------------------------------------------------------------------------
# Template store
# ---------------------------------------------------------------------------

SMALL_TEMPLATES: dict[str, str] = {
    "demo_backend_source_Main.kt": "package ${packageName}\n// backend ${ktor_version}\n",
    "demo_backend_resources_application.conf": "app = ${artifactId}\n",
    "common_Service.kt": "package ${packageName}\n",
    "frontend_source_App.kt": "package ${packageName}\n// kvision ${kvision_version}\n",
    "frontend_web_index.html": "<title>${artifactId}</title>\n",
    "frontend_resources_messages.pot": "msgid \"${artifactId}\"\n",
    "frontend_test_AppSpec.kt": "package test.${packageName}\n",
    "idea_gradle.xml": "<project/>\n",
    "webpack_webpack.js": "// ${artifactId}\n",
    "demo_build.gradle.kts": "group = \"${groupId}\"\n// kotlin ${kotlin_version}\n",
    ".gitignore": "/build\n",
    "gradlew": "#!/usr/bin/env sh\n# ${artifactId}\n",
}


@pytest.fixture
def small_template_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Template store holding exactly the templates ``small_config`` needs."""
    template_dir = tmp_path_factory.mktemp("template_store") / "templates"
    template_dir.mkdir()
    for template_id, content in SMALL_TEMPLATES.items():
        (template_dir / f"{template_id}.j2").write_text(content, encoding="utf-8")
    return template_dir


@pytest.fixture
def small_config() -> GeneratorConfig:
    """One file per category, matching ``small_template_dir``."""
    return GeneratorConfig(
        template_name="demo",
        backend_files=["Main.kt"],
        backend_resources_files=["application.conf"],
        gradle_files=["build.gradle.kts"],
        root_files=[".gitignore", "gradlew"],
        webpack_files=["webpack.js"],
        common_files=["Service.kt"],
        frontend_source_files=["App.kt"],
        frontend_web_files=["index.html"],
        frontend_resources_files=["messages.pot"],
        frontend_test_files=["AppSpec.kt"],
        idea_files=["gradle.xml"],
    )


# ---------------------------------------------------------------------------
# Mock httpx
# ---------------------------------------------------------------------------

def make_mock_http_client(
    json_data: Any = None,
    side_effect: Exception | None = None,
) -> AsyncMock:
    """Build an ``httpx.AsyncClient`` stand-in usable with ``async with``."""
    mock_response = MagicMock()
    mock_response.json.return_value = json_data
    mock_response.raise_for_status = MagicMock()

    mock_client = AsyncMock()
    if side_effect is not None:
        mock_client.get = AsyncMock(side_effect=side_effect)
    else:
        mock_client.get = AsyncMock(return_value=mock_response)
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=False)
    return mock_client


@pytest.fixture
def http_client_factory():
    """Return ``make_mock_http_client`` for tests that patch ``httpx.AsyncClient``."""
    return make_mock_http_client

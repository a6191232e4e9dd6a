"""Integration tests for generation against the bundled template catalog.

These tests run the real generator for every project type with the version
lookup disabled and verify that the generated tree is complete and that
every placeholder was substituted.

No network access is required.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from kvwizard.config import Config
from kvwizard.scaffolder import PROJECT_TYPES, TemplateRenderer, generate_project
from kvwizard.scaffolder.models import ProjectIdentity
from kvwizard.scaffolder.tree import plan_tree

ALL_TYPES = sorted(PROJECT_TYPES)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _planned_destinations(project_type: str) -> list[str]:
    identity = ProjectIdentity(artifact_id="myapp", group_id="com.example")
    return sorted(
        d for node in plan_tree(identity, PROJECT_TYPES[project_type]) for d in node.destinations()
    )


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------

@pytest.mark.integration
class TestBundledCatalog:
    @pytest.mark.parametrize("project_type", ALL_TYPES)
    def test_every_planned_template_exists(self, project_type):
        renderer = TemplateRenderer()
        identity = ProjectIdentity(artifact_id="myapp", group_id="com.example")
        missing = [
            f.template_id
            for node in plan_tree(identity, PROJECT_TYPES[project_type])
            for f in node.files
            if not renderer.has_template(f.template_id)
        ]
        assert missing == []


@pytest.mark.integration
class TestScaffoldProjects:
    @pytest.mark.parametrize("project_type", ALL_TYPES)
    async def test_generates_complete_tree(self, project_type, tmp_path: Path):
        result = await generate_project(
            tmp_path, "myapp", "com.example", project_type, Config(offline=True)
        )

        assert result.success is True, result.error
        assert result.files == _planned_destinations(project_type)

    @pytest.mark.parametrize("project_type", ALL_TYPES)
    async def test_no_placeholders_left(self, project_type, tmp_path: Path):
        result = await generate_project(
            tmp_path, "myapp", "com.example", project_type, Config(offline=True)
        )

        for rel in result.files:
            content = (result.project_root / rel).read_text(encoding="utf-8")
            assert "${" not in content, rel

    async def test_ktor_project_contents(self, tmp_path: Path):
        result = await generate_project(
            tmp_path, "myapp", "com.example", "ktor", Config(offline=True)
        )
        root = result.project_root

        main = (root / "src/backendMain/kotlin/com/example/myapp/Main.kt").read_text(encoding="utf-8")
        assert main.startswith("package com.example.myapp\n")

        conf = (root / "src/backendMain/resources/application.conf").read_text(encoding="utf-8")
        assert "com.example.myapp.MainKt.main" in conf

        props = (root / "gradle.properties").read_text(encoding="utf-8")
        assert "group=com.example" in props
        assert "kvisionVersion=3.16.3" in props
        assert "ktorVersion=1.4.2" in props

        settings = (root / "settings.gradle.kts").read_text(encoding="utf-8")
        assert 'rootProject.name = "myapp"' in settings

        app_spec = (root / "src/frontendTest/kotlin/test/com/example/myapp/AppSpec.kt").read_text(
            encoding="utf-8"
        )
        assert app_spec.startswith("package test.com.example.myapp\n")

        assert (root / "gradle" / "wrapper").is_dir()
        assert (root / "idea_config" / "gradle.xml").is_file()
        assert len(list((root / "webpack.config.d").iterdir())) == 8

    async def test_json_files_are_valid(self, tmp_path: Path):
        result = await generate_project(
            tmp_path, "myapp", "com.example", "spring", Config(offline=True)
        )
        app = json.loads((result.project_root / "app.json").read_text(encoding="utf-8"))
        gettext = json.loads((result.project_root / ".gettext.json").read_text(encoding="utf-8"))

        assert app["name"] == "myapp"
        assert "myapp-frontend" in gettext["js"]["glob"]["pattern"]

    async def test_spring_versions(self, tmp_path: Path):
        result = await generate_project(
            tmp_path, "shop", "org.acme", "spring", Config(offline=True)
        )
        build = (result.project_root / "build.gradle.kts").read_text(encoding="utf-8")
        props = (result.project_root / "gradle.properties").read_text(encoding="utf-8")

        assert 'id("org.springframework.boot") version "2.3.5.RELEASE"' in build
        assert 'val mainClassName = "org.acme.shop.MainKt"' in build
        assert "r2dbcH2Version=0.8.4.RELEASE" in props

    async def test_frontend_only_project(self, tmp_path: Path):
        result = await generate_project(
            tmp_path, "myapp", "com.example", "frontend", Config(offline=True)
        )
        root = result.project_root

        assert result.success is True
        assert not (root / "src" / "backendMain").exists()
        assert (root / "src/commonMain/kotlin/com/example/myapp").is_dir()
        assert 'kotlin("js")' in (root / "build.gradle.kts").read_text(encoding="utf-8")

"""Command line entry point for the KVision project wizard.

Usage::

    python -m kvwizard myapp com.example
    python -m kvwizard myapp com.example --type spring -o ./projects
    python -m kvwizard myapp com.example --offline
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional, Sequence

from rich.markup import escape

from kvwizard.config import Config
from kvwizard.scaffolder.generator import generate_project
from kvwizard.scaffolder.project_types import PROJECT_TYPES
from kvwizard.utils import console, print_error, print_success, print_summary_table


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kvwizard",
        description="KVision project wizard -- scaffolds a multi-module KVision project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python -m kvwizard myapp com.example\n"
            "  python -m kvwizard myapp com.example --type spring -o ./projects\n"
            "  python -m kvwizard --list-types\n"
        ),
    )
    parser.add_argument("artifact_id", nargs="?", help="Artifact id, e.g. myapp")
    parser.add_argument("group_id", nargs="?", help="Group id, e.g. com.example")
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Parent directory for the project (default: KVWIZARD_OUTPUT_DIR or .)",
    )
    parser.add_argument(
        "--type", "-t",
        dest="project_type",
        default=None,
        choices=sorted(PROJECT_TYPES),
        help="Project type (default: KVWIZARD_PROJECT_TYPE or ktor)",
    )
    parser.add_argument(
        "--offline",
        action="store_true",
        help="Use the bundled dependency versions without contacting the version service",
    )
    parser.add_argument("--versions-url", default=None, help="Override the version document URL")
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Version request timeout in seconds (default: 10)",
    )
    parser.add_argument(
        "--template-dir",
        default=None,
        help="Use templates from this directory instead of the bundled catalog",
    )
    parser.add_argument(
        "--list-types",
        action="store_true",
        help="List the available project types and exit",
    )
    return parser


def _settings_from_args(args: argparse.Namespace) -> Config:
    """Overlay command line options on the environment configuration."""
    settings = Config.from_env()
    if args.output:
        settings.output_dir = Path(args.output)
    if args.project_type:
        settings.project_type = args.project_type
    if args.offline:
        settings.offline = True
    if args.versions_url:
        settings.versions.url = args.versions_url
    if args.timeout is not None:
        settings.versions.timeout = args.timeout
    if args.template_dir:
        settings.template_dir = Path(args.template_dir)
    return settings


def _print_project_types() -> None:
    print_summary_table(
        {
            name: "frontend only" if config.frontend_only else "fullstack"
            for name, config in sorted(PROJECT_TYPES.items())
        },
        title="Project types",
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point for ``python -m kvwizard``. Returns the exit code."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.list_types:
        _print_project_types()
        return 0

    if not args.artifact_id or not args.group_id:
        console.print("[bold red]Error:[/bold red] artifact_id and group_id are required")
        parser.print_usage()
        return 1

    try:
        settings = _settings_from_args(args)
    except ValueError as exc:
        console.print(f"[bold red]Error:[/bold red] Invalid configuration: {escape(str(exc))}")
        return 1

    result = asyncio.run(
        generate_project(
            settings.output_dir,
            args.artifact_id,
            args.group_id,
            settings=settings,
        )
    )

    if not result.success:
        print_error(f"Project generation failed: {escape(result.error or '')}")
        return 1

    summary = {
        "Project root": str(result.project_root),
        "Project type": settings.project_type,
        "Package": f"{args.group_id}.{args.artifact_id}",
        "Files written": str(len(result.files)),
    }
    if result.versions is not None:
        summary["KVision"] = result.versions.kvision
        summary["Kotlin"] = result.versions.kotlin
    print_summary_table(summary, title="KVision project")
    print_success("Project generated successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())

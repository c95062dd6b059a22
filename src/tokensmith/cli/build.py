"""
Build CLI commands.

- build: compile token sources into every configured artifact
- init: write a default tokensmith.yaml
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tokensmith.cli.utils import configure_logging, resolve_project
from tokensmith.core.config import load_config, scaffold_config
from tokensmith.core.errors import ConfigError, TokenSourceError
from tokensmith.core.orchestrator import BuildReport, run_build

console = Console()


def _print_report(report: BuildReport, project_root: Path) -> None:
    table = Table(title=f"Built {report.token_count} tokens")
    table.add_column("Platform", style="cyan")
    table.add_column("Files")
    table.add_column("Status")

    for platform in report.platforms:
        files = "\n".join(
            str(path.relative_to(project_root)) if path.is_relative_to(project_root) else str(path)
            for path in platform.files_created
        )
        status = "[green]ok[/green]" if platform.success else "[red]failed[/red]"
        table.add_row(platform.name, files or "-", status)

    console.print(table)

    for error in report.errors:
        console.print(f"[red]✗ {escape(error)}[/red]")


def build_command(
    project: str | None = typer.Option(
        None, "--project", "-p", help="Token project directory (default: current)"
    ),
    config_file: str | None = typer.Option(
        None, "--config", "-c", help="Config file (default: <project>/tokensmith.yaml)"
    ),
    platform: list[str] | None = typer.Option(
        None, "--platform", help="Only build these platforms (repeatable)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Compile token sources into CSS, JS, TypeScript, Swift, Kotlin and JSON."""
    configure_logging(verbose)
    project_root = resolve_project(project)

    try:
        config = load_config(project_root, Path(config_file) if config_file else None)
        report = run_build(project_root, config, platform or None)
    except (TokenSourceError, ConfigError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    _print_report(report, project_root)

    if not report.success:
        console.print(
            f"[red]Build failed for: {', '.join(report.failed_platforms)}[/red]"
        )
        raise typer.Exit(code=1)


def init_command(
    project: str | None = typer.Option(
        None, "--project", "-p", help="Token project directory (default: current)"
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
) -> None:
    """Write a default tokensmith.yaml."""
    project_root = resolve_project(project)
    path = scaffold_config(project_root, overwrite=force)
    if path is None:
        typer.echo("tokensmith.yaml already exists. Use --force to overwrite.")
        raise typer.Exit(code=1)
    typer.echo(f"✓ Created {path}")

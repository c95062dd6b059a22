"""
tokensmith CLI Utilities.

Shared utility functions used across CLI modules.
"""

import logging
import platform
from pathlib import Path

import typer

from tokensmith._version import get_version
from tokensmith.core.config import default_log_level

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"tokensmith version {get_version()}")
        typer.echo(f"  Python:        {platform.python_implementation()} {platform.python_version()}")
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        raise typer.Exit()


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging for a CLI run.

    ``--verbose`` wins over TOKENSMITH_LOG_LEVEL.
    """
    level = "DEBUG" if verbose else default_log_level()
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT, force=True)


def resolve_project(project: str | None) -> Path:
    """Project directory from --project, defaulting to the current directory."""
    root = Path(project or ".").resolve()
    if not root.is_dir():
        typer.echo(f"Project directory not found: {root}", err=True)
        raise typer.Exit(code=1)
    return root

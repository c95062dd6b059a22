"""Package version lookup."""

import tomllib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as distribution_version
from pathlib import Path

DISTRIBUTION = "tokensmith"
# src/tokensmith/_version.py -> repository root
_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def _source_tree_version(pyproject: Path) -> str | None:
    try:
        with pyproject.open("rb") as f:
            project = tomllib.load(f).get("project", {})
    except (OSError, tomllib.TOMLDecodeError):
        return None
    if project.get("name") != DISTRIBUTION:
        return None
    return project.get("version")


def get_version() -> str:
    """Return the installed distribution version.

    Falls back to ``[project].version`` in the checkout's pyproject.toml when
    running from a source tree that was never installed.
    """
    try:
        return distribution_version(DISTRIBUTION)
    except PackageNotFoundError:
        return _source_tree_version(_PYPROJECT) or "0.0.0"

"""
Build configuration persistence.

Handles reading and writing tokensmith.yaml in the project root. When no
file exists the default layout is used: three layered CSS files, the web
module and its declarations, literal types, Swift and Kotlin sources, the
flat JSON map and the package index.

Default location: {project_root}/tokensmith.yaml
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from .errors import ConfigError
from .ir import BuildConfig, OutputFileConfig, PlatformConfig

logger = logging.getLogger(__name__)

CONFIG_FILE = "tokensmith.yaml"
LOG_LEVEL_ENV = "TOKENSMITH_LOG_LEVEL"


# =============================================================================
# Path helpers
# =============================================================================


def get_config_path(project_root: Path) -> Path:
    """Get the tokensmith.yaml file path."""
    return project_root / CONFIG_FILE


def config_exists(project_root: Path) -> bool:
    return get_config_path(project_root).exists()


def default_log_level() -> str:
    """Log level from TOKENSMITH_LOG_LEVEL, INFO when unset or unknown."""
    level = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
    if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
        return "INFO"
    return level


# =============================================================================
# Defaults
# =============================================================================


def _css_layer_file(destination: str, layer: str, layer_name: str) -> OutputFileConfig:
    return OutputFileConfig(
        destination=destination,
        format="css/variables-with-fallbacks",
        filter=layer,
        options={"layer_name": layer_name},
    )


def create_default_config() -> BuildConfig:
    """The default platform layout.

    CSS layer files are declared primitive, semantic, component: ``@layer``
    precedence follows declaration order, so consumers must load them in
    that order too.
    """
    return BuildConfig(
        platforms=[
            PlatformConfig(
                name="css",
                files=[
                    _css_layer_file("primitives.css", "primitive", "tokens.primitives"),
                    _css_layer_file("semantic.css", "semantic", "tokens.semantic"),
                    _css_layer_file("components.css", "component", "tokens.components"),
                ],
            ),
            PlatformConfig(
                name="js",
                files=[
                    OutputFileConfig(destination="tokens.js", format="javascript/es6"),
                    OutputFileConfig(
                        destination="tokens.d.ts", format="typescript/es6-declarations"
                    ),
                ],
            ),
            PlatformConfig(
                name="types",
                files=[OutputFileConfig(destination="types.d.ts", format="typescript/token-types")],
            ),
            PlatformConfig(
                name="ios",
                build_path="dist/ios/",
                files=[OutputFileConfig(destination="DesignTokens.swift", format="ios/swift-enum")],
            ),
            PlatformConfig(
                name="android",
                build_path="dist/android/",
                files=[
                    OutputFileConfig(destination="DesignTokens.kt", format="android/kotlin-object")
                ],
            ),
            PlatformConfig(
                name="json",
                files=[OutputFileConfig(destination="tokens.json", format="json/flat-map")],
            ),
            PlatformConfig(
                name="index",
                files=[
                    OutputFileConfig(destination="index.js", format="javascript/index"),
                    OutputFileConfig(destination="index.d.ts", format="typescript/index"),
                ],
            ),
        ]
    )


# =============================================================================
# Loading
# =============================================================================


def load_config(
    project_root: Path,
    config_path: Path | None = None,
    *,
    use_defaults: bool = True,
) -> BuildConfig:
    """Load the build configuration.

    Args:
        project_root: Root directory of the token project.
        config_path: Explicit config file; defaults to {project_root}/tokensmith.yaml.
        use_defaults: If True, return the default config when the file doesn't exist.

    Returns:
        BuildConfig instance.

    Raises:
        ConfigError: If the file doesn't exist (when use_defaults=False) or is invalid.
    """
    path = config_path or get_config_path(project_root)

    if not path.exists():
        if use_defaults and config_path is None:
            logger.debug("No tokensmith.yaml found, using defaults")
            return create_default_config()
        raise ConfigError(f"Config not found: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not data:
        if use_defaults:
            logger.warning(f"Empty config at {path}, using defaults")
            return create_default_config()
        raise ConfigError(f"Empty or invalid YAML in {path}")

    if not isinstance(data, dict):
        raise ConfigError(f"Config root must be a mapping in {path}")

    if "platforms" not in data:
        data = {**data, "platforms": create_default_config().model_dump(mode="json")["platforms"]}

    try:
        return BuildConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config schema in {path}: {e}") from e


def save_config(project_root: Path, config: BuildConfig) -> Path:
    """Save a BuildConfig to tokensmith.yaml."""
    path = get_config_path(project_root)
    data = config.model_dump(mode="json", exclude_none=True)

    path.write_text(
        yaml.dump(
            data,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        ),
        encoding="utf-8",
    )

    logger.info(f"Saved config to {path}")
    return path


def scaffold_config(project_root: Path, *, overwrite: bool = False) -> Path | None:
    """Write the default tokensmith.yaml.

    Returns:
        Path to created file, or None if one already exists and overwrite is False.
    """
    path = get_config_path(project_root)
    if path.exists() and not overwrite:
        logger.debug(f"Skipping existing config: {path}")
        return None
    return save_config(project_root, create_default_config())

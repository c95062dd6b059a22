"""
Build orchestrator.

Drives one build: load the configuration and token sources, then produce
every configured output file. Each (platform, file) pair is an independent
filter -> format -> write job over the read-only TokenDictionary, so jobs run
in a thread pool and a failure in one is recorded without stopping the rest.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path

from ..emitters import get_format, list_formats
from .config import load_config
from .errors import ConfigError, EmitError
from .ir import BuildConfig, OutputFileConfig, PlatformConfig, Token, TokenDictionary
from .layers import FILTERS, is_unclassified_token
from .loader import load_tokens

logger = logging.getLogger(__name__)


@dataclass
class PlatformResult:
    """
    Outcome of one platform.

    Attributes:
        name: Platform name from the config
        files_created: Files written, in declaration order
        errors: Path-qualified error messages for files that failed
    """

    name: str
    files_created: list[Path] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return len(self.errors) == 0


@dataclass
class BuildReport:
    """Outcome of a whole build."""

    platforms: list[PlatformResult] = field(default_factory=list)
    token_count: int = 0

    @property
    def success(self) -> bool:
        return all(platform.success for platform in self.platforms)

    @property
    def files_created(self) -> list[Path]:
        return [path for platform in self.platforms for path in platform.files_created]

    @property
    def errors(self) -> list[str]:
        return [error for platform in self.platforms for error in platform.errors]

    @property
    def failed_platforms(self) -> list[str]:
        return [platform.name for platform in self.platforms if not platform.success]


# =============================================================================
# Single file
# =============================================================================


def select_tokens(dictionary: TokenDictionary, file_config: OutputFileConfig) -> list[Token]:
    """Apply a file's named filter and optional type restriction.

    Raises:
        ConfigError: If the filter name is not registered.
    """
    predicate = FILTERS.get(file_config.filter)
    if predicate is None:
        raise ConfigError(
            f"Unknown filter '{file_config.filter}' (known: {', '.join(FILTERS)})"
        )
    tokens = dictionary.filter(predicate)
    if file_config.types:
        allowed = set(file_config.types)
        tokens = [token for token in tokens if token.type in allowed]
    return tokens


def render_file(dictionary: TokenDictionary, file_config: OutputFileConfig) -> str:
    """Filter and format one output file without writing it.

    Raises:
        ConfigError: If the format or filter name is not registered.
    """
    format_fn = get_format(file_config.format)
    if format_fn is None:
        raise ConfigError(
            f"Unknown format '{file_config.format}' (known: {', '.join(list_formats())})"
        )
    return format_fn(select_tokens(dictionary, file_config), file_config.options)


def _platform_dir(output_root: Path, config: BuildConfig, platform: PlatformConfig) -> Path:
    return output_root / (platform.build_path or config.build_path)


def _write_file(
    dictionary: TokenDictionary, file_config: OutputFileConfig, destination: Path
) -> Path:
    content = render_file(dictionary, file_config)
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(content, encoding="utf-8")
    except OSError as e:
        raise EmitError(f"Cannot write {destination}: {e}") from e
    return destination


# =============================================================================
# Whole build
# =============================================================================


def build(
    dictionary: TokenDictionary,
    config: BuildConfig,
    output_root: Path,
    platforms: list[str] | None = None,
) -> BuildReport:
    """Build every configured output file.

    Args:
        dictionary: Loaded tokens (never modified).
        config: Build configuration.
        output_root: Directory build paths are relative to (the project root).
        platforms: Restrict the build to these platform names.

    Returns:
        BuildReport with per-platform files and errors, in declaration order.

    Raises:
        ConfigError: If a requested platform is not configured.
    """
    selected = config.platforms
    if platforms:
        unknown = [name for name in platforms if config.get_platform(name) is None]
        if unknown:
            raise ConfigError(
                f"Unknown platform(s): {', '.join(unknown)} "
                f"(configured: {', '.join(config.platform_names())})"
            )
        selected = [p for p in config.platforms if p.name in platforms]

    unclassified = dictionary.filter(is_unclassified_token)
    if unclassified:
        logger.debug(
            f"{len(unclassified)} token(s) match no CSS layer and are left out of CSS output: "
            + ", ".join(token.name for token in unclassified)
        )

    results = {platform.name: PlatformResult(platform.name) for platform in selected}
    jobs: list[tuple[PlatformConfig, OutputFileConfig, Path]] = [
        (platform, file_config, _platform_dir(output_root, config, platform) / file_config.destination)
        for platform in selected
        for file_config in platform.files
    ]
    outcomes: dict[int, Path | str] = {}

    if jobs:
        max_workers = min(config.max_workers, len(jobs))
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = {
                executor.submit(_write_file, dictionary, file_config, destination): index
                for index, (_, file_config, destination) in enumerate(jobs)
            }
            for future in as_completed(futures):
                index = futures[future]
                platform, file_config, destination = jobs[index]
                try:
                    outcomes[index] = future.result()
                    logger.info(f"[{platform.name}] wrote {destination}")
                except Exception as e:
                    message = f"{platform.name}/{file_config.destination}: {e}"
                    logger.error(f"[{platform.name}] failed to build {destination}: {e}")
                    outcomes[index] = message

    # Report in declaration order regardless of completion order
    for index, (platform, _, _) in enumerate(jobs):
        outcome = outcomes[index]
        if isinstance(outcome, Path):
            results[platform.name].files_created.append(outcome)
        else:
            results[platform.name].errors.append(outcome)

    return BuildReport(platforms=list(results.values()), token_count=len(dictionary))


def run_build(
    project_root: Path,
    config: BuildConfig | None = None,
    platforms: list[str] | None = None,
) -> BuildReport:
    """Load config and sources from ``project_root`` and build.

    Raises:
        TokenSourceError: If the token sources are invalid (aborts the run).
        ConfigError: If the configuration is invalid.
    """
    config = config or load_config(project_root)
    dictionary = load_tokens(project_root, config.source)
    return build(dictionary, config, project_root, platforms)

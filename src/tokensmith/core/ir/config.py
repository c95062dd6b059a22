"""
Build configuration IR types.

Defines the structure of tokensmith.yaml: where token sources live, where
artifacts go, and which platforms and output files to produce. Format and
filter names are resolved against the capability tables at build time.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .tokens import TokenType

DEFAULT_SOURCES: tuple[str, ...] = (
    "src/primitives/**/*.json",
    "src/semantic/**/*.json",
    "src/component/**/*.json",
)


class OutputFileConfig(BaseModel):
    """One artifact produced by a platform."""

    model_config = ConfigDict(frozen=True)

    destination: str = Field(description="File name relative to the platform build path")
    format: str = Field(description="Name of a registered format function")
    filter: str = Field(default="all", description="Name of a registered token filter")
    types: list[TokenType] | None = Field(
        default=None, description="Restrict the file to these token types"
    )
    options: dict[str, Any] = Field(default_factory=dict)


class PlatformConfig(BaseModel):
    """A named group of output files sharing a build path."""

    model_config = ConfigDict(frozen=True)

    name: str
    build_path: str | None = Field(
        default=None, description="Overrides the top-level build_path for this platform"
    )
    files: list[OutputFileConfig] = Field(default_factory=list)


class BuildConfig(BaseModel):
    """Root of tokensmith.yaml."""

    model_config = ConfigDict(frozen=True)

    source: list[str] = Field(default_factory=lambda: list(DEFAULT_SOURCES))
    build_path: str = "dist/"
    max_workers: int = Field(default=4, ge=1, le=64)
    platforms: list[PlatformConfig] = Field(default_factory=list)

    def get_platform(self, name: str) -> PlatformConfig | None:
        for platform in self.platforms:
            if platform.name == name:
                return platform
        return None

    def platform_names(self) -> list[str]:
        return [platform.name for platform in self.platforms]

"""
Unit tests for the build orchestrator.

Covers the default layout end to end, per-file failure isolation and
platform selection.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from tokensmith.core.config import create_default_config
from tokensmith.core.errors import ConfigError, TokenSourceError
from tokensmith.core.ir import BuildConfig, OutputFileConfig, PlatformConfig, TokenType
from tokensmith.core.orchestrator import build, render_file, run_build, select_tokens
from tokensmith.emitters import FORMATS, format_swift, get_format, list_formats


def _config(*platforms: PlatformConfig, **kwargs) -> BuildConfig:
    return BuildConfig(platforms=list(platforms), **kwargs)


class TestFormats:
    def test_get_known_format(self):
        assert get_format("ios/swift-enum") is format_swift

    def test_get_unknown_format(self):
        assert get_format("text/plain") is None

    def test_list_formats(self):
        assert list_formats() == [
            "css/variables-with-fallbacks",
            "javascript/es6",
            "typescript/es6-declarations",
            "typescript/token-types",
            "javascript/index",
            "typescript/index",
            "ios/swift-enum",
            "android/kotlin-object",
            "json/flat-map",
        ]

    def test_unknown_format_lists_known_names(self, token_dictionary):
        file_config = OutputFileConfig(destination="a.txt", format="text/plain")
        with pytest.raises(ConfigError, match="known: css/variables-with-fallbacks, "):
            render_file(token_dictionary, file_config)


class TestSelectTokens:
    def test_named_filter(self, token_dictionary):
        file_config = OutputFileConfig(destination="a.css", format="json/flat-map", filter="component")
        assert [t.name for t in select_tokens(token_dictionary, file_config)] == [
            "component.button.primary-bg"
        ]

    def test_type_restriction(self, token_dictionary):
        file_config = OutputFileConfig(
            destination="a.json", format="json/flat-map", types=[TokenType.DURATION]
        )
        assert [t.name for t in select_tokens(token_dictionary, file_config)] == ["duration.fast"]

    def test_unknown_filter(self, token_dictionary):
        file_config = OutputFileConfig(destination="a.json", format="json/flat-map", filter="brand")
        with pytest.raises(ConfigError, match="Unknown filter 'brand'"):
            select_tokens(token_dictionary, file_config)

    def test_unknown_format(self, token_dictionary):
        file_config = OutputFileConfig(destination="a.txt", format="text/plain")
        with pytest.raises(ConfigError, match="Unknown format 'text/plain'"):
            render_file(token_dictionary, file_config)


class TestBuild:
    """Tests for build()."""

    def test_default_layout(self, token_dictionary, tmp_path: Path):
        report = build(token_dictionary, create_default_config(), tmp_path)

        assert report.success
        assert report.token_count == 11
        for relative in [
            "dist/primitives.css",
            "dist/semantic.css",
            "dist/components.css",
            "dist/tokens.js",
            "dist/tokens.d.ts",
            "dist/types.d.ts",
            "dist/tokens.json",
            "dist/index.js",
            "dist/index.d.ts",
            "dist/ios/DesignTokens.swift",
            "dist/android/DesignTokens.kt",
        ]:
            assert (tmp_path / relative).is_file(), relative
        assert len(report.files_created) == 11

    def test_files_reported_in_declaration_order(self, token_dictionary, tmp_path: Path):
        report = build(token_dictionary, create_default_config(), tmp_path)
        css = report.platforms[0]
        assert css.name == "css"
        assert [path.name for path in css.files_created] == [
            "primitives.css",
            "semantic.css",
            "components.css",
        ]

    def test_css_files_carry_their_layer(self, token_dictionary, tmp_path: Path):
        build(token_dictionary, create_default_config(), tmp_path)
        semantic = (tmp_path / "dist" / "semantic.css").read_text()
        assert semantic.startswith("@layer tokens.semantic {")
        assert "--color-text-primary: var(--color-blue-500);" in semantic
        assert "--color-blue-500:" not in semantic

    def test_failure_is_isolated(self, token_dictionary, tmp_path: Path):
        config = _config(
            PlatformConfig(
                name="broken",
                files=[OutputFileConfig(destination="x.txt", format="text/plain")],
            ),
            PlatformConfig(
                name="json",
                files=[OutputFileConfig(destination="tokens.json", format="json/flat-map")],
            ),
        )
        report = build(token_dictionary, config, tmp_path)

        assert not report.success
        assert report.failed_platforms == ["broken"]
        assert report.errors[0].startswith("broken/x.txt: ")
        assert (tmp_path / "dist" / "tokens.json").is_file()

    def test_format_exception_is_isolated(self, token_dictionary, tmp_path: Path, caplog):
        def explode(tokens, options):
            raise RuntimeError("format crashed")

        def lookup(name):
            return explode if name == "ios/swift-enum" else FORMATS.get(name)

        with patch("tokensmith.core.orchestrator.get_format", side_effect=lookup):
            with caplog.at_level(logging.ERROR):
                report = build(token_dictionary, create_default_config(), tmp_path)

        assert report.failed_platforms == ["ios"]
        assert report.errors == ["ios/DesignTokens.swift: format crashed"]
        assert "format crashed" in caplog.text
        assert (tmp_path / "dist" / "android" / "DesignTokens.kt").is_file()
        assert not (tmp_path / "dist" / "ios" / "DesignTokens.swift").exists()

    def test_write_failure_is_isolated(self, token_dictionary, tmp_path: Path):
        # A file where the platform directory should be
        (tmp_path / "blocked").write_text("")
        config = _config(
            PlatformConfig(
                name="blocked",
                build_path="blocked/",
                files=[OutputFileConfig(destination="tokens.json", format="json/flat-map")],
            ),
            PlatformConfig(
                name="json",
                files=[OutputFileConfig(destination="tokens.json", format="json/flat-map")],
            ),
        )
        report = build(token_dictionary, config, tmp_path)
        assert report.failed_platforms == ["blocked"]
        assert "Cannot write" in report.errors[0]

    def test_platform_selection(self, token_dictionary, tmp_path: Path):
        report = build(token_dictionary, create_default_config(), tmp_path, ["json", "css"])
        assert [platform.name for platform in report.platforms] == ["css", "json"]
        assert not (tmp_path / "dist" / "tokens.js").exists()

    def test_unknown_platform(self, token_dictionary, tmp_path: Path):
        with pytest.raises(ConfigError, match="Unknown platform"):
            build(token_dictionary, create_default_config(), tmp_path, ["web"])

    def test_single_worker(self, token_dictionary, tmp_path: Path):
        config = create_default_config().model_copy(update={"max_workers": 1})
        assert build(token_dictionary, config, tmp_path).success

    def test_no_platforms(self, token_dictionary, tmp_path: Path):
        report = build(token_dictionary, _config(), tmp_path)
        assert report.success
        assert report.platforms == []

    def test_dictionary_is_not_modified(self, token_dictionary, tmp_path: Path):
        before = [token.model_dump() for token in token_dictionary]
        build(token_dictionary, create_default_config(), tmp_path)
        assert [token.model_dump() for token in token_dictionary] == before


class TestRunBuild:
    """Tests for run_build()."""

    def test_from_project(self, token_project: Path):
        report = run_build(token_project)
        assert report.success
        data = json.loads((token_project / "dist" / "tokens.json").read_text())
        assert data["component.button.primary-bg"]["$value"] == "oklch(0.6 0.15 250)"

    def test_invalid_source_aborts(self, token_project: Path):
        (token_project / "src" / "semantic" / "bad.json").write_text(
            json.dumps({"space": {"lg": {"$type": "dimension", "$description": "Large gap"}}})
        )
        with pytest.raises(TokenSourceError, match="space.lg"):
            run_build(token_project)
        assert not (token_project / "dist").exists()

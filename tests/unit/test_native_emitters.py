"""
Unit tests for the Swift and Kotlin emitters.
"""

from __future__ import annotations

from tests.conftest import make_token
from tokensmith.core.color import oklch_to_rgb
from tokensmith.core.ir import TokenType
from tokensmith.emitters.kotlin import dimension_unit, format_kotlin
from tokensmith.emitters.native import (
    ROOT_SUBGROUP,
    build_tree,
    first_shadow,
    kotlin_shadow_elevation,
    swift_shadow_constants,
)
from tokensmith.emitters.swift import format_swift

SHADOW = {
    "offsetX": "0px",
    "offsetY": "4px",
    "blur": "8px",
    "spread": "0px",
    "color": "rgba(0, 0, 0, 0.25)",
}


class TestBuildTree:
    """Tests for the shared declaration tree."""

    def test_nesting(self, token_dictionary):
        tree = {namespace.name: namespace for namespace in build_tree(list(token_dictionary))}
        color = tree["color"]
        assert list(color.subgroups) == ["blue", "neutral", ROOT_SUBGROUP, "text"]
        assert [leaf.name for leaf in color.subgroups["blue"]] == ["s500"]
        assert [leaf.name for leaf in color.subgroups[ROOT_SUBGROUP]] == ["brandAccent"]

    def test_deep_paths_join_remaining_segments(self):
        token = make_token("typography.heading.h1.size", "2rem", TokenType.DIMENSION)
        (namespace,) = build_tree([token])
        assert [leaf.name for leaf in namespace.subgroups["heading"]] == ["h1Size"]

    def test_first_shadow(self):
        assert first_shadow([SHADOW, {"blur": "1px"}]) == SHADOW
        assert first_shadow(SHADOW) == SHADOW
        assert first_shadow([]) is None
        assert first_shadow("0 1px 2px #000") is None


class TestSwift:
    """Tests for DesignTokens.swift."""

    def test_structure(self, token_dictionary):
        swift = format_swift(list(token_dictionary), {})
        assert swift.startswith("// DesignTokens.swift\n")
        assert "import UIKit" in swift
        assert "public enum DesignTokens {" in swift
        assert "    // MARK: - Color\n    public enum Color {" in swift
        assert "        public enum Blue {" in swift
        assert swift.rstrip().endswith("// swiftlint:enable all")

    def test_color_channels_match_conversion(self, token_dictionary):
        swift = format_swift(list(token_dictionary), {})
        r, g, b = oklch_to_rgb(0.6, 0.15, 250)
        expected = (
            f"            public static let s500 = UIColor(red: {r / 255:.3f}, "
            f"green: {g / 255:.3f}, blue: {b / 255:.3f}, alpha: 1.000)"
        )
        assert expected in swift
        assert "            /// Brand blue" in swift

    def test_hex_color(self, token_dictionary):
        swift = format_swift(list(token_dictionary), {})
        assert (
            "        public static let brandAccent = "
            "UIColor(red: 1.000, green: 0.000, blue: 0.667, alpha: 1.000)"
        ) in swift

    def test_resolved_reference(self, token_dictionary):
        swift = format_swift(list(token_dictionary), {})
        assert "    public enum Component {" in swift
        assert "            public static let primaryBg = UIColor(" in swift

    def test_dimensions(self, token_dictionary):
        swift = format_swift(list(token_dictionary), {})
        assert "        public static let md: CGFloat = 24" in swift
        assert "        public static let s4: CGFloat = 16" in swift

    def test_dynamic_dimension_is_comment(self):
        swift = format_swift([make_token("size.full", "100%", TokenType.DIMENSION)], {})
        assert "        // full: 100% (dynamic — resolve at runtime)" in swift
        assert "let full" not in swift

    def test_duration_seconds(self, token_dictionary):
        swift = format_swift(list(token_dictionary), {})
        assert "        public static let fast: TimeInterval = 0.2" in swift

    def test_malformed_duration(self):
        swift = format_swift([make_token("duration.slow", "fast", TokenType.DURATION)], {})
        assert "public static let slow: TimeInterval = 0 // fast" in swift

    def test_cubic_bezier(self, token_dictionary):
        swift = format_swift(list(token_dictionary), {})
        assert "public static let standard = CAMediaTimingFunction(controlPoints: 0.4, 0, 0.2, 1)" in swift

    def test_font_family_uses_first_entry(self):
        token = make_token("font.family.body", ["Inter", "sans-serif"], TokenType.FONT_FAMILY)
        assert 'public static let body = "Inter"' in format_swift([token], {})

    def test_font_weights(self):
        tokens = [
            make_token("font.weight.semibold", 600, TokenType.FONT_WEIGHT),
            make_token("font.weight.black", "900", TokenType.FONT_WEIGHT),
        ]
        swift = format_swift(tokens, {})
        assert "public static let semibold: UIFont.Weight = .semibold" in swift
        assert "public static let black: UIFont.Weight = .regular" in swift

    def test_number(self):
        swift = format_swift([make_token("opacity.disabled", 0.5, TokenType.NUMBER)], {})
        assert "public static let disabled: CGFloat = 0.5" in swift

    def test_unparseable_color(self):
        swift = format_swift([make_token("color.link", "currentColor", TokenType.COLOR)], {})
        assert 'public static let link = "currentColor" // requires runtime conversion' in swift

    def test_untyped_token_has_no_constant(self):
        swift = format_swift([make_token("misc.flag", "on")], {})
        assert "flag" not in swift

    def test_shadow(self, token_dictionary):
        swift = format_swift(list(token_dictionary), {})
        assert "        /// Shadow: offset(0px, 4px), blur: 8px, spread: 0px" in swift
        assert (
            "        public static let mdColor = "
            "UIColor(red: 0.000, green: 0.000, blue: 0.000, alpha: 0.250)"
        ) in swift
        assert "        public static let mdRadius: CGFloat = 8" in swift
        assert "        public static let mdOffset = CGSize(width: 0, height: 4)" in swift
        assert "mdSpread" not in swift

    def test_shadow_without_static_blur(self):
        lines = swift_shadow_constants("sm", {**SHADOW, "blur": "var(--blur)"}, "")
        assert not any("smRadius" in line for line in lines)
        assert any("smOffset" in line for line in lines)

    def test_enum_name_option(self):
        swift = format_swift([], {"enum_name": "BrandTokens"})
        assert "public enum BrandTokens {" in swift


class TestKotlin:
    """Tests for DesignTokens.kt."""

    def test_structure(self, token_dictionary):
        kotlin = format_kotlin(list(token_dictionary), {})
        assert "package com.example.design.tokens" in kotlin
        assert '@Suppress("unused", "MagicNumber")' in kotlin
        assert "object DesignTokens {" in kotlin
        assert "    object Color {" in kotlin
        assert "        object Blue {" in kotlin

    def test_package_option(self):
        kotlin = format_kotlin([], {"package": "com.acme.tokens", "object_name": "AcmeTokens"})
        assert "package com.acme.tokens" in kotlin
        assert "object AcmeTokens {" in kotlin

    def test_colors(self, token_dictionary):
        kotlin = format_kotlin(list(token_dictionary), {})
        r, g, b = oklch_to_rgb(0.6, 0.15, 250)
        assert f"            val s500 = Color(0xFF{r:02X}{g:02X}{b:02X})" in kotlin
        assert "        val brandAccent = Color(0xFFFF00AA)" in kotlin
        assert "            /** Brand blue */" in kotlin

    def test_translucent_color(self):
        kotlin = format_kotlin([make_token("color.scrim", "rgba(0, 0, 0, 0.5)", TokenType.COLOR)], {})
        assert "val scrim = Color(0x80000000)" in kotlin

    def test_unparseable_color_is_comment(self):
        kotlin = format_kotlin([make_token("color.link", "currentColor", TokenType.COLOR)], {})
        assert "// link: currentColor (requires runtime conversion)" in kotlin
        assert "val link" not in kotlin

    def test_dimensions(self, token_dictionary):
        kotlin = format_kotlin(list(token_dictionary), {})
        assert "        val md = 24.dp" in kotlin

    def test_font_size_uses_sp(self):
        token = make_token("font.size.body", "1rem", TokenType.DIMENSION)
        assert dimension_unit(token) == "sp"
        assert "val body = 16.sp" in format_kotlin([token], {})

    def test_other_dimensions_use_dp(self):
        assert dimension_unit(make_token("space.md", "1rem", TokenType.DIMENSION)) == "dp"
        assert dimension_unit(make_token("font.weight", "1rem", TokenType.DIMENSION)) == "dp"

    def test_duration_milliseconds(self, token_dictionary):
        kotlin = format_kotlin(list(token_dictionary), {})
        assert "        val fast: Long = 200L" in kotlin

    def test_malformed_duration_is_comment(self):
        kotlin = format_kotlin([make_token("duration.slow", "fast", TokenType.DURATION)], {})
        assert "// slow: fast (not a millisecond duration)" in kotlin
        assert "val slow" not in kotlin

    def test_cubic_bezier(self, token_dictionary):
        kotlin = format_kotlin(list(token_dictionary), {})
        assert "CubicBezierEasing(0.4f, 0f, 0.2f, 1f)" in kotlin

    def test_font_weights(self):
        tokens = [
            make_token("font.weight.bold", "700", TokenType.FONT_WEIGHT),
            make_token("font.weight.thin", 100, TokenType.FONT_WEIGHT),
        ]
        kotlin = format_kotlin(tokens, {})
        assert "val bold = FontWeight.Bold" in kotlin
        assert "val thin = FontWeight.Normal" in kotlin

    def test_number(self):
        kotlin = format_kotlin([make_token("opacity.disabled", 0.5, TokenType.NUMBER)], {})
        assert "val disabled = 0.5f" in kotlin

    def test_shadow_elevation(self, token_dictionary):
        kotlin = format_kotlin(list(token_dictionary), {})
        assert "        val mdElevation = 8.dp" in kotlin
        assert "mdColor" not in kotlin

    def test_shadow_without_static_blur(self):
        lines = kotlin_shadow_elevation("sm", {**SHADOW, "blur": "var(--blur)"}, "")
        assert lines == ["// sm: shadow blur var(--blur) (dynamic — resolve at runtime)"]


class TestCrossTarget:
    def test_same_duration_both_targets(self):
        token = make_token("duration.fast", "200ms", TokenType.DURATION)
        assert "TimeInterval = 0.2" in format_swift([token], {})
        assert "Long = 200L" in format_kotlin([token], {})

    def test_same_identifiers_both_targets(self, token_dictionary):
        swift = format_swift(list(token_dictionary), {})
        kotlin = format_kotlin(list(token_dictionary), {})
        for name in ("s500", "brandAccent", "primaryBg", "fast", "standard"):
            assert f"let {name}" in swift
            assert f"val {name}" in kotlin

"""Tests for vscode_theme_generator.vscode.tokens."""

import pytest

from vscode_theme_generator.vscode.tokens import (
    BASELINE_RULES,
    JSON_RAINBOW_COLORS,
    TokenColor,
    TokenRule,
    build_baseline_rules,
    build_rainbow_rules,
    build_token_colors,
    rainbow_scope,
)


class TestBaselineRules:
    def test_comments(self, dark_palette):
        comments = build_baseline_rules(dark_palette)[0]
        assert comments.name == "Comments"
        assert "comment" in comments.scope
        assert comments.foreground == dark_palette.dim
        assert comments.font_style == "italic"

    def test_keywords_use_accent(self, dark_palette):
        keywords = next(t for t in build_baseline_rules(dark_palette) if t.name == "Keywords")
        assert keywords.foreground == dark_palette.accent
        assert keywords.font_style == "italic"

    def test_urls_underlined(self, dark_palette):
        urls = next(t for t in build_baseline_rules(dark_palette) if t.name == "URLs")
        assert urls.font_style == "underline"

    def test_one_token_per_rule(self, dark_palette):
        assert len(build_baseline_rules(dark_palette)) == len(BASELINE_RULES)

    def test_rule_without_role(self, dark_palette):
        tokens = build_baseline_rules(dark_palette, (TokenRule("Bold", ("markup.bold",), None, "bold"),))
        assert tokens[0].to_dict() == {"name": "Bold", "scope": "markup.bold", "settings": {"fontStyle": "bold"}}

    def test_unknown_font_style(self, dark_palette):
        with pytest.raises(ValueError):
            build_baseline_rules(dark_palette, (TokenRule("X", ("x",), "red", "strikethrough"),))


class TestRainbowRules:
    def test_default_depth(self):
        rules = build_rainbow_rules()
        assert len(rules) == 36
        assert rules[0].name == "JSON Key - Level 0"

    def test_scope_nesting(self):
        assert rainbow_scope(0) == (
            "source.json meta.structure.dictionary.json support.type.property-name.json"
        )
        assert rainbow_scope(2).count("meta.structure.dictionary.value.json") == 2

    def test_colors_cycle(self):
        count = len(JSON_RAINBOW_COLORS)
        rules = build_rainbow_rules(depth=count + 4)
        assert rules[count + 3].foreground == rules[3].foreground
        assert rules[3].foreground == JSON_RAINBOW_COLORS[3].lower()

    def test_colors_normalized(self):
        rules = build_rainbow_rules(colors=("ABC",), depth=2)
        assert [r.foreground for r in rules] == ["#aabbcc", "#aabbcc"]

    def test_zero_depth(self):
        assert build_rainbow_rules(depth=0) == []

    def test_negative_depth(self):
        with pytest.raises(ValueError):
            build_rainbow_rules(depth=-1)

    def test_empty_colors(self):
        with pytest.raises(ValueError):
            build_rainbow_rules(colors=())


class TestBuildTokenColors:
    def test_order(self, dark_palette):
        tokens = build_token_colors(dark_palette, depth=3)
        names = [t.name for t in tokens]
        assert names[: len(BASELINE_RULES)] == [r.name for r in BASELINE_RULES]
        assert names[len(BASELINE_RULES)] == "JSON Key - Level 0"
        assert names[-1] == "JSON Separators"

    def test_to_dict_lists_multiple_scopes(self):
        token = TokenColor("Strings", ("string", "markup.inserted"), "#00ff00")
        assert token.to_dict() == {
            "name": "Strings",
            "scope": ["string", "markup.inserted"],
            "settings": {"foreground": "#00ff00"},
        }

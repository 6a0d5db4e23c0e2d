"""TextMate token colors: baseline syntax rules plus JSON rainbow keys."""

from __future__ import annotations

from dataclasses import dataclass

from ..color import normalize_hex
from ..config import DEFAULT_RAINBOW_DEPTH

FONT_STYLES = frozenset(("italic", "bold", "underline", "italic bold"))

JSON_RAINBOW_COLORS = (
    "#00CECA",
    "#00BFFF",
    "#8590EC",
    "#FE3698",
    "#FF7086",
    "#ffb070",
    "#FCCC66",
    "#BBCE65",
    "#59D065",
)

JSON_ROOT_SCOPE = "source.json meta.structure.dictionary.json"
JSON_NESTED_SCOPE = "meta.structure.dictionary.value.json meta.structure.dictionary.json"
JSON_KEY_SCOPE = "support.type.property-name.json"


@dataclass(frozen=True)
class TokenRule:
    """A token rule before colors are resolved; ``role`` is a palette reference or None."""

    name: str
    scopes: tuple[str, ...]
    role: str | None = None
    font_style: str | None = None


@dataclass(frozen=True)
class TokenColor:
    name: str
    scope: tuple[str, ...]
    foreground: str | None = None
    font_style: str | None = None

    def to_dict(self):
        settings = {}
        if self.foreground is not None:
            settings["foreground"] = self.foreground
        if self.font_style is not None:
            settings["fontStyle"] = self.font_style
        scope = self.scope[0] if len(self.scope) == 1 else list(self.scope)
        return {"name": self.name, "scope": scope, "settings": settings}


BASELINE_RULES = (
    TokenRule("Comments", ("comment", "punctuation.definition.comment"), "dim", "italic"),
    TokenRule("Variables", ("variable", "string constant.other.placeholder"), "foreground"),
    TokenRule(
        "Keywords",
        ("keyword", "storage.type", "storage.modifier", "keyword.control"),
        "accent",
        "italic",
    ),
    TokenRule(
        "Operators and punctuation",
        (
            "keyword.operator",
            "constant.other.color",
            "punctuation",
            "meta.tag",
            "punctuation.definition.tag",
            "punctuation.separator.inheritance.php",
            "punctuation.definition.tag.html",
            "punctuation.definition.tag.begin.html",
            "punctuation.definition.tag.end.html",
            "punctuation.section.embedded",
            "keyword.other.template",
            "keyword.other.substitution",
        ),
        "cyan",
    ),
    TokenRule(
        "Tags",
        ("entity.name.tag", "meta.tag.sgml", "markup.deleted.git_gutter"),
        "red",
    ),
    TokenRule(
        "Functions",
        (
            "entity.name.function",
            "meta.function-call",
            "variable.function",
            "support.function",
            "keyword.other.special-method",
        ),
        "blue",
    ),
    TokenRule(
        "Numbers, constants and parameters",
        (
            "constant.numeric",
            "constant.language",
            "support.constant",
            "constant.character",
            "constant.escape",
            "variable.parameter",
            "keyword.other.unit",
            "keyword.other",
        ),
        "bright_red",
    ),
    TokenRule(
        "Strings",
        ("string", "constant.other.symbol", "constant.other.key", "entity.other.inherited-class", "markup.inserted"),
        "green",
    ),
    TokenRule(
        "Types and classes",
        (
            "entity.name",
            "support.type",
            "support.class",
            "support.other.namespace.use.php",
            "meta.use.php",
            "support.other.namespace.php",
            "entity.name.type.class",
            "entity.name.class",
        ),
        "yellow",
    ),
    TokenRule("Attributes", ("entity.other.attribute-name",), "purple"),
    TokenRule(
        "HTML attributes",
        ("text.html.basic entity.other.attribute-name.html", "text.html.basic entity.other.attribute-name"),
        "yellow",
        "italic",
    ),
    TokenRule(
        "Property names",
        ("support.type.property-name", "meta.object-literal.key", "variable.other.property"),
        "blue",
    ),
    TokenRule(
        "Markup headings",
        ("markup.heading", "markup.heading entity.name", "entity.name.section"),
        "yellow",
        "bold",
    ),
    TokenRule("Markup bold", ("markup.bold",), "bright_red", "bold"),
    TokenRule("Markup italic", ("markup.italic",), "purple", "italic"),
    TokenRule("Markup code", ("markup.inline.raw", "markup.fenced_code.block"), "green"),
    TokenRule("Markup quote", ("markup.quote",), "dim", "italic"),
    TokenRule("URLs", ("markup.underline.link", "string.other.link"), "blue", "underline"),
    TokenRule("Invalid", ("invalid", "invalid.illegal"), "red"),
    TokenRule("Deprecated", ("invalid.deprecated",), "purple", "italic"),
)

# JSON punctuation, colored the same regardless of the palette
JSON_PUNCTUATION = (
    ("JSON Braces", ("punctuation.definition.dictionary.begin.json", "punctuation.definition.dictionary.end.json"), "#f6b34c"),
    ("JSON Brackets", ("punctuation.definition.array.begin.json", "punctuation.definition.array.end.json"), "#83e96c"),
    ("JSON Quotes", ("punctuation.definition.string.begin.json", "punctuation.definition.string.end.json"), "#c89ef0"),
    ("JSON Key Separator", ("punctuation.separator.dictionary.key-value.json",), "#3ad4b7"),
    ("JSON Separators", ("punctuation.separator.dictionary.pair.json", "punctuation.separator.array.json"), "#e4e5df"),
)


def build_baseline_rules(palette, rules=BASELINE_RULES):
    tokens = []
    for rule in rules:
        if rule.font_style is not None and rule.font_style not in FONT_STYLES:
            raise ValueError(f"Unsupported font style {rule.font_style!r} in rule {rule.name!r}")
        foreground = palette.resolve(rule.role) if rule.role else None
        tokens.append(TokenColor(rule.name, tuple(rule.scopes), foreground, rule.font_style))
    return tokens


def rainbow_scope(nesting):
    """Scope selecting JSON keys ``nesting`` objects below the root object."""
    return " ".join([JSON_ROOT_SCOPE] + [JSON_NESTED_SCOPE] * nesting + [JSON_KEY_SCOPE])


def build_rainbow_rules(colors=JSON_RAINBOW_COLORS, depth=DEFAULT_RAINBOW_DEPTH):
    """One rule per JSON nesting level, cycling through ``colors``.

    Raises:
        ValueError: If depth is negative or colors is empty.
    """
    if isinstance(depth, bool) or not isinstance(depth, int) or depth < 0:
        raise ValueError(f"depth must be a non-negative integer, got {depth!r}")
    if not colors:
        raise ValueError("colors must not be empty")
    cycle = [normalize_hex(color) for color in colors]
    return [
        TokenColor(f"JSON Key - Level {level}", (rainbow_scope(level),), cycle[level % len(cycle)])
        for level in range(depth)
    ]


def build_json_punctuation_rules():
    return [TokenColor(name, scopes, normalize_hex(color)) for name, scopes, color in JSON_PUNCTUATION]


def build_token_colors(palette, rules=BASELINE_RULES, rainbow_colors=JSON_RAINBOW_COLORS, depth=DEFAULT_RAINBOW_DEPTH):
    """Baseline rules, then JSON rainbow keys, then JSON punctuation."""
    return (
        build_baseline_rules(palette, rules)
        + build_rainbow_rules(rainbow_colors, depth)
        + build_json_punctuation_rules()
    )

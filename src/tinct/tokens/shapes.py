"""
Syntactic value shapes per token category.

The compiler uses these to reject malformed fallbacks and the runtime
validator uses them to reject malformed payload values. A shape check is
purely syntactic: it answers "does this look like a shadow expression",
not "does the browser render it the way the designer wanted".
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

from .models import TokenCategory

# =============================================================================
# Lexical helpers
# =============================================================================

_NUMBER = r"[+-]?(?:\d+\.?\d*|\.\d+)"
_LENGTH_UNITS = r"(?:px|rem|em|%|vh|vw|vmin|vmax|ch|ex|pt|cm|mm|in|pc|svh|dvh|lvh)"

LENGTH_RE = re.compile(rf"^(?:{_NUMBER}{_LENGTH_UNITS}|[+-]?0)$")
TIME_RE = re.compile(rf"^{_NUMBER}(?:ms|s)$")
INTEGER_RE = re.compile(r"^[+-]?\d+$")
NUMBER_RE = re.compile(rf"^{_NUMBER}$")
HEX_COLOR_RE = re.compile(r"^#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
IDENT_RE = re.compile(r"^-?[A-Za-z_][A-Za-z0-9_-]*$")
VAR_RE = re.compile(r"^var\(\s*--[A-Za-z0-9_-]+\s*(?:,[^;{}]*)?\)$")
QUOTED_RE = re.compile(r"""^(?:"[^"\\;{}]*"|'[^'\\;{}]*')$""")

_COLOR_FUNCTION_RE = re.compile(
    r"^(?:rgba?|hsla?|hwb|lab|lch|oklab|oklch|color|color-mix)\([^;{}()]*(?:\([^;{}()]*\)[^;{}()]*)*\)$",
    re.IGNORECASE,
)
_FUNCTION_RE = re.compile(r"^[A-Za-z-]+\([^;{}]*\)$")

# CSS Color 4 named colors
NAMED_COLORS = frozenset(
    {
        "aliceblue", "antiquewhite", "aqua", "aquamarine", "azure", "beige", "bisque",
        "black", "blanchedalmond", "blue", "blueviolet", "brown", "burlywood",
        "cadetblue", "chartreuse", "chocolate", "coral", "cornflowerblue", "cornsilk",
        "crimson", "cyan", "darkblue", "darkcyan", "darkgoldenrod", "darkgray",
        "darkgreen", "darkgrey", "darkkhaki", "darkmagenta", "darkolivegreen",
        "darkorange", "darkorchid", "darkred", "darksalmon", "darkseagreen",
        "darkslateblue", "darkslategray", "darkslategrey", "darkturquoise",
        "darkviolet", "deeppink", "deepskyblue", "dimgray", "dimgrey", "dodgerblue",
        "firebrick", "floralwhite", "forestgreen", "fuchsia", "gainsboro",
        "ghostwhite", "gold", "goldenrod", "gray", "green", "greenyellow", "grey",
        "honeydew", "hotpink", "indianred", "indigo", "ivory", "khaki", "lavender",
        "lavenderblush", "lawngreen", "lemonchiffon", "lightblue", "lightcoral",
        "lightcyan", "lightgoldenrodyellow", "lightgray", "lightgreen", "lightgrey",
        "lightpink", "lightsalmon", "lightseagreen", "lightskyblue",
        "lightslategray", "lightslategrey", "lightsteelblue", "lightyellow", "lime",
        "limegreen", "linen", "magenta", "maroon", "mediumaquamarine", "mediumblue",
        "mediumorchid", "mediumpurple", "mediumseagreen", "mediumslateblue",
        "mediumspringgreen", "mediumturquoise", "mediumvioletred", "midnightblue",
        "mintcream", "mistyrose", "moccasin", "navajowhite", "navy", "oldlace",
        "olive", "olivedrab", "orange", "orangered", "orchid", "palegoldenrod",
        "palegreen", "paleturquoise", "palevioletred", "papayawhip", "peachpuff",
        "peru", "pink", "plum", "powderblue", "purple", "rebeccapurple", "red",
        "rosybrown", "royalblue", "saddlebrown", "salmon", "sandybrown", "seagreen",
        "seashell", "sienna", "silver", "skyblue", "slateblue", "slategray",
        "slategrey", "snow", "springgreen", "steelblue", "tan", "teal", "thistle",
        "tomato", "turquoise", "violet", "wheat", "white", "whitesmoke", "yellow",
        "yellowgreen",
    }
)

COLOR_KEYWORDS = frozenset({"transparent", "currentcolor", "inherit", "initial", "unset"})

# Characters that would let a value escape its declaration
_FORBIDDEN = re.compile(r"[;{}<>]")


def split_top_level(
    value: str, separator: str | None = ",", *, keep_empty: bool = False
) -> list[str]:
    """
    Split on a separator outside of parentheses and quotes.

    Args:
        value: Text to split
        separator: Single character, or None to split on whitespace
        keep_empty: Keep empty parts (``"a,,b"`` -> ``["a", "", "b"]``)

    Returns:
        Stripped parts
    """
    parts: list[str] = []
    depth = 0
    quote: str | None = None
    current: list[str] = []

    for char in value:
        if quote:
            current.append(char)
            if char == quote:
                quote = None
            continue
        if char in "\"'":
            quote = char
        elif char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        is_separator = char.isspace() if separator is None else char == separator
        if is_separator and depth == 0:
            parts.append("".join(current))
            current = []
            continue
        current.append(char)

    parts.append("".join(current))
    if keep_empty:
        return [part.strip() for part in parts]
    return [part.strip() for part in parts if part.strip()]


def _balanced(value: str) -> bool:
    depth = 0
    for char in value:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0:
                return False
    return depth == 0


# =============================================================================
# Category shapes
# =============================================================================


def is_color(value: str) -> bool:
    """Hex, functional notation (rgb(), oklch(), ...), var(), a named color or keyword."""
    return bool(
        HEX_COLOR_RE.match(value)
        or _COLOR_FUNCTION_RE.match(value)
        or VAR_RE.match(value)
        or value.lower() in NAMED_COLORS
        or value.lower() in COLOR_KEYWORDS
    )


def is_length(value: str) -> bool:
    return bool(LENGTH_RE.match(value) or VAR_RE.match(value) or value.startswith("calc("))


def _is_shadow_layer(layer: str) -> bool:
    if VAR_RE.match(layer):
        return True

    lengths = 0
    colors = 0
    inset = False
    for part in split_top_level(layer, None):
        if part == "inset" and not inset:
            inset = True
        elif LENGTH_RE.match(part):
            lengths += 1
        elif is_color(part):
            colors += 1
        else:
            return False
    return 2 <= lengths <= 4 and colors <= 1


def is_shadow(value: str) -> bool:
    """One or more comma-separated box-shadow layers, or ``none``."""
    if value == "none":
        return True
    layers = split_top_level(value, ",", keep_empty=True)
    return all(layer and _is_shadow_layer(layer) for layer in layers)


def is_radius(value: str) -> bool:
    """One to four lengths (``0.5rem``, ``9999px``, ``4px 8px``)."""
    parts = split_top_level(value, None)
    return 1 <= len(parts) <= 4 and all(is_length(part) for part in parts)


def is_spacing(value: str) -> bool:
    """A single length or calc() expression."""
    return is_length(value)


def is_z_index(value: str) -> bool:
    """An integer or ``auto``."""
    return bool(INTEGER_RE.match(value)) or value == "auto" or bool(VAR_RE.match(value))


def _is_font_family(family: str) -> bool:
    if QUOTED_RE.match(family) or VAR_RE.match(family):
        return True
    return all(IDENT_RE.match(word) for word in family.split())


def is_font(value: str) -> bool:
    """A comma-separated font-family list (identifiers, quoted names, var())."""
    families = split_top_level(value, ",", keep_empty=True)
    return all(family and _is_font_family(family) for family in families)


def is_time(value: str) -> bool:
    return bool(TIME_RE.match(value))


def is_animation(value: str) -> bool:
    """A duration (``150ms``) or an animation shorthand containing a duration."""
    parts = split_top_level(value, None)
    if not parts:
        return False
    has_time = False
    for part in parts:
        if TIME_RE.match(part):
            has_time = True
        elif IDENT_RE.match(part) or NUMBER_RE.match(part) or _FUNCTION_RE.match(part):
            continue
        else:
            return False
    return has_time


_CHECKS: dict[TokenCategory, Callable[[str], bool]] = {
    TokenCategory.COLOR: is_color,
    TokenCategory.SHADOW: is_shadow,
    TokenCategory.RADIUS: is_radius,
    TokenCategory.SPACING: is_spacing,
    TokenCategory.Z_INDEX: is_z_index,
    TokenCategory.FONT: is_font,
    TokenCategory.ANIMATION: is_animation,
}

SHAPE_NAMES: dict[TokenCategory, str] = {
    TokenCategory.COLOR: "color",
    TokenCategory.SHADOW: "shadow-layers",
    TokenCategory.RADIUS: "length-list",
    TokenCategory.SPACING: "length",
    TokenCategory.Z_INDEX: "integer",
    TokenCategory.FONT: "font-family-list",
    TokenCategory.ANIMATION: "time-or-animation",
}


def matches_shape(category: TokenCategory, value: Any) -> bool:
    """
    Check whether a raw value has the syntactic shape expected for a category.

    Non-string values, empty strings, and strings that could break out of a
    CSS declaration never match.
    """
    if not isinstance(value, str):
        return False
    value = value.strip()
    if not value or _FORBIDDEN.search(value) or not _balanced(value):
        return False
    return _CHECKS[category](value)

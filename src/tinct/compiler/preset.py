"""
Styling-framework preset generation.

The preset maps conventional utility class names to declarations that
reference token custom properties, never literal values. Swapping a brand
at runtime therefore re-themes every class consumer without a rebuild.

Two views of the same mapping are emitted:
- ``utilities``: class name -> {css property -> value}, renderable as CSS
- ``theme``: framework-style ``extend`` sections (colors, boxShadow, ...)
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from tinct.core.errors import DuplicateTokenError
from tinct.tokens.models import (
    ComputedColor,
    Keyframes,
    TokenCategory,
    TokenDefinition,
    custom_property,
    qualified_id,
)
from tinct.tokens.shapes import is_time

# Utility prefixes and the CSS property each one sets
UTILITY_RULES: dict[TokenCategory, tuple[tuple[str, str], ...]] = {
    TokenCategory.COLOR: (
        ("bg", "background-color"),
        ("text", "color"),
        ("border", "border-color"),
    ),
    TokenCategory.SHADOW: (("shadow", "box-shadow"),),
    TokenCategory.RADIUS: (("rounded", "border-radius"),),
    TokenCategory.SPACING: (("p", "padding"), ("m", "margin"), ("gap", "gap")),
    TokenCategory.Z_INDEX: (("z", "z-index"),),
    TokenCategory.FONT: (("font", "font-family"),),
    TokenCategory.ANIMATION: (("animate", "animation"),),
}

DURATION_RULE = ("duration", "transition-duration")

THEME_SECTIONS: dict[TokenCategory, str] = {
    TokenCategory.COLOR: "colors",
    TokenCategory.SHADOW: "boxShadow",
    TokenCategory.RADIUS: "borderRadius",
    TokenCategory.SPACING: "spacing",
    TokenCategory.Z_INDEX: "zIndex",
    TokenCategory.FONT: "fontFamily",
    TokenCategory.ANIMATION: "animation",
}


class Preset(BaseModel):
    """Generated preset artifact."""

    model_config = ConfigDict(frozen=True)

    dark_mode: tuple[str, str] = Field(description="('selector', <dark selector>)")
    utilities: dict[str, dict[str, str]] = Field(default_factory=dict)
    theme: dict[str, dict[str, Any]] = Field(default_factory=dict)

    def to_json(self) -> str:
        """Serialize deterministically (sorted keys, two-space indent, trailing newline)."""
        data = {
            "darkMode": list(self.dark_mode),
            "theme": {"extend": self.theme},
            "utilities": self.utilities,
        }
        return json.dumps(data, indent=2, sort_keys=True, ensure_ascii=False) + "\n"

    def to_css(self) -> str:
        """Render utilities as plain CSS class rules."""
        lines = ["/* AUTO-GENERATED FILE - DO NOT EDIT DIRECTLY (tinct build) */", ""]
        for class_name in sorted(self.utilities):
            declarations = " ".join(
                f"{prop}: {value};" for prop, value in sorted(self.utilities[class_name].items())
            )
            lines.append(f".{class_name} {{ {declarations} }}")
        return "\n".join(lines) + "\n"


def _utility_name(prefix: str, name: str) -> str:
    return name if name.startswith(f"{prefix}-") else f"{prefix}-{name}"


def color_mix(computed: ComputedColor) -> str:
    """color-mix() expression for a computed color."""
    percent = format(round(computed.opacity * 100, 2), "g")
    return f"color-mix(in srgb, var({custom_property(TokenCategory.COLOR, computed.base)}) {percent}%, transparent)"


def build_preset(
    tokens: Iterable[tuple[TokenCategory, str, TokenDefinition]],
    computed_colors: Mapping[str, ComputedColor] | None = None,
    keyframes: Mapping[str, Keyframes] | None = None,
    dark_selector: str = '[data-theme="dark"]',
) -> Preset:
    """
    Build the preset for sorted token rows.

    Raises:
        DuplicateTokenError: If two tokens would generate the same utility class.
    """
    utilities: dict[str, dict[str, str]] = {}
    owners: dict[str, str] = {}
    theme: dict[str, dict[str, Any]] = {}

    def add_utility(class_name: str, owner: str, prop: str, value: str) -> None:
        if class_name in owners and owners[class_name] != owner:
            raise DuplicateTokenError(class_name, owners[class_name], owner)
        owners[class_name] = owner
        utilities.setdefault(class_name, {})[prop] = value

    for category, name, definition in tokens:
        reference = f"var({custom_property(category, name)})"
        owner = qualified_id(category, name)
        fallback = definition.fallback

        if category == TokenCategory.ANIMATION and isinstance(fallback, str) and is_time(fallback):
            prefix, prop = DURATION_RULE
            class_name = _utility_name(prefix, name)
            add_utility(class_name, owner, prop, reference)
            theme.setdefault("transitionDuration", {})[class_name.removeprefix(f"{prefix}-")] = reference
            continue

        for prefix, prop in UTILITY_RULES[category]:
            add_utility(_utility_name(prefix, name), owner, prop, reference)
        theme.setdefault(THEME_SECTIONS[category], {})[name] = reference

    computed_colors = computed_colors or {}
    for name in sorted(computed_colors):
        expression = color_mix(computed_colors[name])
        owner = f"computed.{name}"
        for prefix, prop in UTILITY_RULES[TokenCategory.COLOR]:
            add_utility(_utility_name(prefix, name), owner, prop, expression)
        theme.setdefault("colors", {})[name] = expression

    if keyframes:
        theme["keyframes"] = {
            name: {step: dict(props) for step, props in frames.items()}
            for name, frames in keyframes.items()
        }

    return Preset(
        dark_mode=("selector", dark_selector),
        utilities=utilities,
        theme=theme,
    )

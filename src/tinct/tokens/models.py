"""
Token source types.

A token source is the canonical, statically declared mapping of
token name -> fallback value, grouped by category. Two sources exist in a
project: base (structural: shadows, spacing, radii, z-index, animations)
and brand (visual: colors per mode, font families, computed colors).
"""

from __future__ import annotations

import re
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# =============================================================================
# Enums
# =============================================================================


class TokenCategory(StrEnum):
    """Design token category."""

    COLOR = "color"
    SHADOW = "shadow"
    RADIUS = "radius"
    SPACING = "spacing"
    Z_INDEX = "zIndex"
    FONT = "font"
    ANIMATION = "animation"

    @property
    def namespace(self) -> str:
        """Prefix used in custom property identifiers (``--<namespace>-<name>``)."""
        return CATEGORY_NAMESPACES[self]


CATEGORY_NAMESPACES: dict[TokenCategory, str] = {
    TokenCategory.COLOR: "color",
    TokenCategory.SHADOW: "shadow",
    TokenCategory.RADIUS: "radius",
    TokenCategory.SPACING: "spacing",
    TokenCategory.Z_INDEX: "z-index",
    TokenCategory.FONT: "font",
    TokenCategory.ANIMATION: "animation",
}


class ModeVariant(StrEnum):
    """Color mode."""

    LIGHT = "light"
    DARK = "dark"

    def toggled(self) -> ModeVariant:
        return ModeVariant.DARK if self == ModeVariant.LIGHT else ModeVariant.LIGHT


# =============================================================================
# Names
# =============================================================================

TOKEN_NAME_PATTERN = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")

_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")


def camel_to_kebab(name: str) -> str:
    """Convert a camelCase token name to kebab-case (``raisedSm`` -> ``raised-sm``)."""
    return _CAMEL_BOUNDARY.sub(r"\1-\2", name).lower()


def normalize_token_name(name: str) -> str:
    """Normalize a declared token name, rejecting names unusable in CSS identifiers."""
    normalized = camel_to_kebab(name)
    if not TOKEN_NAME_PATTERN.match(normalized):
        raise ValueError(f"Invalid token name {name!r}: use kebab-case letters and digits")
    return normalized


def custom_property(category: TokenCategory, name: str) -> str:
    """Custom property identifier for a token, e.g. ``--shadow-raised``."""
    return f"--{category.namespace}-{name}"


def qualified_id(category: TokenCategory, name: str) -> str:
    """Qualified token id, e.g. ``color.primary``."""
    return f"{category.value}.{name}"


# =============================================================================
# Definitions
# =============================================================================


class ModeValues(BaseModel):
    """Per-mode values for a color token."""

    model_config = ConfigDict(frozen=True)

    light: str
    dark: str

    def for_mode(self, mode: ModeVariant) -> str:
        return self.light if mode == ModeVariant.LIGHT else self.dark


class TokenDefinition(BaseModel):
    """
    A single token: its fallback and an optional description.

    Color tokens use ``ModeValues`` fallbacks; every other category uses a
    plain string. The compiler enforces the pairing.
    """

    model_config = ConfigDict(frozen=True)

    fallback: str | ModeValues
    description: str | None = Field(default=None, description="Human-readable description")


class ComputedColor(BaseModel):
    """
    A color derived from a declared color token by opacity.

    Example:
        ComputedColor(base="primary", opacity=0.3)
        -> color-mix(in srgb, var(--color-primary) 30%, transparent)
    """

    model_config = ConfigDict(frozen=True)

    base: str
    opacity: float = Field(ge=0.0, le=1.0)

    @field_validator("base")
    @classmethod
    def _normalize_base(cls, value: str) -> str:
        return normalize_token_name(value)


Keyframes = dict[str, dict[str, str]]


class TokenSource(BaseModel):
    """
    A named, immutable token source.

    Example:
        TokenSource(
            name="brand",
            tokens={
                TokenCategory.COLOR: {
                    "primary": TokenDefinition(
                        fallback=ModeValues(light="#10B981", dark="#34D399")
                    ),
                },
            },
        )
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Source name (e.g., 'base', 'brand')")
    tokens: dict[TokenCategory, dict[str, TokenDefinition]] = Field(default_factory=dict)
    computed_colors: dict[str, ComputedColor] = Field(default_factory=dict)
    keyframes: dict[str, Keyframes] = Field(
        default_factory=dict, description="Keyframe name -> step -> CSS property -> value"
    )

    @field_validator("tokens")
    @classmethod
    def _normalize_token_names(
        cls, value: dict[TokenCategory, dict[str, TokenDefinition]]
    ) -> dict[TokenCategory, dict[str, TokenDefinition]]:
        normalized: dict[TokenCategory, dict[str, TokenDefinition]] = {}
        for category, definitions in value.items():
            names: dict[str, TokenDefinition] = {}
            for name, definition in definitions.items():
                key = normalize_token_name(name)
                if key in names:
                    raise ValueError(f"{category.value}.{key} is declared twice")
                names[key] = definition
            normalized[category] = names
        return normalized

    @field_validator("computed_colors", "keyframes")
    @classmethod
    def _normalize_names(cls, value: dict[str, Any]) -> dict[str, Any]:
        return {normalize_token_name(name): item for name, item in value.items()}

    def iter_tokens(self) -> list[tuple[TokenCategory, str, TokenDefinition]]:
        """All tokens, sorted by category value then name."""
        return [
            (category, name, self.tokens[category][name])
            for category in sorted(self.tokens, key=lambda c: c.value)
            for name in sorted(self.tokens[category])
        ]

    def token_count(self) -> int:
        return sum(len(definitions) for definitions in self.tokens.values())

"""
Design token compiler.

Merges the base and brand token sources into three artifacts:

- a CSS custom-property sheet (default scope + light/dark color scopes)
- a styling-framework preset referencing those properties
- the brand theme schema used to validate runtime payloads

Compilation is all-or-nothing: every check runs before any artifact is
built, and the output is byte-stable for unchanged input.
"""

from __future__ import annotations

from dataclasses import dataclass

from tinct.core.config import CssConfig
from tinct.core.errors import (
    DuplicateTokenError,
    MalformedFallbackError,
    UnresolvedReferenceError,
)
from tinct.core.logging import get_compiler_logger
from tinct.tokens.models import (
    ComputedColor,
    Keyframes,
    ModeValues,
    TokenCategory,
    TokenDefinition,
    TokenSource,
    qualified_id,
)
from tinct.tokens.shapes import matches_shape

from .css_sheet import generate_css_sheet
from .preset import Preset, build_preset
from .schema import BrandThemeSchema, build_schema

logger = get_compiler_logger()


@dataclass(frozen=True)
class CompiledArtifacts:
    """Output of compile_tokens()."""

    css_sheet: str
    preset: Preset
    schema: BrandThemeSchema

    @property
    def preset_json(self) -> str:
        return self.preset.to_json()

    @property
    def schema_json(self) -> str:
        return self.schema.to_json()

    @property
    def utilities_css(self) -> str:
        return self.preset.to_css()


# =============================================================================
# Checks
# =============================================================================


def check_no_duplicates(base: TokenSource, brand: TokenSource) -> None:
    """
    Ensure no token name is declared by both sources.

    Raises:
        DuplicateTokenError: On the first collision, in deterministic order.
    """
    base_names: dict[str, str] = {}
    for category, name, _ in base.iter_tokens():
        base_names.setdefault(name, f"{base.name}:{qualified_id(category, name)}")

    for category, name, _ in brand.iter_tokens():
        if name in base_names:
            raise DuplicateTokenError(
                name, base_names[name], f"{brand.name}:{qualified_id(category, name)}"
            )

    for name in sorted(base.computed_colors.keys() & brand.computed_colors.keys()):
        raise DuplicateTokenError(name, f"{base.name}:computed.{name}", f"{brand.name}:computed.{name}")

    for name in sorted(base.keyframes.keys() & brand.keyframes.keys()):
        raise DuplicateTokenError(
            name, f"{base.name}:keyframes.{name}", f"{brand.name}:keyframes.{name}"
        )


def check_fallback(category: TokenCategory, name: str, definition: TokenDefinition) -> None:
    """
    Ensure a fallback has the shape its category expects.

    Raises:
        MalformedFallbackError: If the fallback is malformed.
    """
    fallback = definition.fallback
    if category == TokenCategory.COLOR:
        if not isinstance(fallback, ModeValues):
            raise MalformedFallbackError(
                category.value, name, fallback, "color tokens need light and dark fallbacks"
            )
        for mode_name, value in (("light", fallback.light), ("dark", fallback.dark)):
            if not matches_shape(category, value):
                raise MalformedFallbackError(
                    category.value, name, value, f"{mode_name} value is not a color"
                )
        return

    if isinstance(fallback, ModeValues):
        raise MalformedFallbackError(
            category.value, name, fallback.model_dump(), "only color tokens vary by mode"
        )
    if not matches_shape(category, fallback):
        raise MalformedFallbackError(category.value, name, fallback)


def check_computed_colors(
    computed: dict[str, ComputedColor], color_names: set[str]
) -> None:
    """
    Ensure computed colors reference declared colors and do not shadow them.

    Raises:
        UnresolvedReferenceError: If a base color is not declared.
        DuplicateTokenError: If a computed color reuses a color token name.
    """
    for name in sorted(computed):
        if name in color_names:
            raise DuplicateTokenError(name, f"color.{name}", f"computed.{name}")
        if computed[name].base not in color_names:
            raise UnresolvedReferenceError(name, computed[name].base)


# =============================================================================
# Compile
# =============================================================================


def compile_tokens(
    base: TokenSource,
    brand: TokenSource,
    *,
    selectors: CssConfig | None = None,
) -> CompiledArtifacts:
    """
    Compile base and brand token sources into artifacts.

    Args:
        base: Structural token source
        brand: Visual token source
        selectors: CSS selectors for the generated sheet

    Returns:
        CompiledArtifacts (sheet, preset, schema)

    Raises:
        DuplicateTokenError: A token name is declared by both sources.
        MalformedFallbackError: A fallback does not match its category's shape.
        UnresolvedReferenceError: A computed color references an unknown color.
    """
    selectors = selectors or CssConfig()

    check_no_duplicates(base, brand)

    rows = sorted(
        [*base.iter_tokens(), *brand.iter_tokens()],
        key=lambda row: (row[0].value, row[1]),
    )
    for category, name, definition in rows:
        check_fallback(category, name, definition)

    computed = {**base.computed_colors, **brand.computed_colors}
    color_names = {name for category, name, _ in rows if category == TokenCategory.COLOR}
    check_computed_colors(computed, color_names)

    keyframes: dict[str, Keyframes] = {**base.keyframes, **brand.keyframes}

    css_sheet = generate_css_sheet(rows, keyframes, selectors)
    preset = build_preset(rows, computed, keyframes, selectors.dark_selector)
    schema = build_schema(base, brand)

    logger.debug(
        "Compiled %d tokens (%d utilities) from %s + %s",
        len(rows),
        len(preset.utilities),
        base.name,
        brand.name,
    )
    return CompiledArtifacts(css_sheet=css_sheet, preset=preset, schema=schema)

"""
CSS custom-property sheet generation.

Produces one custom property per token: mode-independent tokens in the
root scope, color tokens twice (light selector and dark selector), then
@keyframes rules. The output carries no timestamps so that unchanged
input always yields the same bytes.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from tinct.core.config import CssConfig
from tinct.tokens.models import (
    Keyframes,
    ModeValues,
    ModeVariant,
    TokenCategory,
    TokenDefinition,
    custom_property,
)

GENERATED_HEADER = """\
/**
 * AUTO-GENERATED FILE - DO NOT EDIT DIRECTLY
 *
 * Generated by tinct from the base and brand token sources.
 * To modify, edit the sources and run: tinct build
 */"""

TokenRow = tuple[TokenCategory, str, TokenDefinition]


def generate_css_sheet(
    tokens: Iterable[TokenRow],
    keyframes: Mapping[str, Keyframes] | None = None,
    selectors: CssConfig | None = None,
) -> str:
    """
    Generate the token sheet.

    Args:
        tokens: (category, name, definition) rows, already sorted
        keyframes: Keyframe name -> step -> property -> value
        selectors: Root/light/dark selectors (defaults from CssConfig)

    Returns:
        CSS text ending with a newline
    """
    selectors = selectors or CssConfig()
    rows = list(tokens)

    lines: list[str] = [GENERATED_HEADER, ""]

    lines.append(f"{selectors.root_selector} {{")
    lines.extend(_token_lines((row for row in rows if row[0] != TokenCategory.COLOR), None))
    lines.append("}")
    lines.append("")

    color_rows = [row for row in rows if row[0] == TokenCategory.COLOR]
    for mode, selector in (
        (ModeVariant.LIGHT, selectors.light_selector),
        (ModeVariant.DARK, selectors.dark_selector),
    ):
        lines.append(f"/* Colors ({mode.value} mode) */")
        lines.append(f"{selector} {{")
        lines.extend(_token_lines(color_rows, mode))
        lines.append("}")
        lines.append("")

    keyframes = keyframes or {}
    for name in sorted(keyframes):
        lines.extend(_keyframe_lines(name, keyframes[name]))
        lines.append("")

    return "\n".join(lines).rstrip("\n") + "\n"


def _token_lines(rows: Iterable[TokenRow], mode: ModeVariant | None, indent: int = 2) -> list[str]:
    """
    Generate custom property lines, with a comment heading per category.

    Args:
        rows: Token rows
        mode: Variant to emit for color tokens; None for mode-independent tokens
        indent: Number of spaces for indentation
    """
    lines: list[str] = []
    prefix = " " * indent
    current: TokenCategory | None = None

    for category, name, definition in rows:
        if mode is None and category != current:
            if current is not None:
                lines.append("")
            lines.append(f"{prefix}/* {category.value} */")
            current = category
        fallback = definition.fallback
        value = fallback.for_mode(mode) if isinstance(fallback, ModeValues) and mode else fallback
        lines.append(f"{prefix}{custom_property(category, name)}: {value};")

    return lines


def _keyframe_lines(name: str, frames: Keyframes) -> list[str]:
    lines = [f"@keyframes {name} {{"]
    for step in _ordered_steps(frames):
        declarations = " ".join(f"{prop}: {value};" for prop, value in sorted(frames[step].items()))
        lines.append(f"  {step} {{ {declarations} }}")
    lines.append("}")
    return lines


def _ordered_steps(frames: Keyframes) -> list[str]:
    """from < percentages (numeric) < to."""

    def key(step: str) -> tuple[float, str]:
        if step == "from":
            return (0.0, step)
        if step == "to":
            return (100.0, step)
        try:
            return (float(step.rstrip("%")), step)
        except ValueError:
            return (50.0, step)

    return sorted(frames, key=key)

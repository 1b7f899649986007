"""
Base token definitions (structural).

Structural tokens are static and bundled with the application:
spacing, radii, z-index layers, shadows, and animations. They are
compiled into the default scope of the generated sheet.
"""

from __future__ import annotations

from .models import TokenCategory, TokenDefinition, TokenSource


def _defs(values: dict[str, str]) -> dict[str, TokenDefinition]:
    return {name: TokenDefinition(fallback=value) for name, value in values.items()}


# =============================================================================
# Spacing
# =============================================================================

SPACING = {
    "1": "0.25rem",
    "2": "0.5rem",
    "3": "0.75rem",
    "4": "1rem",
    "5": "1.25rem",
    "6": "1.5rem",
    "8": "2rem",
    "10": "2.5rem",
    "12": "3rem",
    "16": "4rem",
}

# =============================================================================
# Border Radius
# =============================================================================

RADIUS = {
    "sm": "0.375rem",
    "md": "0.625rem",
    "lg": "1rem",
    "xl": "1.5rem",
    "2xl": "2rem",
    "full": "9999px",
}

# =============================================================================
# Z-Index
# =============================================================================

Z_INDEX = {
    "dropdown": "100",
    "sticky": "200",
    "modal": "300",
    "popover": "400",
    "tooltip": "600",
    "toast": "9900",
}

# =============================================================================
# Shadows
# =============================================================================

SHADOW = {
    "raised": "-6px -6px 14px rgba(255, 255, 255, 0.88), 6px 6px 14px rgba(175, 175, 175, 0.52)",
    "raisedSm": "-3px -3px 8px rgba(255, 255, 255, 0.88), 3px 3px 8px rgba(175, 175, 175, 0.52)",
    "raisedLg": "-8px -8px 20px rgba(255, 255, 255, 0.9), 8px 8px 20px rgba(175, 175, 175, 0.58)",
    "pressed": "inset -4px -4px 8px rgba(255, 255, 255, 0.88), inset 4px 4px 8px rgba(175, 175, 175, 0.52)",
    "pressedSm": "inset -2px -2px 5px rgba(255, 255, 255, 0.75), inset 2px 2px 5px rgba(175, 175, 175, 0.44)",
    "flat": "inset 1px 1px 2px rgba(175, 175, 175, 0.32), inset -1px -1px 2px rgba(255, 255, 255, 0.55)",
    "focus": "0 0 0 3px rgba(0, 175, 102, 0.6)",
    "insetHighlight": "inset 0 1px 0 rgba(255, 255, 255, 0.2)",
    "controlUnchecked": "inset -2px -2px 4px rgba(255, 255, 255, 0.7), inset 2px 2px 5px rgba(0, 60, 40, 0.35)",
    "controlChecked": "inset 0 1px 0 rgba(255, 255, 255, 0.25), inset 2px 2px 5px rgba(0, 80, 50, 0.35)",
}

# =============================================================================
# Animations (durations + shorthands)
# =============================================================================

ANIMATION = {
    "duration-fast": "150ms",
    "duration-normal": "200ms",
    "duration-slow": "300ms",
    "duration-spinner": "3s",
    "accordion-expand": "accordion-expand 300ms cubic-bezier(0.4, 0, 0.2, 1) forwards",
    "accordion-collapse": "accordion-collapse 300ms cubic-bezier(0.4, 0, 0.2, 1) forwards",
    "content-fade-in": "content-fade-in 200ms cubic-bezier(0.4, 0, 0.2, 1) 100ms forwards",
    "content-fade-out": "content-fade-out 150ms cubic-bezier(0.4, 0, 0.2, 1) forwards",
    "backdrop-in": "backdrop-fade-in 300ms cubic-bezier(0.4, 0, 0.2, 1) forwards",
    "backdrop-out": "backdrop-fade-out 200ms cubic-bezier(0.4, 0, 0.2, 1) forwards",
    "drawer-in-right": "slide-in-right 300ms cubic-bezier(0.4, 0, 0.2, 1) forwards",
    "drawer-out-right": "slide-out-right 200ms cubic-bezier(0.4, 0, 0.2, 1) forwards",
}

KEYFRAMES = {
    "accordion-expand": {
        "from": {"grid-template-rows": "0fr"},
        "to": {"grid-template-rows": "1fr"},
    },
    "accordion-collapse": {
        "from": {"grid-template-rows": "1fr"},
        "to": {"grid-template-rows": "0fr"},
    },
    "content-fade-in": {
        "from": {"opacity": "0", "transform": "translateY(-4px)"},
        "to": {"opacity": "1", "transform": "translateY(0)"},
    },
    "content-fade-out": {
        "from": {"opacity": "1", "transform": "translateY(0)"},
        "to": {"opacity": "0", "transform": "translateY(-4px)"},
    },
    "backdrop-fade-in": {"from": {"opacity": "0"}, "to": {"opacity": "1"}},
    "backdrop-fade-out": {"from": {"opacity": "1"}, "to": {"opacity": "0"}},
    "slide-in-right": {
        "from": {"transform": "translateX(100%)"},
        "to": {"transform": "translateX(0)"},
    },
    "slide-out-right": {
        "from": {"transform": "translateX(0)"},
        "to": {"transform": "translateX(100%)"},
    },
}

# =============================================================================
# Aggregate
# =============================================================================

BASE_TOKENS = TokenSource(
    name="base",
    tokens={
        TokenCategory.SPACING: _defs(SPACING),
        TokenCategory.RADIUS: _defs(RADIUS),
        TokenCategory.Z_INDEX: _defs(Z_INDEX),
        TokenCategory.SHADOW: _defs(SHADOW),
        TokenCategory.ANIMATION: _defs(ANIMATION),
    },
    keyframes=KEYFRAMES,
)

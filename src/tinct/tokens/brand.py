"""
Brand token schema (visual).

Declares the keys and fallbacks of brand tokens, not the runtime values.
Actual values are fetched at runtime from brand payloads
(``<base>/<scope>/themes/<brand-id>.json``); fallbacks apply whenever a
payload omits a token or sends something malformed.
"""

from __future__ import annotations

from .models import ComputedColor, ModeValues, TokenCategory, TokenDefinition, TokenSource

# =============================================================================
# Colors (light, dark)
# =============================================================================

COLORS: dict[str, tuple[str, str]] = {
    # Primary
    "primary": ("#00af66", "#00af66"),
    "primary-foreground": ("#ffffff", "#ffffff"),
    "primary-hover": ("#008a52", "#00c974"),
    # Secondary
    "secondary": ("#6366f1", "#6366f1"),
    "secondary-foreground": ("#ffffff", "#ffffff"),
    "secondary-hover": ("#4338ca", "#818cf8"),
    # Base
    "background": ("#f4f4f4", "#212121"),
    "foreground": ("#222222", "#f5f5f5"),
    "surface": ("#f4f4f4", "#212121"),
    # Muted
    "muted": ("#e9e9e9", "#3a3a3a"),
    "muted-foreground": ("#6b7280", "#9e9e9e"),
    "border": ("#dedede", "#4a4a4a"),
    # Destructive
    "destructive": ("#ef3737", "#ef4444"),
    "destructive-foreground": ("#ffffff", "#ffffff"),
    "destructive-hover": ("#b91c1c", "#f87171"),
    # Accent
    "accent": ("#6366f1", "#818cf8"),
    "accent-foreground": ("#ffffff", "#ffffff"),
    # Semantic
    "success": ("#00af66", "#22c55e"),
    "success-foreground": ("#ffffff", "#ffffff"),
    "warning": ("#ff6900", "#f97316"),
    "warning-foreground": ("#ffffff", "#ffffff"),
    "info": ("#3b82f6", "#60a5fa"),
    "info-foreground": ("#ffffff", "#ffffff"),
    # Neumorphic surfaces
    "neu-base": ("#f4f4f4", "#212121"),
    "neu-light": ("rgba(255,255,255,0.88)", "rgba(255,255,255,0.06)"),
    "neu-dark": ("rgba(175,175,175,0.52)", "rgba(0,0,0,0.5)"),
    # Spinner
    "spinner-front": ("#00af66", "#00af66"),
    "spinner-back": ("#00935a", "#00b368"),
    "spinner-light": ("#dedede", "#3a3a3a"),
    "spinner-lighter": ("#ebebeb", "#4a4a4a"),
    "spinner-dark": ("#404040", "#e0e0e0"),
    "spinner-darker": ("#525252", "#c0c0c0"),
    # AI features
    "ai": ("#8B5CF6", "#A78BFA"),
    "ai-foreground": ("#ffffff", "#ffffff"),
    "ai-hover": ("#7C3AED", "#C4B5FD"),
    "ai-from": ("#8B5CF6", "#A78BFA"),
    "ai-to": ("#6366F1", "#818CF8"),
}

# =============================================================================
# Font families
# =============================================================================

FONTS: dict[str, tuple[str, str]] = {
    "heading": (
        "var(--font-sans), ui-sans-serif, system-ui, sans-serif",
        "Heading font family - references loaded sans font",
    ),
    "body": (
        "var(--font-sans), ui-sans-serif, system-ui, sans-serif",
        "Body text font family - references loaded sans font",
    ),
    "code": (
        "var(--font-mono), ui-monospace, monospace",
        "Monospace font for code - references loaded mono font",
    ),
}

# =============================================================================
# Computed colors
# These reference brand colors through color-mix(), so they follow the
# live brand value without being part of the payload.
# =============================================================================

COMPUTED_COLORS = {
    "primary-muted": ComputedColor(base="primary", opacity=0.3),
    "secondary-muted": ComputedColor(base="secondary", opacity=0.3),
    "accent-muted": ComputedColor(base="accent", opacity=0.3),
    "destructive-muted": ComputedColor(base="destructive", opacity=0.3),
    "success-muted": ComputedColor(base="success", opacity=0.3),
    "warning-muted": ComputedColor(base="warning", opacity=0.3),
    "info-muted": ComputedColor(base="info", opacity=0.3),
    "ai-muted": ComputedColor(base="ai", opacity=0.2),
}

BRAND_TOKENS = TokenSource(
    name="brand",
    tokens={
        TokenCategory.COLOR: {
            name: TokenDefinition(fallback=ModeValues(light=light, dark=dark))
            for name, (light, dark) in COLORS.items()
        },
        TokenCategory.FONT: {
            name: TokenDefinition(fallback=value, description=description)
            for name, (value, description) in FONTS.items()
        },
    },
    computed_colors=COMPUTED_COLORS,
)

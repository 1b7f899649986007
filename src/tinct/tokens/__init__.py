"""
tinct design tokens.

Usage:
    from tinct.tokens import BASE_TOKENS, BRAND_TOKENS, TokenCategory

    for category, name, definition in BRAND_TOKENS.iter_tokens():
        ...
"""

from .base import BASE_TOKENS
from .brand import BRAND_TOKENS
from .loader import load_sources, load_token_source, parse_token_source, save_token_source
from .models import (
    ComputedColor,
    ModeValues,
    ModeVariant,
    TokenCategory,
    TokenDefinition,
    TokenSource,
    custom_property,
    qualified_id,
)
from .shapes import matches_shape

__all__ = [
    "BASE_TOKENS",
    "BRAND_TOKENS",
    "ComputedColor",
    "ModeValues",
    "ModeVariant",
    "TokenCategory",
    "TokenDefinition",
    "TokenSource",
    "custom_property",
    "load_sources",
    "load_token_source",
    "matches_shape",
    "parse_token_source",
    "qualified_id",
    "save_token_source",
]

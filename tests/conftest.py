"""Shared pytest fixtures for tinct tests."""

import logging

import pytest

from tinct.compiler import BrandThemeSchema, compile_tokens
from tinct.core.logging import ROOT_LOGGER_NAME
from tinct.tokens import ModeValues, TokenCategory, TokenDefinition, TokenSource

RAISED_SHADOW = "0 1px 2px rgba(0,0,0,.2)"


@pytest.fixture
def base_source() -> TokenSource:
    """A small structural token source."""
    return TokenSource(
        name="base",
        tokens={
            TokenCategory.SHADOW: {"raised": TokenDefinition(fallback=RAISED_SHADOW)},
            TokenCategory.RADIUS: {"md": TokenDefinition(fallback="0.625rem")},
            TokenCategory.SPACING: {"4": TokenDefinition(fallback="1rem")},
            TokenCategory.Z_INDEX: {"modal": TokenDefinition(fallback="300")},
            TokenCategory.ANIMATION: {"duration-fast": TokenDefinition(fallback="150ms")},
        },
    )


@pytest.fixture
def brand_source() -> TokenSource:
    """A small visual token source."""
    return TokenSource(
        name="brand",
        tokens={
            TokenCategory.COLOR: {
                "primary": TokenDefinition(fallback=ModeValues(light="#10B981", dark="#34D399")),
                "background": TokenDefinition(
                    fallback=ModeValues(light="#ffffff", dark="#111111")
                ),
            },
            TokenCategory.FONT: {"body": TokenDefinition(fallback="Inter, sans-serif")},
        },
    )


@pytest.fixture
def schema(base_source: TokenSource, brand_source: TokenSource) -> BrandThemeSchema:
    """Schema compiled from the small sources."""
    return compile_tokens(base_source, brand_source).schema


@pytest.fixture(autouse=True)
def _reset_tinct_logging():
    """Drop handlers installed by setup_logging() (the CLI installs them)."""
    yield
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)

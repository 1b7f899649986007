"""
Unit tests for token source models.
"""

import pytest
from pydantic import ValidationError

from tinct.tokens import (
    BASE_TOKENS,
    BRAND_TOKENS,
    ComputedColor,
    ModeValues,
    ModeVariant,
    TokenCategory,
    TokenDefinition,
    TokenSource,
    custom_property,
    qualified_id,
)
from tinct.tokens.models import camel_to_kebab, normalize_token_name


class TestTokenNames:
    """Tests for token name normalization."""

    def test_camel_case_becomes_kebab(self):
        """camelCase names are converted to kebab-case."""
        assert camel_to_kebab("raisedSm") == "raised-sm"
        assert camel_to_kebab("controlUnchecked") == "control-unchecked"
        assert camel_to_kebab("primary") == "primary"

    def test_normalize_accepts_digits(self):
        """Numeric spacing names are valid."""
        assert normalize_token_name("16") == "16"
        assert normalize_token_name("2xl") == "2xl"

    @pytest.mark.parametrize("name", ["", "has space", "under_score", "trailing-", "semi;colon"])
    def test_normalize_rejects_invalid(self, name: str):
        """Names that cannot form a CSS identifier are rejected."""
        with pytest.raises(ValueError):
            normalize_token_name(name)

    def test_custom_property_uses_namespace(self):
        """Property ids are --<namespace>-<name>."""
        assert custom_property(TokenCategory.SHADOW, "raised") == "--shadow-raised"
        assert custom_property(TokenCategory.COLOR, "primary") == "--color-primary"
        assert custom_property(TokenCategory.Z_INDEX, "modal") == "--z-index-modal"

    def test_qualified_id_uses_category_value(self):
        """Qualified ids use the category value."""
        assert qualified_id(TokenCategory.Z_INDEX, "modal") == "zIndex.modal"


class TestModes:
    """Tests for mode values."""

    def test_for_mode(self):
        """ModeValues selects the value for a mode."""
        values = ModeValues(light="#fff", dark="#000")
        assert values.for_mode(ModeVariant.LIGHT) == "#fff"
        assert values.for_mode(ModeVariant.DARK) == "#000"

    def test_toggled(self):
        """Toggling flips light and dark."""
        assert ModeVariant.LIGHT.toggled() is ModeVariant.DARK
        assert ModeVariant.DARK.toggled() is ModeVariant.LIGHT


class TestTokenSource:
    """Tests for TokenSource construction."""

    def test_names_are_normalized(self):
        """camelCase token names are stored in kebab-case."""
        source = TokenSource(
            name="base",
            tokens={TokenCategory.SHADOW: {"raisedSm": TokenDefinition(fallback="0 1px 2px #000")}},
        )
        assert "raised-sm" in source.tokens[TokenCategory.SHADOW]

    def test_normalized_collision_rejected(self):
        """Two spellings of the same name in one category are rejected."""
        with pytest.raises(ValidationError):
            TokenSource(
                name="base",
                tokens={
                    TokenCategory.SHADOW: {
                        "raisedSm": TokenDefinition(fallback="0 1px 2px #000"),
                        "raised-sm": TokenDefinition(fallback="0 1px 2px #000"),
                    }
                },
            )

    def test_iter_tokens_sorted(self):
        """Tokens iterate by category value, then name."""
        source = TokenSource(
            name="mixed",
            tokens={
                TokenCategory.SPACING: {"b": TokenDefinition(fallback="1px")},
                TokenCategory.COLOR: {
                    "z": TokenDefinition(fallback=ModeValues(light="#fff", dark="#000")),
                    "a": TokenDefinition(fallback=ModeValues(light="#fff", dark="#000")),
                },
            },
        )
        order = [(category.value, name) for category, name, _ in source.iter_tokens()]
        assert order == [("color", "a"), ("color", "z"), ("spacing", "b")]

    def test_source_is_frozen(self):
        """Token sources cannot be mutated."""
        with pytest.raises(ValidationError):
            BASE_TOKENS.name = "other"  # type: ignore[misc]

    def test_computed_color_opacity_bounds(self):
        """Opacity must be within [0, 1]."""
        with pytest.raises(ValidationError):
            ComputedColor(base="primary", opacity=1.5)


class TestBuiltInSources:
    """Tests for the bundled base and brand sources."""

    def test_base_has_no_colors(self):
        """Base tokens are structural only."""
        assert TokenCategory.COLOR not in BASE_TOKENS.tokens
        assert "raised-sm" in BASE_TOKENS.tokens[TokenCategory.SHADOW]

    def test_brand_colors_have_both_modes(self):
        """Every brand color declares light and dark fallbacks."""
        for definition in BRAND_TOKENS.tokens[TokenCategory.COLOR].values():
            assert isinstance(definition.fallback, ModeValues)

    def test_brand_computed_colors_reference_colors(self):
        """Computed colors reference declared brand colors."""
        colors = BRAND_TOKENS.tokens[TokenCategory.COLOR]
        for computed in BRAND_TOKENS.computed_colors.values():
            assert computed.base in colors

    def test_brand_includes_spinner_and_ai_gradient(self):
        """The bundled brand carries the spinner and AI gradient colors."""
        colors = BRAND_TOKENS.tokens[TokenCategory.COLOR]
        for name in (
            "spinner-front",
            "spinner-back",
            "spinner-light",
            "spinner-lighter",
            "spinner-dark",
            "spinner-darker",
            "ai-from",
            "ai-to",
        ):
            assert name in colors
        assert colors["spinner-back"].fallback == ModeValues(light="#00935a", dark="#00b368")
        assert colors["ai-to"].fallback == ModeValues(light="#6366F1", dark="#818CF8")

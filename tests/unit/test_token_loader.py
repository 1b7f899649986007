"""
Unit tests for token source YAML loading.
"""

from pathlib import Path

import pytest

from tinct.core.config import BuildConfig
from tinct.core.errors import TokenSourceError
from tinct.tokens import (
    BASE_TOKENS,
    BRAND_TOKENS,
    ModeValues,
    TokenCategory,
    load_sources,
    load_token_source,
    parse_token_source,
    save_token_source,
)

BRAND_YAML = """
name: acme-brand
tokens:
  color:
    primary: {light: "#10B981", dark: "#34D399"}
    primaryForeground:
      fallback: {light: "#ffffff", dark: "#000000"}
      description: Text on primary
  font:
    body: "Inter, sans-serif"
computed_colors:
  primary-muted: {base: primary, opacity: 0.3}
"""


class TestParseTokenSource:
    """Tests for parse_token_source()."""

    def test_shorthand_entries(self, tmp_path: Path):
        """Plain strings and light/dark maps expand to definitions."""
        path = tmp_path / "brand.yaml"
        path.write_text(BRAND_YAML)

        source = load_token_source(path)

        assert source.name == "acme-brand"
        colors = source.tokens[TokenCategory.COLOR]
        assert colors["primary"].fallback == ModeValues(light="#10B981", dark="#34D399")
        assert colors["primary-foreground"].description == "Text on primary"
        assert source.tokens[TokenCategory.FONT]["body"].fallback == "Inter, sans-serif"
        assert source.computed_colors["primary-muted"].opacity == 0.3

    def test_name_defaults_to_stem(self, tmp_path: Path):
        """Sources without a name take the file stem."""
        path = tmp_path / "structural.yaml"
        path.write_text("tokens:\n  spacing:\n    '4': 1rem\n")

        assert load_token_source(path).name == "structural"

    def test_unknown_category_rejected(self):
        """Unknown categories are a source error."""
        with pytest.raises(TokenSourceError):
            parse_token_source({"tokens": {"gradient": {"hero": "linear-gradient(red, blue)"}}})

    def test_category_must_be_mapping(self):
        """A category holding a list is rejected."""
        with pytest.raises(TokenSourceError, match="tokens.color"):
            parse_token_source({"tokens": {"color": ["primary"]}})

    def test_invalid_token_name_rejected(self):
        """Token names must be usable in CSS identifiers."""
        with pytest.raises(TokenSourceError):
            parse_token_source({"tokens": {"spacing": {"bad name": "1rem"}}})


class TestLoadTokenSource:
    """Tests for file handling."""

    def test_missing_file(self, tmp_path: Path):
        """Missing files raise TokenSourceError."""
        with pytest.raises(TokenSourceError, match="not found"):
            load_token_source(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path: Path):
        """Unparseable YAML raises TokenSourceError."""
        path = tmp_path / "broken.yaml"
        path.write_text("tokens: {color: [unclosed\n")
        with pytest.raises(TokenSourceError, match="Invalid YAML"):
            load_token_source(path)

    def test_empty_file(self, tmp_path: Path):
        """Empty files raise TokenSourceError."""
        path = tmp_path / "empty.yaml"
        path.write_text("")
        with pytest.raises(TokenSourceError, match="Empty"):
            load_token_source(path)

    def test_saved_source_loads_back(self, tmp_path: Path):
        """A saved source loads back unchanged."""
        path = save_token_source(tmp_path / "out" / "brand.yaml", BRAND_TOKENS)
        assert load_token_source(path) == BRAND_TOKENS


class TestLoadSources:
    """Tests for load_sources()."""

    def test_defaults_to_built_ins(self):
        """Unconfigured sources fall back to the bundled definitions."""
        base, brand = load_sources(BuildConfig())
        assert base is BASE_TOKENS
        assert brand is BRAND_TOKENS

    def test_configured_brand_source(self, tmp_path: Path):
        """A configured brand source replaces the built-in one."""
        path = tmp_path / "brand.yaml"
        path.write_text(BRAND_YAML)

        base, brand = load_sources(BuildConfig(brand_source=path))

        assert base is BASE_TOKENS
        assert brand.name == "acme-brand"

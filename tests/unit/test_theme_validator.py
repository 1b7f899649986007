"""
Unit tests for brand payload validation.
"""

import pytest

from tinct.compiler import build_schema
from tinct.runtime import ValidationWarning, WarningKind, validate_payload
from tinct.tokens import ModeValues, ModeVariant, TokenCategory, TokenDefinition, TokenSource

RAISED_SHADOW = "0 1px 2px rgba(0,0,0,.2)"


@pytest.fixture
def scenario_schema():
    """One color and one shadow."""
    return build_schema(
        TokenSource(
            name="base",
            tokens={TokenCategory.SHADOW: {"raised": TokenDefinition(fallback=RAISED_SHADOW)}},
        ),
        TokenSource(
            name="brand",
            tokens={
                TokenCategory.COLOR: {
                    "primary": TokenDefinition(
                        fallback=ModeValues(light="#10B981", dark="#34D399")
                    )
                }
            },
        ),
    )


def _paths(warnings, kind: WarningKind) -> list[str]:
    return [w.path for w in warnings if w.kind == kind]


class TestScenario:
    """Partial payload resolution."""

    def test_partial_color_and_missing_shadow(self, scenario_schema):
        """A payload with only color.primary.light resolves everything else to fallbacks."""
        result = validate_payload(scenario_schema, {"color": {"primary": {"light": "#00AA55"}}})

        light = result.resolved.flatten(ModeVariant.LIGHT)
        assert light["color.primary"] == "#00AA55"
        assert light["shadow.raised"] == RAISED_SHADOW
        assert result.resolved.flatten(ModeVariant.DARK)["color.primary"] == "#34D399"

        assert [str(w) for w in result.warnings] == [
            "MissingToken: color.primary.dark",
            "MissingToken: shadow.raised",
        ]


class TestFallbackCompleteness:
    """Every schema token resolves for any payload."""

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            None,
            [],
            "not a document",
            {"color": None},
            {"color": {"primary": "#fff"}},
            {"color": {"primary": {"light": 1, "dark": None}}},
            {"shadow": {"raised": {"nested": True}}},
            {"font": {"body": "x"}, "gradient": {}},
        ],
    )
    def test_every_token_resolved(self, schema, payload):
        """Resolved themes contain every schema token."""
        resolved = validate_payload(schema, payload).resolved
        for mode in ModeVariant:
            flat = resolved.flatten(mode)
            assert set(flat) == {entry.id for entry in schema.entries}
            assert all(isinstance(value, str) and value for value in flat.values())

    def test_empty_payload_uses_fallbacks(self, schema):
        """An empty document resolves to the schema fallbacks with a warning per value."""
        result = validate_payload(schema, {})
        assert result.resolved.properties(ModeVariant.DARK)["--color-primary"] == "#34D399"
        # two colors x two modes + one token in each other category
        assert len(result.of_kind(WarningKind.MISSING)) == 4 + 6


class TestMalformed:
    """Malformed values fall back and report the wire value."""

    def test_malformed_variant(self, schema):
        """A bad color variant falls back and keeps the raw value."""
        result = validate_payload(
            schema, {"color": {"primary": {"light": "javascript:alert(1)", "dark": "#000000"}}}
        )
        theme = result.resolved
        assert theme.get(TokenCategory.COLOR, "primary").value == ModeValues(
            light="#10B981", dark="#000000"
        )
        malformed = result.of_kind(WarningKind.MALFORMED)
        assert len(malformed) == 1
        assert malformed[0].path == "color.primary.light"
        assert malformed[0].raw == "javascript:alert(1)"

    def test_named_colors_accepted(self, schema):
        """CSS named colors are valid payload values in any case."""
        result = validate_payload(
            schema, {"color": {"primary": {"light": "red", "dark": "Navy"}}}
        )
        assert result.resolved.get(TokenCategory.COLOR, "primary").value == ModeValues(
            light="red", dark="Navy"
        )
        assert not result.of_kind(WarningKind.MALFORMED)

    def test_malformed_shadow(self, schema):
        """A non-shadow value for a shadow falls back."""
        result = validate_payload(schema, {"shadow": {"raised": 12}})
        assert result.resolved.flatten(ModeVariant.LIGHT)["shadow.raised"] == RAISED_SHADOW
        assert result.of_kind(WarningKind.MALFORMED)[0].raw == 12

    def test_color_node_not_mapping(self, schema):
        """A color given as a plain string is one malformed warning at the token."""
        result = validate_payload(schema, {"color": {"primary": "#fff"}})
        assert _paths(result.warnings, WarningKind.MALFORMED) == ["color.primary"]
        assert "color.primary.light" not in _paths(result.warnings, WarningKind.MISSING)

    def test_category_not_mapping(self, schema):
        """A category that is not a mapping is one warning; its tokens fall back silently."""
        result = validate_payload(schema, {"color": ["#fff"]})
        assert _paths(result.warnings, WarningKind.MALFORMED) == ["color"]
        assert not [p for p in _paths(result.warnings, WarningKind.MISSING) if p.startswith("color")]

    def test_root_not_mapping(self, schema):
        """A non-mapping document is one root warning."""
        result = validate_payload(schema, ["color"])
        assert len(result.warnings) == 1
        assert result.warnings[0].path == "<root>"
        assert result.resolved.flatten(ModeVariant.LIGHT) == validate_payload(
            schema, {}
        ).resolved.flatten(ModeVariant.LIGHT)


class TestUnknown:
    """Extraneous keys are informational."""

    def test_unknown_keys(self, schema):
        """Unknown categories, tokens and mode keys are reported, never applied."""
        result = validate_payload(
            schema,
            {
                "gradient": {"hero": "linear-gradient(red, blue)"},
                "color": {
                    "tertiary": {"light": "#fff", "dark": "#000"},
                    "primary": {"light": "#fff", "dark": "#000", "contrast": "#888"},
                },
            },
        )
        assert _paths(result.warnings, WarningKind.UNKNOWN) == [
            "color.primary.contrast",
            "color.tertiary",
            "gradient",
        ]
        assert "--color-tertiary" not in result.resolved.properties(ModeVariant.LIGHT)
        assert result.resolved.flatten(ModeVariant.LIGHT)["color.primary"] == "#fff"


class TestWarnings:
    """Tests for ValidationWarning."""

    def test_path(self):
        """Paths join category, token and mode."""
        warning = ValidationWarning(
            kind=WarningKind.MISSING, category="color", token="primary", mode=ModeVariant.DARK
        )
        assert warning.path == "color.primary.dark"

    def test_kind_values(self):
        """Kinds render with their public names."""
        assert [kind.value for kind in WarningKind] == [
            "MissingToken",
            "MalformedToken",
            "UnknownToken",
        ]

    def test_complete_payload_has_no_warnings(self, schema):
        """A complete, well-formed payload resolves cleanly."""
        payload = {
            "color": {
                "primary": {"light": "#111111", "dark": "#eeeeee"},
                "background": {"light": "#ffffff", "dark": "#000000"},
            },
            "font": {"body": "Georgia, serif"},
            "shadow": {"raised": "none"},
            "radius": {"md": "4px"},
            "spacing": {"4": "1rem"},
            "zIndex": {"modal": "500"},
            "animation": {"duration-fast": "100ms"},
        }
        result = validate_payload(schema, payload, name="acme")
        assert result.ok
        assert result.resolved.name == "acme"
        assert result.resolved.properties(ModeVariant.LIGHT)["--z-index-modal"] == "500"

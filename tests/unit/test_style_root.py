"""
Unit tests for the CSS application layer.
"""

import pytest

from tinct.runtime import ResolvedTheme, ResolvedToken, StyleRoot, validate_payload
from tinct.tokens import ModeValues, ModeVariant, TokenCategory


@pytest.fixture
def base_theme(schema) -> ResolvedTheme:
    return ResolvedTheme.from_schema(schema)


@pytest.fixture
def acme(schema) -> ResolvedTheme:
    payload = {
        "color": {"primary": {"light": "#ff0000", "dark": "#990000"}},
        "font": {"body": "Georgia, serif"},
    }
    return validate_payload(schema, payload, name="acme").resolved


@pytest.fixture
def globex(schema) -> ResolvedTheme:
    payload = {"color": {"background": {"light": "#fafafa", "dark": "#050505"}}}
    return validate_payload(schema, payload, name="globex").resolved


def _color_props(theme: ResolvedTheme) -> set[str]:
    return {token.css_property for token in theme.tokens if token.is_color}


class TestApply:
    """Tests for StyleRoot.apply()."""

    def test_writes_theme_for_mode(self, base_theme, acme):
        """Applying writes every property for the selected mode."""
        root = StyleRoot(base_theme)
        root.apply(acme, ModeVariant.DARK)

        assert root.properties == acme.properties(ModeVariant.DARK)
        assert root.get("--color-primary") == "#990000"
        assert root.attributes == {"data-theme": "dark"}
        assert root.theme_name == "acme"

    def test_reset_on_apply(self, base_theme, acme, globex):
        """Applying B after A leaves exactly B's properties."""
        root = StyleRoot(base_theme)
        root.apply(acme, ModeVariant.LIGHT)
        root.apply(globex, ModeVariant.LIGHT)

        assert root.properties == globex.properties(ModeVariant.LIGHT)
        assert root.get("--color-primary") == "#10B981"
        assert root.get("--font-body") == "Inter, sans-serif"

    def test_absent_tokens_reset_to_base(self, base_theme, acme):
        """A theme lacking a token resets it to the base value."""
        partial = ResolvedTheme(
            name="partial",
            tokens=tuple(t for t in acme.tokens if t.name != "primary"),
        )
        root = StyleRoot(base_theme)
        root.apply(acme, ModeVariant.LIGHT)
        changed = root.apply(partial, ModeVariant.LIGHT)

        assert root.get("--color-primary") == "#10B981"
        assert "--color-primary" in changed

    def test_properties_unknown_to_base_are_dropped(self, base_theme):
        """Properties the base does not declare are removed when absent."""
        extra = ResolvedTheme(
            name="extra",
            tokens=(
                *base_theme.tokens,
                ResolvedToken(
                    category=TokenCategory.COLOR,
                    name="tertiary",
                    css_property="--color-tertiary",
                    value=ModeValues(light="#123456", dark="#654321"),
                ),
            ),
        )
        root = StyleRoot(base_theme)
        root.apply(extra, ModeVariant.LIGHT)
        assert root.get("--color-tertiary") == "#123456"

        changed = root.apply(base_theme, ModeVariant.LIGHT)
        assert root.get("--color-tertiary") is None
        assert changed == {"--color-tertiary"}

    def test_returns_changed_properties(self, base_theme, acme):
        """Only properties whose value changed are reported."""
        root = StyleRoot(base_theme)
        root.apply(base_theme, ModeVariant.LIGHT)
        changed = root.apply(acme, ModeVariant.LIGHT)
        assert changed == {"--color-primary", "--font-body"}
        assert root.apply(acme, ModeVariant.LIGHT) == set()


class TestApplyColors:
    """Tests for mode swaps."""

    def test_only_colors_change(self, base_theme, acme):
        """Swapping mode leaves non-color properties byte-identical."""
        root = StyleRoot(base_theme)
        root.apply(acme, ModeVariant.LIGHT)
        before = root.properties

        changed = root.apply_colors(acme, ModeVariant.DARK)
        after = root.properties

        colors = _color_props(acme)
        assert changed <= colors
        assert {k: v for k, v in before.items() if k not in colors} == {
            k: v for k, v in after.items() if k not in colors
        }
        assert after["--color-primary"] == "#990000"
        assert root.mode == ModeVariant.DARK


class TestRenderCss:
    """Tests for StyleRoot.render_css()."""

    def test_sorted_and_stable(self, base_theme, acme):
        """The rendered root is sorted and byte-stable."""
        root = StyleRoot(base_theme, selector="#app")
        root.apply(acme, ModeVariant.DARK)
        css = root.render_css()

        lines = css.splitlines()
        assert lines[0] == "#app {"
        assert lines[1] == "  color-scheme: dark;"
        assert lines[-1] == "}"
        props = [line.strip().split(":")[0] for line in lines[2:-1]]
        assert props == sorted(props)
        assert css == root.render_css()
        assert css.endswith("}\n")

"""
CSS application layer.

StyleRoot models the single scoping root that carries live custom
properties. Every apply writes a complete property set: properties from a
previous theme that the new one lacks are reset to the base value (or
dropped when the base lacks them too), so no brand bleeds into the next.
"""

from __future__ import annotations

from tinct.tokens.models import ModeVariant

from .resolved import ResolvedTheme

THEME_ATTRIBUTE = "data-theme"


class StyleRoot:
    """
    Live custom properties on one scoping root.

    Example:
        root = StyleRoot(base_theme)
        changed = root.apply(brand_theme, ModeVariant.DARK)
        root.render_css()
    """

    def __init__(self, base: ResolvedTheme, *, selector: str = ":root"):
        self.base = base
        self.selector = selector
        self.mode: ModeVariant | None = None
        self.theme_name: str | None = None
        self._properties: dict[str, str] = {}

    @property
    def properties(self) -> dict[str, str]:
        return dict(self._properties)

    @property
    def attributes(self) -> dict[str, str]:
        """Attributes on the root element (the active mode)."""
        return {THEME_ATTRIBUTE: self.mode.value} if self.mode is not None else {}

    def get(self, css_property: str) -> str | None:
        return self._properties.get(css_property)

    def _write(self, target: dict[str, str]) -> set[str]:
        previous = self._properties
        changed = {
            prop for prop in previous.keys() | target.keys() if previous.get(prop) != target.get(prop)
        }
        self._properties = target
        return changed

    def apply(self, theme: ResolvedTheme, mode: ModeVariant) -> set[str]:
        """
        Write every property of ``theme`` for ``mode``.

        Returns:
            Properties whose value changed (including removed ones)
        """
        target = theme.properties(mode)
        base_properties = self.base.properties(mode)
        for prop in self._properties:
            if prop not in target and prop in base_properties:
                target[prop] = base_properties[prop]

        self.mode = mode
        self.theme_name = theme.name
        return self._write(target)

    def apply_colors(self, theme: ResolvedTheme, mode: ModeVariant) -> set[str]:
        """
        Rewrite only color properties for ``mode``.

        Returns:
            Properties whose value changed
        """
        target = dict(self._properties)
        target.update(theme.color_properties(mode))
        self.mode = mode
        return self._write(target)

    def render_css(self) -> str:
        """Serialize the root as a stylesheet (sorted, newline-terminated)."""
        lines = [f"{self.selector} {{"]
        if self.mode is not None:
            lines.append(f"  color-scheme: {self.mode.value};")
        lines.extend(f"  {prop}: {self._properties[prop]};" for prop in sorted(self._properties))
        lines.append("}")
        return "\n".join(lines) + "\n"

"""
Resolved themes.

A resolved theme holds exactly one value per schema token (one per mode for
colors). It is what the validator produces and what the application layer
writes onto the scoping root.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from tinct.compiler.schema import BrandThemeSchema
from tinct.tokens.models import ModeValues, ModeVariant, TokenCategory, qualified_id


class ResolvedToken(BaseModel):
    """A single token value after fallback resolution."""

    model_config = ConfigDict(frozen=True)

    category: TokenCategory
    name: str
    css_property: str
    value: str | ModeValues

    @property
    def id(self) -> str:
        return qualified_id(self.category, self.name)

    @property
    def is_color(self) -> bool:
        return self.category == TokenCategory.COLOR

    def for_mode(self, mode: ModeVariant) -> str:
        if isinstance(self.value, ModeValues):
            return self.value.for_mode(mode)
        return self.value


class ResolvedTheme(BaseModel):
    """
    Fully fallback-applied token values for one brand.

    Example:
        theme = ResolvedTheme.from_schema(schema)
        theme.properties(ModeVariant.DARK)["--color-primary"]
    """

    model_config = ConfigDict(frozen=True)

    name: str = "base"
    tokens: tuple[ResolvedToken, ...] = ()

    @classmethod
    def from_schema(cls, schema: BrandThemeSchema, name: str = "base") -> ResolvedTheme:
        """The base theme: every token at its schema fallback."""
        return cls(
            name=name,
            tokens=tuple(
                ResolvedToken(
                    category=entry.category,
                    name=entry.name,
                    css_property=entry.css_property,
                    value=entry.fallback,
                )
                for entry in schema.entries
            ),
        )

    def get(self, category: TokenCategory, name: str) -> ResolvedToken | None:
        for token in self.tokens:
            if token.category == category and token.name == name:
                return token
        return None

    def flatten(self, mode: ModeVariant) -> dict[str, str]:
        """Qualified id -> value for the given mode."""
        return {token.id: token.for_mode(mode) for token in self.tokens}

    def properties(self, mode: ModeVariant) -> dict[str, str]:
        """Custom property -> value for the given mode."""
        return {token.css_property: token.for_mode(mode) for token in self.tokens}

    def color_properties(self, mode: ModeVariant) -> dict[str, str]:
        """Custom property -> value for color tokens only."""
        return {
            token.css_property: token.for_mode(mode) for token in self.tokens if token.is_color
        }

    def __len__(self) -> int:
        return len(self.tokens)

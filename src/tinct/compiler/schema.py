"""
Brand theme schema.

The schema is derived from the token sources at compile time and shipped
as JSON next to the generated sheet. At runtime it is all the validator
needs: every token's category, expected value shape, and fallback.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationError

from tinct.core.errors import SchemaLoadError
from tinct.tokens.models import (
    ModeValues,
    TokenCategory,
    TokenSource,
    custom_property,
    qualified_id,
)
from tinct.tokens.shapes import SHAPE_NAMES

SCHEMA_VERSION = 1


class SchemaEntry(BaseModel):
    """Expected shape and fallback for one token."""

    model_config = ConfigDict(frozen=True)

    category: TokenCategory
    name: str
    css_property: str = Field(description="Custom property identifier (e.g. --color-primary)")
    shape: str = Field(description="Expected value shape (e.g. 'shadow-layers')")
    fallback: str | ModeValues
    description: str | None = None

    @property
    def id(self) -> str:
        return qualified_id(self.category, self.name)

    @property
    def is_color(self) -> bool:
        return self.category == TokenCategory.COLOR


class BrandThemeSchema(BaseModel):
    """
    Schema of a runtime brand payload.

    Entries are ordered by category then name; the ordering is part of the
    artifact's byte stability.
    """

    model_config = ConfigDict(frozen=True)

    version: int = SCHEMA_VERSION
    entries: tuple[SchemaEntry, ...] = ()

    _index: dict[tuple[TokenCategory, str], SchemaEntry] = PrivateAttr(default_factory=dict)

    def model_post_init(self, __context: object) -> None:
        self._index = {(entry.category, entry.name): entry for entry in self.entries}

    def get(self, category: TokenCategory, name: str) -> SchemaEntry | None:
        return self._index.get((category, name))

    def categories(self) -> list[TokenCategory]:
        """Declared categories in schema order."""
        seen: dict[TokenCategory, None] = {}
        for entry in self.entries:
            seen.setdefault(entry.category, None)
        return list(seen)

    def entries_for(self, category: TokenCategory) -> list[SchemaEntry]:
        return [entry for entry in self.entries if entry.category == category]

    def __len__(self) -> int:
        return len(self.entries)

    def to_json(self) -> str:
        """Serialize deterministically (sorted keys, two-space indent, trailing newline)."""
        data = self.model_dump(mode="json", exclude_none=True)
        return json.dumps(data, indent=2, sort_keys=True, ensure_ascii=False) + "\n"

    @classmethod
    def from_json(cls, text: str) -> BrandThemeSchema:
        """
        Parse a schema artifact.

        Raises:
            SchemaLoadError: If the text is not a valid schema document.
        """
        try:
            schema = cls.model_validate_json(text)
        except ValidationError as e:
            raise SchemaLoadError(f"Invalid brand theme schema: {e}") from e
        if schema.version != SCHEMA_VERSION:
            raise SchemaLoadError(
                f"Unsupported schema version {schema.version} (expected {SCHEMA_VERSION})"
            )
        return schema


def build_schema(*sources: TokenSource) -> BrandThemeSchema:
    """
    Derive the brand theme schema from token sources.

    Callers are expected to have validated the sources (see compile_tokens);
    this only assembles entries in deterministic order.
    """
    entries = [
        SchemaEntry(
            category=category,
            name=name,
            css_property=custom_property(category, name),
            shape=SHAPE_NAMES[category],
            fallback=definition.fallback,
            description=definition.description,
        )
        for source in sources
        for category, name, definition in source.iter_tokens()
    ]
    entries.sort(key=lambda entry: (entry.category.value, entry.name))
    return BrandThemeSchema(entries=tuple(entries))


def load_schema(path: Path) -> BrandThemeSchema:
    """
    Load a compiled schema artifact from disk.

    Raises:
        SchemaLoadError: If the file is missing or invalid.
    """
    if not path.exists():
        raise SchemaLoadError(f"Schema not found: {path}. Run `tinct build` first.")
    return BrandThemeSchema.from_json(path.read_text(encoding="utf-8"))

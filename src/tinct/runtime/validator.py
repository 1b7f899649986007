"""
Brand payload validation.

Checks an untrusted brand payload against the compiled schema and resolves
every declared token, falling back to the schema value whenever the payload
is missing a token or carries one of the wrong shape. Validation never
raises for data-shape problems; it reports them as warnings instead.

Payload layout::

    {
      "color": {"primary": {"light": "#10B981", "dark": "#34D399"}},
      "font": {"body": "Inter, sans-serif"}
    }
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict

from tinct.compiler.schema import BrandThemeSchema, SchemaEntry
from tinct.tokens.models import ModeValues, ModeVariant, TokenCategory
from tinct.tokens.shapes import matches_shape

from .resolved import ResolvedTheme, ResolvedToken

_MISSING = object()
_MODE_KEYS = frozenset(mode.value for mode in ModeVariant)


class WarningKind(StrEnum):
    """Validation warning kind."""

    MISSING = "MissingToken"
    MALFORMED = "MalformedToken"
    UNKNOWN = "UnknownToken"


class ValidationWarning(BaseModel):
    """
    A non-fatal problem found in a brand payload.

    ``raw`` holds the value that arrived on the wire for malformed tokens,
    never the fallback that replaced it.
    """

    model_config = ConfigDict(frozen=True)

    kind: WarningKind
    category: str | None = None
    token: str | None = None
    mode: ModeVariant | None = None
    raw: Any = None

    @property
    def path(self) -> str:
        """Dotted location in the payload, e.g. ``color.primary.dark``."""
        parts = [part for part in (self.category, self.token, self.mode) if part is not None]
        return ".".join(str(part) for part in parts) or "<root>"

    def __str__(self) -> str:
        if self.kind == WarningKind.MALFORMED:
            return f"{self.kind.value}: {self.path} = {self.raw!r}"
        return f"{self.kind.value}: {self.path}"


class ValidationResult(BaseModel):
    """Resolved theme plus the warnings collected while resolving it."""

    model_config = ConfigDict(frozen=True)

    resolved: ResolvedTheme
    warnings: tuple[ValidationWarning, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.warnings

    def of_kind(self, kind: WarningKind) -> list[ValidationWarning]:
        return [w for w in self.warnings if w.kind == kind]


def _resolve_color(
    entry: SchemaEntry, node: Any, warnings: list[ValidationWarning]
) -> ModeValues:
    assert isinstance(entry.fallback, ModeValues)
    category = entry.category.value

    if node is _MISSING:
        for mode in ModeVariant:
            warnings.append(
                ValidationWarning(
                    kind=WarningKind.MISSING, category=category, token=entry.name, mode=mode
                )
            )
        return entry.fallback

    if not isinstance(node, Mapping):
        warnings.append(
            ValidationWarning(
                kind=WarningKind.MALFORMED, category=category, token=entry.name, raw=node
            )
        )
        return entry.fallback

    values: dict[str, str] = {}
    for mode in ModeVariant:
        raw = node.get(mode.value, _MISSING)
        if raw is _MISSING:
            warnings.append(
                ValidationWarning(
                    kind=WarningKind.MISSING, category=category, token=entry.name, mode=mode
                )
            )
            values[mode.value] = entry.fallback.for_mode(mode)
        elif not matches_shape(entry.category, raw):
            warnings.append(
                ValidationWarning(
                    kind=WarningKind.MALFORMED,
                    category=category,
                    token=entry.name,
                    mode=mode,
                    raw=raw,
                )
            )
            values[mode.value] = entry.fallback.for_mode(mode)
        else:
            values[mode.value] = raw

    for key in sorted(str(k) for k in node.keys() if k not in _MODE_KEYS):
        warnings.append(
            ValidationWarning(
                kind=WarningKind.UNKNOWN, category=category, token=f"{entry.name}.{key}"
            )
        )
    return ModeValues(**values)


def _resolve_value(
    entry: SchemaEntry, raw: Any, warnings: list[ValidationWarning]
) -> str | ModeValues:
    if raw is _MISSING:
        warnings.append(
            ValidationWarning(
                kind=WarningKind.MISSING, category=entry.category.value, token=entry.name
            )
        )
        return entry.fallback
    if not matches_shape(entry.category, raw):
        warnings.append(
            ValidationWarning(
                kind=WarningKind.MALFORMED,
                category=entry.category.value,
                token=entry.name,
                raw=raw,
            )
        )
        return entry.fallback
    return raw


def validate_payload(
    schema: BrandThemeSchema, payload: Any, *, name: str = "brand"
) -> ValidationResult:
    """
    Resolve a brand payload against the schema.

    Args:
        schema: Compiled brand theme schema
        payload: Parsed payload document (untrusted)
        name: Name given to the resolved theme

    Returns:
        ValidationResult whose theme has a value for every schema token
    """
    warnings: list[ValidationWarning] = []

    if not isinstance(payload, Mapping):
        warnings.append(ValidationWarning(kind=WarningKind.MALFORMED, raw=payload))
        return ValidationResult(
            resolved=ResolvedTheme.from_schema(schema, name=name), warnings=tuple(warnings)
        )

    tokens: list[ResolvedToken] = []
    for category in schema.categories():
        node = payload.get(category.value, _MISSING)
        entries = schema.entries_for(category)

        if node is not _MISSING and not isinstance(node, Mapping):
            # One warning for the whole category; its tokens fall back silently.
            warnings.append(
                ValidationWarning(kind=WarningKind.MALFORMED, category=category.value, raw=node)
            )
            tokens.extend(_fallback_token(entry) for entry in entries)
            continue

        for entry in entries:
            raw = _MISSING if node is _MISSING else node.get(entry.name, _MISSING)
            if category == TokenCategory.COLOR:
                value: str | ModeValues = _resolve_color(entry, raw, warnings)
            else:
                value = _resolve_value(entry, raw, warnings)
            tokens.append(
                ResolvedToken(
                    category=entry.category,
                    name=entry.name,
                    css_property=entry.css_property,
                    value=value,
                )
            )

        if node is not _MISSING:
            declared = {entry.name for entry in entries}
            for key in sorted(str(k) for k in node.keys() if k not in declared):
                warnings.append(
                    ValidationWarning(kind=WarningKind.UNKNOWN, category=category.value, token=key)
                )

    known = {category.value for category in schema.categories()}
    for key in sorted(str(k) for k in payload.keys() if k not in known):
        warnings.append(ValidationWarning(kind=WarningKind.UNKNOWN, category=key))

    return ValidationResult(
        resolved=ResolvedTheme(name=name, tokens=tuple(tokens)), warnings=tuple(warnings)
    )


def _fallback_token(entry: SchemaEntry) -> ResolvedToken:
    return ResolvedToken(
        category=entry.category,
        name=entry.name,
        css_property=entry.css_property,
        value=entry.fallback,
    )

"""
Error types for tinct token compilation, loading, and theming.
"""

from __future__ import annotations

from typing import Any


class TinctError(Exception):
    """Base exception for all tinct errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


# =============================================================================
# Compile-time (fatal)
# =============================================================================


class TokenCompileError(TinctError):
    """
    Raised when token sources cannot be compiled.

    Compile errors are fatal: no artifact is emitted when one is raised.
    """

    pass


class DuplicateTokenError(TokenCompileError):
    """
    Raised when two token sources declare the same token name.

    Examples:
    - base declares ``shadow.focus`` and brand declares ``color.focus``
    - both sources declare ``radius.sm``
    """

    def __init__(self, name: str, first: str, second: str):
        self.name = name
        self.first = first
        self.second = second
        super().__init__(f"Token name '{name}' is declared twice: {first} and {second}")


class MalformedFallbackError(TokenCompileError):
    """
    Raised when a fallback does not match the shape expected for its category.

    Examples:
    - a shadow fallback that is not a multi-layer shadow expression
    - a color token without separate light and dark fallbacks
    """

    def __init__(self, category: str, name: str, fallback: Any, reason: str = ""):
        self.category = category
        self.name = name
        self.fallback = fallback
        detail = f" ({reason})" if reason else ""
        super().__init__(f"Malformed fallback for {category}.{name}: {fallback!r}{detail}")


class UnresolvedReferenceError(TokenCompileError):
    """Raised when a computed color refers to a color token nobody declares."""

    def __init__(self, name: str, reference: str):
        self.name = name
        self.reference = reference
        super().__init__(
            f"Computed color '{name}' references unknown color token '{reference}'"
        )


# =============================================================================
# Loading
# =============================================================================


class TokenSourceError(TinctError):
    """Error loading or parsing a token source file."""

    pass


class SchemaLoadError(TinctError):
    """Error loading a compiled brand theme schema."""

    pass


class ConfigError(TinctError):
    """Error reading tinct.toml."""

    pass


# =============================================================================
# Runtime
# =============================================================================


class ThemeFetchError(TinctError):
    """
    Raised when a brand payload cannot be obtained.

    Covers network errors, non-success responses, timeouts, and documents
    that cannot be parsed. The theme manager converts this into a failure
    result and never lets it unwind the caller.
    """

    def __init__(
        self,
        brand_id: str,
        message: str,
        *,
        url: str | None = None,
        status: int | None = None,
    ):
        self.brand_id = brand_id
        self.url = url
        self.status = status
        super().__init__(message)


class ThemeNotInitializedError(TinctError, AssertionError):
    """Raised when a brand-scoped operation runs before init_base_theme()."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation}() called before init_base_theme()")

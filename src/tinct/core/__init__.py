"""Core infrastructure: configuration, errors, logging."""

from .config import TinctConfig, load_config
from .errors import (
    ConfigError,
    DuplicateTokenError,
    MalformedFallbackError,
    SchemaLoadError,
    ThemeFetchError,
    ThemeNotInitializedError,
    TinctError,
    TokenCompileError,
    TokenSourceError,
    UnresolvedReferenceError,
)

__all__ = [
    "TinctConfig",
    "load_config",
    "ConfigError",
    "DuplicateTokenError",
    "MalformedFallbackError",
    "SchemaLoadError",
    "ThemeFetchError",
    "ThemeNotInitializedError",
    "TinctError",
    "TokenCompileError",
    "TokenSourceError",
    "UnresolvedReferenceError",
]

"""
tinct runtime theming.

Usage:
    from tinct.compiler import load_schema
    from tinct.runtime import HttpThemeFetcher, ThemeManager

    manager = ThemeManager(load_schema(path), HttpThemeFetcher(base_url, scope="shell"))
    manager.init_base_theme()
    result = await manager.load_brand("acme")
"""

from .application import StyleRoot
from .cache import FailedEntry, InFlightEntry, ResolvedEntry, ThemeCache
from .fetcher import FileThemeFetcher, HttpThemeFetcher, ThemeFetcher, theme_url
from .manager import BrandLoadResult, ThemeManager, ThemeManagerState, ThemePhase
from .mode_store import CookieModeStore, MemoryModeStore, ModeStore, theme_cookie_header
from .resolved import ResolvedTheme, ResolvedToken
from .validator import ValidationResult, ValidationWarning, WarningKind, validate_payload

__all__ = [
    "BrandLoadResult",
    "CookieModeStore",
    "FailedEntry",
    "FileThemeFetcher",
    "HttpThemeFetcher",
    "InFlightEntry",
    "MemoryModeStore",
    "ModeStore",
    "ResolvedEntry",
    "ResolvedTheme",
    "ResolvedToken",
    "StyleRoot",
    "ThemeCache",
    "ThemeFetcher",
    "ThemeManager",
    "ThemeManagerState",
    "ThemePhase",
    "ValidationResult",
    "ValidationWarning",
    "WarningKind",
    "theme_cookie_header",
    "theme_url",
    "validate_payload",
]

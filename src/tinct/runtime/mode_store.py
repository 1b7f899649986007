"""
Mode persistence.

The theme manager reads the starting mode once, at init_base_theme().
Writing the preference when the user toggles is the caller's job; these
stores are the hooks for it.

The preference is a cookie holding ``light`` or ``dark``. Any other value,
including ``system``, means there is no stored preference.
"""

from __future__ import annotations

from typing import Protocol

import httpx

from tinct.tokens.models import ModeVariant

THEME_COOKIE_NAME = "tinct-theme"
THEME_COOKIE_MAX_AGE = 365 * 24 * 60 * 60  # 1 year in seconds
SYSTEM_MODE = "system"


class ModeStore(Protocol):
    """Read/write hook for the persisted mode preference."""

    def read(self) -> ModeVariant | None: ...

    def write(self, mode: ModeVariant) -> None: ...


def parse_mode(value: str | None) -> ModeVariant | None:
    """Map a stored preference to a mode; unrecognized values mean no preference."""
    if value == ModeVariant.LIGHT.value:
        return ModeVariant.LIGHT
    if value == ModeVariant.DARK.value:
        return ModeVariant.DARK
    return None


def theme_cookie_header(mode: ModeVariant | str, name: str = THEME_COOKIE_NAME) -> str:
    """
    Render a Set-Cookie value for a mode preference.

    ``system`` (or anything that is not a mode) clears the cookie.
    """
    selected = parse_mode(str(mode))
    if selected is None:
        return f"{name}=; Path=/; Max-Age=0; SameSite=Lax"
    return f"{name}={selected.value}; Path=/; Max-Age={THEME_COOKIE_MAX_AGE}; SameSite=Lax"


class MemoryModeStore:
    """In-process mode preference."""

    def __init__(self, mode: ModeVariant | None = None):
        self.mode = mode

    def read(self) -> ModeVariant | None:
        return self.mode

    def write(self, mode: ModeVariant) -> None:
        self.mode = mode


class CookieModeStore:
    """
    Mode preference kept in an httpx cookie jar.

    Example:
        store = CookieModeStore(client.cookies)
        manager = ThemeManager(schema, fetcher, mode_store=store)
    """

    def __init__(
        self,
        cookies: httpx.Cookies,
        *,
        name: str = THEME_COOKIE_NAME,
        domain: str = "",
    ):
        self.cookies = cookies
        self.name = name
        self.domain = domain

    def read(self) -> ModeVariant | None:
        return parse_mode(self.cookies.get(self.name, domain=self.domain or None))

    def write(self, mode: ModeVariant) -> None:
        self.cookies.set(self.name, mode.value, domain=self.domain, path="/")

    def clear(self) -> None:
        """Forget the preference (fall back to the system default)."""
        try:
            self.cookies.delete(self.name, domain=self.domain or None, path="/")
        except KeyError:
            pass

"""
Brand theme cache.

One cache belongs to one ThemeManager and lives as long as it does. Each
brand id maps to exactly one entry:

- ResolvedEntry: the validated theme, reused without another fetch
- InFlightEntry: the shared fetch task that concurrent callers await
- FailedEntry: a permanent-failure sentinel; the brand is not retried

Nothing is evicted automatically. ``evict()`` and ``clear()`` are there for
long-lived processes that need to pick up redeployed brand payloads.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field

from tinct.core.errors import ThemeFetchError

from .resolved import ResolvedTheme
from .validator import ValidationWarning


@dataclass(frozen=True)
class ResolvedEntry:
    theme: ResolvedTheme
    warnings: tuple[ValidationWarning, ...] = ()


@dataclass(frozen=True)
class InFlightEntry:
    task: asyncio.Task[ResolvedEntry | FailedEntry]


@dataclass(frozen=True)
class FailedEntry:
    error: ThemeFetchError


CacheEntry = ResolvedEntry | InFlightEntry | FailedEntry


@dataclass
class ThemeCache:
    """Per-manager brand theme cache keyed by brand id."""

    _entries: dict[str, CacheEntry] = field(default_factory=dict)

    def get(self, brand_id: str) -> CacheEntry | None:
        return self._entries.get(brand_id)

    def mark_in_flight(
        self, brand_id: str, task: asyncio.Task[ResolvedEntry | FailedEntry]
    ) -> InFlightEntry:
        entry = InFlightEntry(task=task)
        self._entries[brand_id] = entry
        return entry

    def store_resolved(
        self,
        brand_id: str,
        theme: ResolvedTheme,
        warnings: tuple[ValidationWarning, ...] = (),
    ) -> ResolvedEntry:
        entry = ResolvedEntry(theme=theme, warnings=warnings)
        self._entries[brand_id] = entry
        return entry

    def store_failure(self, brand_id: str, error: ThemeFetchError) -> FailedEntry:
        entry = FailedEntry(error=error)
        self._entries[brand_id] = entry
        return entry

    def release(self, brand_id: str) -> None:
        """Drop an in-flight entry whose fetch was cancelled before finishing."""
        if isinstance(self._entries.get(brand_id), InFlightEntry):
            del self._entries[brand_id]

    def evict(self, brand_id: str) -> bool:
        """
        Drop a brand's entry so the next load fetches again.

        In-flight entries are left alone; the running fetch still owns them.

        Returns:
            True if an entry was removed
        """
        entry = self._entries.get(brand_id)
        if entry is None or isinstance(entry, InFlightEntry):
            return False
        del self._entries[brand_id]
        return True

    def clear(self) -> None:
        """Drop every resolved and failed entry."""
        for brand_id in [b for b, e in self._entries.items() if not isinstance(e, InFlightEntry)]:
            del self._entries[brand_id]

    def brand_ids(self) -> list[str]:
        return sorted(self._entries)

    def __contains__(self, brand_id: object) -> bool:
        return brand_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

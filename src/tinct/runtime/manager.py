"""
Runtime theme manager.

Owns the theme state machine for one process (or one test)::

    UNINITIALIZED -> BASE_APPLIED -> LOADING(brand) <-> BRAND_APPLIED(brand)

Brand payloads are fetched at most once per brand id. Concurrent loads of
the same brand share one fetch task; a failed brand is remembered and not
retried. Only the currently selected brand is ever applied, so a slow load
that has been superseded by a newer selection is discarded on completion.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import StrEnum

import httpx

from tinct.compiler.schema import BrandThemeSchema
from tinct.core.config import RuntimeConfig
from tinct.core.errors import ConfigError, ThemeFetchError, ThemeNotInitializedError
from tinct.core.logging import (
    error_fetch_failed,
    get_theme_logger,
    info_base_theme_init,
    info_theme_applied,
    log_with_context,
    warn_validation,
)
from tinct.tokens.models import ModeVariant

from .application import StyleRoot
from .cache import FailedEntry, InFlightEntry, ResolvedEntry, ThemeCache
from .fetcher import HttpThemeFetcher, ThemeFetcher
from .mode_store import CookieModeStore, MemoryModeStore, ModeStore
from .resolved import ResolvedTheme
from .validator import ValidationWarning, validate_payload

logger = get_theme_logger()


class ThemePhase(StrEnum):
    """Theme manager lifecycle phase."""

    UNINITIALIZED = "uninitialized"
    BASE_APPLIED = "base_applied"
    LOADING = "loading"
    BRAND_APPLIED = "brand_applied"


@dataclass(frozen=True)
class ThemeManagerState:
    """Snapshot of the manager's state."""

    phase: ThemePhase
    mode: ModeVariant
    brand: str | None = None
    loading: str | None = None


@dataclass(frozen=True)
class BrandLoadResult:
    """
    Outcome of ThemeManager.load_brand().

    Attributes:
        ok: The brand resolved (possibly with warnings)
        applied: The brand's theme is now on the scoping root
        from_cache: No fetch was issued by this call
        superseded: Another selection was made before this load completed
        warnings: Validation warnings for the brand's payload
        error: Transport failure, when ok is False
    """

    brand_id: str
    ok: bool
    applied: bool = False
    from_cache: bool = False
    superseded: bool = False
    warnings: tuple[ValidationWarning, ...] = ()
    error: ThemeFetchError | None = None


class ThemeManager:
    """
    Fetches, validates, caches, and applies brand themes.

    Example:
        manager = ThemeManager(schema, HttpThemeFetcher(base_url, scope="shell"))
        manager.init_base_theme()
        result = await manager.load_brand("acme")
        manager.set_mode(ModeVariant.DARK)
    """

    def __init__(
        self,
        schema: BrandThemeSchema,
        fetcher: ThemeFetcher,
        *,
        application: StyleRoot | None = None,
        cache: ThemeCache | None = None,
        mode_store: ModeStore | None = None,
        fetch_timeout: float = 10.0,
        default_brand: str | None = None,
    ):
        self.schema = schema
        self.fetcher = fetcher
        self.base_theme = ResolvedTheme.from_schema(schema)
        self.application = application if application is not None else StyleRoot(self.base_theme)
        self.cache = cache if cache is not None else ThemeCache()
        self.mode_store = mode_store if mode_store is not None else MemoryModeStore()
        self.fetch_timeout = fetch_timeout
        self.default_brand = default_brand

        self._initialized = False
        self._mode = ModeVariant.LIGHT
        self._applied_brand: str | None = None
        self._applied_theme = self.base_theme
        # Current selection; a completing load applies only if it still matches.
        self._selected: str | None = None

    @classmethod
    def from_config(
        cls,
        schema: BrandThemeSchema,
        runtime: RuntimeConfig,
        *,
        application: StyleRoot | None = None,
        cookies: httpx.Cookies | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> ThemeManager:
        """
        Build a manager from the [runtime] section of tinct.toml.

        Payloads are fetched over HTTP from ``themes_base_url``. When a cookie
        jar is given the mode preference is kept in it under ``cookie_name``.

        Raises:
            ConfigError: If no themes base URL is configured.
        """
        if not runtime.themes_base_url:
            raise ConfigError("runtime.themes_base_url is not set")

        fetcher = HttpThemeFetcher(
            runtime.themes_base_url,
            runtime.scope,
            client=client,
            timeout=runtime.fetch_timeout,
        )
        mode_store = None
        if cookies is not None:
            mode_store = CookieModeStore(cookies, name=runtime.cookie_name)
        return cls(
            schema,
            fetcher,
            application=application,
            mode_store=mode_store,
            fetch_timeout=runtime.fetch_timeout,
            default_brand=runtime.default_brand,
        )

    # =========================================================================
    # State
    # =========================================================================

    @property
    def mode(self) -> ModeVariant:
        return self._mode

    @property
    def current_theme(self) -> ResolvedTheme:
        return self._applied_theme

    @property
    def state(self) -> ThemeManagerState:
        if not self._initialized:
            phase = ThemePhase.UNINITIALIZED
        elif self._selected is not None and self._selected != self._applied_brand:
            phase = ThemePhase.LOADING
        elif self._applied_brand is not None:
            phase = ThemePhase.BRAND_APPLIED
        else:
            phase = ThemePhase.BASE_APPLIED
        loading = self._selected if phase == ThemePhase.LOADING else None
        return ThemeManagerState(
            phase=phase, mode=self._mode, brand=self._applied_brand, loading=loading
        )

    def _require_init(self, operation: str) -> None:
        if not self._initialized:
            raise ThemeNotInitializedError(operation)

    # =========================================================================
    # Base theme and mode
    # =========================================================================

    def init_base_theme(self) -> None:
        """Apply the base theme. Later calls are no-ops."""
        if self._initialized:
            return
        self._mode = self.mode_store.read() or ModeVariant.LIGHT
        self.application.apply(self.base_theme, self._mode)
        self._initialized = True
        info_base_theme_init()

    def set_mode(self, mode: ModeVariant | str) -> set[str]:
        """
        Switch light/dark, rewriting only color properties.

        A load still in flight picks up the new mode when it applies.

        Returns:
            Properties whose value changed
        """
        self._require_init("set_mode")
        self._mode = ModeVariant(mode)
        return self.application.apply_colors(self._applied_theme, self._mode)

    def toggle_mode(self) -> ModeVariant:
        """Flip between light and dark; returns the new mode."""
        self._require_init("toggle_mode")
        self.set_mode(self._mode.toggled())
        return self._mode

    def clear_brand(self) -> None:
        """Revert to the base theme. Cached brands stay cached."""
        self._require_init("clear_brand")
        self._selected = None
        self._apply_base()

    async def aclose(self) -> None:
        """Close the fetcher, if it holds resources (e.g. an HTTP client)."""
        close = getattr(self.fetcher, "aclose", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> ThemeManager:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    # =========================================================================
    # Brand loading
    # =========================================================================

    async def start(self, brand_id: str | None = None) -> BrandLoadResult | None:
        """
        Apply the base theme, then load the given or default brand, if any.
        """
        self.init_base_theme()
        brand_id = brand_id or self.default_brand
        if brand_id is None:
            return None
        return await self.load_brand(brand_id)

    async def load_brand(self, brand_id: str) -> BrandLoadResult:
        """
        Load and apply a brand theme.

        Transport failures are returned in the result, never raised.
        """
        self._require_init("load_brand")
        self._selected = brand_id

        entry = self.cache.get(brand_id)
        if isinstance(entry, ResolvedEntry):
            self._apply_brand(brand_id, entry.theme)
            return BrandLoadResult(
                brand_id=brand_id, ok=True, applied=True, from_cache=True, warnings=entry.warnings
            )
        if isinstance(entry, FailedEntry):
            return self._finish_failure(brand_id, entry.error, from_cache=True)

        if isinstance(entry, InFlightEntry):
            task = entry.task
            shared = True
        else:
            task = asyncio.create_task(self._fetch(brand_id), name=f"tinct-theme-{brand_id}")
            self.cache.mark_in_flight(brand_id, task)
            shared = False

        # shield: a cancelled waiter must not cancel the fetch other callers share
        outcome = await asyncio.shield(task)
        if isinstance(outcome, FailedEntry):
            return self._finish_failure(brand_id, outcome.error, from_cache=shared)
        return self._finish_success(brand_id, outcome, from_cache=shared)

    async def _fetch(self, brand_id: str) -> ResolvedEntry | FailedEntry:
        """Fetch and validate one brand; the only writer of its final cache entry."""
        try:
            payload = await asyncio.wait_for(self.fetcher.fetch(brand_id), self.fetch_timeout)
        except ThemeFetchError as e:
            return self._record_failure(brand_id, e)
        except TimeoutError:
            return self._record_failure(
                brand_id,
                ThemeFetchError(brand_id, f"Timed out after {self.fetch_timeout}s"),
            )
        except asyncio.CancelledError:
            self.cache.release(brand_id)
            raise
        except Exception as e:
            logger.debug("Fetcher raised %s for %s", type(e).__name__, brand_id, exc_info=True)
            return self._record_failure(brand_id, ThemeFetchError(brand_id, str(e)))

        result = validate_payload(self.schema, payload, name=brand_id)
        warn_validation(brand_id, result.warnings)
        return self.cache.store_resolved(brand_id, result.resolved, result.warnings)

    def _record_failure(self, brand_id: str, error: ThemeFetchError) -> FailedEntry:
        error_fetch_failed(brand_id, error)
        return self.cache.store_failure(brand_id, error)

    def _finish_success(
        self, brand_id: str, entry: ResolvedEntry, *, from_cache: bool
    ) -> BrandLoadResult:
        if self._selected != brand_id:
            log_with_context(
                logger,
                logging.DEBUG,
                f'Discarding superseded theme "{brand_id}"',
                selected=self._selected,
            )
            return BrandLoadResult(
                brand_id=brand_id,
                ok=True,
                from_cache=from_cache,
                superseded=True,
                warnings=entry.warnings,
            )

        self._apply_brand(brand_id, entry.theme)
        return BrandLoadResult(
            brand_id=brand_id,
            ok=True,
            applied=True,
            from_cache=from_cache,
            warnings=entry.warnings,
        )

    def _finish_failure(
        self, brand_id: str, error: ThemeFetchError, *, from_cache: bool
    ) -> BrandLoadResult:
        superseded = self._selected != brand_id
        if not superseded:
            self._selected = None
            self._apply_base()
        return BrandLoadResult(
            brand_id=brand_id,
            ok=False,
            from_cache=from_cache,
            superseded=superseded,
            error=error,
        )

    def _apply_brand(self, brand_id: str, theme: ResolvedTheme) -> None:
        self.application.apply(theme, self._mode)
        self._applied_brand = brand_id
        self._applied_theme = theme
        info_theme_applied(brand_id, self._mode.value)

    def _apply_base(self) -> None:
        self.application.apply(self.base_theme, self._mode)
        self._applied_brand = None
        self._applied_theme = self.base_theme

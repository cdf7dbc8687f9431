"""Lifecycle bridge between platform notifications and shell state.

LifecycleBridge is the stateful root of an application shell. While mounted
it holds one PlatformDispatcher subscription and translates notifications:

    BACK_REQUEST            -> Router.maybe_pop(), result reported back
    PUSH_ROUTE              -> Router.push_named(), always consumed
    LOCALE_CHANGE           -> re-resolve; rebuild only if the result changed
    METRICS_CHANGE          -> rebuild (compositions read metrics live)
    MEMORY_PRESSURE         -> no-op extension point
    LIFECYCLE_STATE_CHANGE  -> no-op extension point

Rebuilds are coalesced: any number of state changes before the next flush
produce one scheduled flush and one Composition.render() call.

Concurrency:
    All handlers run on one asyncio loop. Back requests are serialized per
    bridge so a single physical back press is never consumed twice. A back
    query that resolves after unmount still reports whether it popped, but
    changes no shell state. There is no timeout on
    Router.maybe_pop(); a query that never resolves leaves later back
    requests waiting.

Python 3.13+.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Self

from appshell.diagnostics import (
    ErrorTemplate,
    ShellStateError,
    TitleGenerationError,
)
from appshell.enums import AppLifecycleState, PlatformChannel
from appshell.localization import (
    LocaleResolver,
    combine_delegates,
    load_localizations,
)
from appshell.runtime.composition import (
    ShellDescription,
    TitleContext,
    build_shell_tree,
)
from appshell.runtime.config import debug_overrides
from appshell.runtime.navigation import NavigatorSlot

if TYPE_CHECKING:
    from types import TracebackType

    from appshell.localization import Locale, LocalizationsDelegate
    from appshell.runtime.composition import Composition
    from appshell.runtime.config import DebugOverrides, ShellConfig
    from appshell.runtime.platform import PlatformDispatcher, Subscription

__all__ = ["LifecycleBridge", "schedule_soon"]

logger = logging.getLogger(__name__)

type Scheduler = Callable[[Callable[[], None]], Any]


def schedule_soon(callback: Callable[[], None]) -> None:
    """Default rebuild scheduler.

    Defers to the next iteration of the running asyncio loop. Outside a
    loop there is nothing to defer to, so the callback runs immediately.
    """
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        callback()
        return
    loop.call_soon(callback)


class LifecycleBridge:
    """Binds platform notifications to navigation and localization state.

    Example:
        >>> bridge = LifecycleBridge(config, dispatcher, composition)
        >>> with bridge:
        ...     await dispatcher.handle_back_request()

    Attributes:
        config: Immutable shell configuration
        current_locale: Last resolved platform locale (None before mount)
        navigator: Slot holding the mounted Router
        mounted: True between mount() and unmount()
    """

    __slots__ = (
        "_back_lock",
        "_build_count",
        "_composition",
        "_config",
        "_current_locale",
        "_delegates",
        "_dispatcher",
        "_flush_scheduled",
        "_mounted",
        "_navigator",
        "_needs_build",
        "_overrides",
        "_rebuilds_scheduled",
        "_resolver",
        "_scheduler",
        "_subscription",
    )

    def __init__(
        self,
        config: ShellConfig,
        dispatcher: PlatformDispatcher,
        composition: Composition,
        *,
        overrides: DebugOverrides | None = None,
        scheduler: Scheduler | None = None,
    ) -> None:
        """Initialize an unmounted bridge.

        Args:
            config: Shell configuration (validated at its own construction)
            dispatcher: Platform event source to subscribe to at mount
            composition: Rendering capability invoked once per flush
            overrides: Debug overrides (default: process-wide instance)
            scheduler: Schedules a zero-argument flush callback
                (default: schedule_soon)
        """
        self._config = config
        self._dispatcher = dispatcher
        self._composition = composition
        self._overrides = overrides if overrides is not None else debug_overrides
        self._scheduler: Scheduler = scheduler if scheduler is not None else schedule_soon

        self._resolver = LocaleResolver(
            config.supported_locales, config.locale_resolution_callback
        )
        self._delegates: tuple[LocalizationsDelegate[Any], ...] = combine_delegates(
            config.localization_delegates
        )

        self._navigator = NavigatorSlot()
        self._current_locale: Locale | None = None
        self._subscription: Subscription | None = None
        self._mounted = False

        self._needs_build = False
        self._flush_scheduled = False
        self._rebuilds_scheduled = 0
        self._build_count = 0

        # Created lazily: asyncio.Lock binds to the loop of first use
        self._back_lock: asyncio.Lock | None = None

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def config(self) -> ShellConfig:
        return self._config

    @property
    def current_locale(self) -> Locale | None:
        return self._current_locale

    @property
    def navigator(self) -> NavigatorSlot:
        return self._navigator

    @property
    def mounted(self) -> bool:
        return self._mounted

    @property
    def needs_build(self) -> bool:
        return self._needs_build

    @property
    def rebuilds_scheduled(self) -> int:
        """Number of flushes scheduled since construction."""
        return self._rebuilds_scheduled

    @property
    def build_count(self) -> int:
        """Number of Composition.render() calls, including the first one."""
        return self._build_count

    @property
    def delegates(self) -> tuple[LocalizationsDelegate[Any], ...]:
        return self._delegates

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def mount(self) -> object:
        """Resolve the platform locale, subscribe, and compose the first frame.

        The first composition happens synchronously, after the locale is
        resolved, so no frame ever sees an unresolved locale.

        Returns:
            Whatever Composition.render() returned for the first frame

        Raises:
            ShellStateError: If already mounted
        """
        if self._mounted:
            raise ShellStateError(ErrorTemplate.already_mounted())

        self._current_locale = self._resolver.resolve(self._dispatcher.locale)
        self._subscription = self._dispatcher.subscribe(
            {
                PlatformChannel.BACK_REQUEST: self.handle_back_request,
                PlatformChannel.PUSH_ROUTE: self.handle_push_route,
                PlatformChannel.LOCALE_CHANGE: self.handle_locale_change,
                PlatformChannel.METRICS_CHANGE: self.handle_metrics_change,
                PlatformChannel.MEMORY_PRESSURE: self.handle_memory_pressure,
                PlatformChannel.LIFECYCLE_STATE_CHANGE: self.handle_lifecycle_state_change,
            },
            owner=self,
        )
        self._mounted = True
        logger.info("Shell mounted with locale %s", self._current_locale)
        try:
            return self._build()
        except Exception:
            self.unmount()
            self._current_locale = None
            raise

    def unmount(self) -> None:
        """Unsubscribe, detach the navigator and drop pending rebuilds.

        Idempotent. After unmount every handler is a no-op.
        """
        if not self._mounted:
            return
        self._mounted = False
        if self._subscription is not None:
            self._subscription.cancel()
            self._subscription = None
        self._navigator.detach()
        self._needs_build = False
        logger.info("Shell unmounted")

    def __enter__(self) -> Self:
        self.mount()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.unmount()

    # ------------------------------------------------------------------
    # Platform notification handlers
    # ------------------------------------------------------------------

    async def handle_back_request(self) -> bool:
        """Ask the Router to pop; report whether the press was consumed.

        Requests are serialized: a second request waits until the first
        query resolves.

        Returns:
            True if a route was popped, False at the root or when the shell
            was unmounted before the Router was queried

        Raises:
            NavigatorNotMountedError: If mounted but no Router is attached
        """
        if not self._mounted:
            logger.debug("Back request ignored: shell not mounted")
            return False

        if self._back_lock is None:
            self._back_lock = asyncio.Lock()

        async with self._back_lock:
            if not self._mounted:
                logger.debug("Back request ignored: shell unmounted while waiting")
                return False
            router = self._navigator.require("handle back request")
            consumed = await router.maybe_pop()

        if not self._mounted:
            # The pop already happened; report it but touch no shell state
            logger.debug("Back request resolved after unmount: consumed=%s", consumed)
            return bool(consumed)
        logger.debug("Back request consumed=%s", consumed)
        return bool(consumed)

    async def handle_push_route(self, route: str) -> bool:
        """Forward a push-route request to the Router.

        Does not wait for the transition to settle.

        Returns:
            True (always consumed while mounted), False after unmount

        Raises:
            NavigatorNotMountedError: If mounted but no Router is attached
        """
        if not self._mounted:
            logger.debug("Push route %r ignored: shell not mounted", route)
            return False
        router = self._navigator.require(f"push route {route!r}")
        router.push_named(route)
        logger.debug("Pushed route %r", route)
        return True

    def handle_locale_change(self, locale: Locale) -> None:
        """Re-resolve the platform locale; rebuild only if the result changed."""
        if not self._mounted:
            logger.debug("Locale change to %s ignored: shell not mounted", locale)
            return
        if locale == self._current_locale:
            return
        resolved = self._resolver.resolve(locale)
        if resolved == self._current_locale:
            logger.debug("Locale change to %s resolved to current %s", locale, resolved)
            return
        logger.debug("Locale changed: %s -> %s", self._current_locale, resolved)
        self._current_locale = resolved
        self._mark_needs_build()

    def handle_metrics_change(self) -> None:
        """Rebuild so the composition picks up live metrics."""
        if not self._mounted:
            return
        self._mark_needs_build()

    def handle_memory_pressure(self) -> None:
        """Extension point; the base shell holds nothing to release."""

    def handle_lifecycle_state_change(self, state: AppLifecycleState) -> None:
        """Extension point; the base shell ignores lifecycle transitions."""

    # ------------------------------------------------------------------
    # Composition
    # ------------------------------------------------------------------

    def describe(self) -> ShellDescription:
        """Build the description for the next composition.

        Raises:
            ShellStateError: If called before mount
            TitleGenerationError: If on_generate_title returns None
        """
        if not self._mounted or self._current_locale is None:
            raise ShellStateError(ErrorTemplate.not_mounted("describe"))

        config = self._config
        locale = config.locale if config.locale is not None else self._current_locale
        localizations = load_localizations(locale, self._delegates)
        metrics = self._dispatcher.metrics

        title = config.title
        if config.on_generate_title is not None:
            generated = config.on_generate_title(TitleContext(locale, localizations, metrics))
            if generated is None:
                raise TitleGenerationError(ErrorTemplate.title_generation_failed())
            title = generated

        initial_route = (
            config.initial_route
            if config.initial_route is not None
            else self._dispatcher.default_route_name
        )
        tree = build_shell_tree(
            config,
            navigator=self._navigator,
            initial_route=initial_route,
            locale=locale,
            delegates=self._delegates,
            title=title,
            overrides=self._overrides,
        )
        return ShellDescription(
            locale=locale,
            delegates=self._delegates,
            localizations=localizations,
            title=title,
            color=config.color,
            metrics=metrics,
            build_mode=config.build_mode,
            navigator=self._navigator,
            tree=tree,
        )

    def _mark_needs_build(self) -> None:
        self._needs_build = True
        if self._flush_scheduled:
            return
        self._flush_scheduled = True
        self._rebuilds_scheduled += 1
        self._scheduler(self._flush)

    def _flush(self) -> None:
        self._flush_scheduled = False
        if not self._mounted or not self._needs_build:
            return
        self._build()

    def _build(self) -> object:
        description = self.describe()
        self._needs_build = False
        self._build_count += 1
        logger.debug("Composing build #%d (locale %s)", self._build_count, description.locale)
        return self._composition.render(description)

    def __repr__(self) -> str:
        return (
            f"LifecycleBridge(mounted={self._mounted}, locale={self._current_locale}, "
            f"navigator_mounted={self._navigator.is_mounted}, builds={self._build_count})"
        )

"""Platform event source with typed notification channels.

The PlatformDispatcher is the single delivery point for host notifications.
It holds the live platform state (locale, default route, metrics, lifecycle
state) and forwards each notification to subscribers through a callback
table keyed by PlatformChannel. Each channel carries one payload type.

Delivery rules:
    - Notifications are delivered serially, in subscription order.
    - BACK_REQUEST and PUSH_ROUTE stop at the first subscriber that reports
      the event as consumed. An unconsumed back request invokes the
      ``on_unhandled_back`` hook (typically: close the application).
    - State-change channels reach every subscriber.
    - Each owner holds at most one active Subscription.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from appshell.constants import DEFAULT_ROUTE_NAME
from appshell.diagnostics import ErrorTemplate, ShellStateError
from appshell.enums import AppLifecycleState, PlatformChannel
from appshell.localization import Locale

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    "PlatformDispatcher",
    "PlatformMetrics",
    "Subscription",
    # Handler signatures
    "BackRequestHandler",
    "PushRouteHandler",
    "ChannelHandler",
]

logger = logging.getLogger(__name__)

type BackRequestHandler = Callable[[], Awaitable[bool]]
type PushRouteHandler = Callable[[str], Awaitable[bool]]
type ChannelHandler = Callable[..., Any]


@dataclass(frozen=True, slots=True)
class PlatformMetrics:
    """Snapshot of viewport and device metrics.

    Compositions read metrics live from the dispatcher on every build; the
    shell itself caches nothing.

    Attributes:
        width: Logical viewport width
        height: Logical viewport height
        device_pixel_ratio: Physical pixels per logical pixel
        text_scale_factor: User font scaling preference
    """

    width: float = 0.0
    height: float = 0.0
    device_pixel_ratio: float = 1.0
    text_scale_factor: float = 1.0

    def __post_init__(self) -> None:
        """Validate metric ranges.

        Raises:
            ValueError: If a dimension is negative or a ratio is not positive
        """
        if self.width < 0 or self.height < 0:
            msg = f"Viewport size must be non-negative, got {self.width}x{self.height}"
            raise ValueError(msg)
        if self.device_pixel_ratio <= 0:
            msg = f"device_pixel_ratio must be positive, got {self.device_pixel_ratio}"
            raise ValueError(msg)
        if self.text_scale_factor <= 0:
            msg = f"text_scale_factor must be positive, got {self.text_scale_factor}"
            raise ValueError(msg)


class Subscription:
    """Handle for one owner's callback table on a dispatcher.

    Cancelling is idempotent. After cancellation no handler of this
    subscription is invoked, including for notifications already being
    delivered to other subscribers.
    """

    __slots__ = ("_active", "_dispatcher", "_handlers", "_owner")

    def __init__(
        self,
        dispatcher: PlatformDispatcher,
        handlers: Mapping[PlatformChannel, ChannelHandler],
        owner: object,
    ) -> None:
        self._dispatcher = dispatcher
        self._handlers = MappingProxyType(dict(handlers))
        self._owner = owner
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    @property
    def owner(self) -> object:
        return self._owner

    @property
    def channels(self) -> frozenset[PlatformChannel]:
        """Channels this subscription listens on."""
        return frozenset(self._handlers)

    def handler_for(self, channel: PlatformChannel) -> ChannelHandler | None:
        """Handler registered for ``channel``, or None when inactive or absent."""
        if not self._active:
            return None
        return self._handlers.get(channel)

    def cancel(self) -> None:
        """Stop receiving notifications."""
        if not self._active:
            return
        self._active = False
        self._dispatcher._remove(self)
        logger.debug("Subscription cancelled for %r", self._owner)

    def __repr__(self) -> str:
        channels = ", ".join(sorted(channel.value for channel in self._handlers))
        return f"Subscription(owner={self._owner!r}, active={self._active}, channels=[{channels}])"


class PlatformDispatcher:
    """Delivers platform notifications to subscribed shells.

    Example:
        >>> dispatcher = PlatformDispatcher(locale=Locale("lv", "LV"))
        >>> seen = []
        >>> sub = dispatcher.subscribe(
        ...     {PlatformChannel.LOCALE_CHANGE: seen.append}, owner="demo"
        ... )
        >>> dispatcher.update_locale(Locale("en", "GB"))
        >>> seen
        [Locale(language_code='en', country_code='GB')]
        >>> sub.cancel()

    Attributes:
        locale: Current platform locale
        default_route_name: Route the platform asks for at startup
        metrics: Current viewport/device metrics
        lifecycle_state: Current application lifecycle state
    """

    __slots__ = (
        "_default_route_name",
        "_lifecycle_state",
        "_locale",
        "_metrics",
        "_on_unhandled_back",
        "_subscriptions",
    )

    def __init__(
        self,
        *,
        locale: Locale | None = None,
        default_route_name: str = DEFAULT_ROUTE_NAME,
        metrics: PlatformMetrics | None = None,
        lifecycle_state: AppLifecycleState = AppLifecycleState.RESUMED,
        on_unhandled_back: Callable[[], None] | None = None,
    ) -> None:
        """Initialize dispatcher.

        Args:
            locale: Initial platform locale (default: detected from the process
                environment via Locale.from_system())
            default_route_name: Route requested at startup (default: "/")
            metrics: Initial metrics (default: zero-size viewport)
            lifecycle_state: Initial lifecycle state
            on_unhandled_back: Called when no subscriber consumes a back request
        """
        self._locale = locale if locale is not None else Locale.from_system()
        self._default_route_name = default_route_name
        self._metrics = metrics if metrics is not None else PlatformMetrics()
        self._lifecycle_state = lifecycle_state
        self._on_unhandled_back = on_unhandled_back
        self._subscriptions: list[Subscription] = []

    @property
    def locale(self) -> Locale:
        return self._locale

    @property
    def default_route_name(self) -> str:
        return self._default_route_name

    @property
    def metrics(self) -> PlatformMetrics:
        return self._metrics

    @property
    def lifecycle_state(self) -> AppLifecycleState:
        return self._lifecycle_state

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)

    def subscribe(
        self,
        handlers: Mapping[PlatformChannel, ChannelHandler],
        *,
        owner: object = None,
    ) -> Subscription:
        """Register a callback table.

        Args:
            handlers: Handler per channel; channels may be omitted
            owner: Identity of the subscriber (default: the handlers mapping)

        Returns:
            Active Subscription

        Raises:
            ShellStateError: If ``owner`` already holds an active subscription
            TypeError: If a key is not a PlatformChannel or a handler is not callable
        """
        for channel, handler in handlers.items():
            if not isinstance(channel, PlatformChannel):
                msg = f"Unknown platform channel: {channel!r}"
                raise TypeError(msg)
            if not callable(handler):
                msg = f"Handler for {channel} is not callable: {handler!r}"
                raise TypeError(msg)

        owner = owner if owner is not None else handlers
        if any(sub.owner is owner for sub in self._subscriptions):
            raise ShellStateError(ErrorTemplate.subscription_conflict(repr(owner)))

        subscription = Subscription(self, handlers, owner)
        self._subscriptions.append(subscription)
        logger.debug("Subscribed %r to %d channel(s)", owner, len(handlers))
        return subscription

    def _remove(self, subscription: Subscription) -> None:
        if subscription in self._subscriptions:
            self._subscriptions.remove(subscription)

    def _handlers(self, channel: PlatformChannel) -> list[ChannelHandler]:
        # Snapshot: handlers may cancel subscriptions during delivery
        return [
            handler
            for sub in list(self._subscriptions)
            if (handler := sub.handler_for(channel)) is not None
        ]

    async def handle_back_request(self) -> bool:
        """Deliver a system back press.

        Returns:
            True if a subscriber consumed it, False otherwise
        """
        for sub in list(self._subscriptions):
            handler = sub.handler_for(PlatformChannel.BACK_REQUEST)
            if handler is not None and await handler():
                return True
        logger.info("Back request not consumed by any subscriber")
        if self._on_unhandled_back is not None:
            self._on_unhandled_back()
        return False

    async def handle_push_route(self, route: str) -> bool:
        """Deliver a push-route request (deep link).

        Args:
            route: Route name to open

        Returns:
            True if a subscriber consumed it, False otherwise
        """
        for sub in list(self._subscriptions):
            handler = sub.handler_for(PlatformChannel.PUSH_ROUTE)
            if handler is not None and await handler(route):
                return True
        logger.info("Push route %r not consumed by any subscriber", route)
        return False

    def update_locale(self, locale: Locale) -> None:
        """Record a new platform locale and notify subscribers."""
        self._locale = locale
        for handler in self._handlers(PlatformChannel.LOCALE_CHANGE):
            handler(locale)

    def update_metrics(self, metrics: PlatformMetrics) -> None:
        """Record new metrics and notify subscribers."""
        self._metrics = metrics
        for handler in self._handlers(PlatformChannel.METRICS_CHANGE):
            handler()

    def notify_memory_pressure(self) -> None:
        """Tell subscribers the operating system is low on memory."""
        for handler in self._handlers(PlatformChannel.MEMORY_PRESSURE):
            handler()

    def update_lifecycle_state(self, state: AppLifecycleState) -> None:
        """Record a lifecycle transition and notify subscribers."""
        self._lifecycle_state = state
        for handler in self._handlers(PlatformChannel.LIFECYCLE_STATE_CHANGE):
            handler(state)

    def __repr__(self) -> str:
        return (
            f"PlatformDispatcher(locale={self._locale}, "
            f"subscribers={len(self._subscriptions)}, "
            f"lifecycle_state={self._lifecycle_state})"
        )

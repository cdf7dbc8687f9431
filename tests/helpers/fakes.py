"""Test doubles for the shell's external capabilities.

StackRouter stands in for the navigation stack, RecordingComposition for the
rendering capability. Both are deliberately minimal: they implement only the
contracts the shell consumes.
"""

from __future__ import annotations

import asyncio
from typing import Any

from appshell.localization import Locale
from appshell.runtime import (
    LifecycleBridge,
    PlatformDispatcher,
    ShellConfig,
    ShellDescription,
)


class StackRouter:
    """Router over a plain list of route names.

    When ``gate`` is set, maybe_pop() suspends until the event is set,
    simulating an in-flight transition.
    """

    def __init__(self, *routes: str, gate: asyncio.Event | None = None) -> None:
        self.stack: list[str] = list(routes) or ["/"]
        self.gate = gate
        self.pop_calls = 0
        self.pushed: list[str] = []

    async def maybe_pop(self) -> bool:
        self.pop_calls += 1
        if self.gate is not None:
            await self.gate.wait()
        if len(self.stack) > 1:
            self.stack.pop()
            return True
        return False

    def push_named(self, route_name: str) -> None:
        self.pushed.append(route_name)
        self.stack.append(route_name)

    @property
    def depth(self) -> int:
        return len(self.stack)


class RecordingComposition:
    """Composition that records each description and mounts a router."""

    def __init__(self, router: StackRouter | None = None) -> None:
        self.router = router
        self.descriptions: list[ShellDescription] = []

    def render(self, description: ShellDescription) -> int:
        self.descriptions.append(description)
        if self.router is not None:
            description.navigator.attach(self.router)
        return len(self.descriptions)

    @property
    def render_count(self) -> int:
        return len(self.descriptions)

    @property
    def last(self) -> ShellDescription:
        return self.descriptions[-1]


def make_config(**overrides: Any) -> ShellConfig:
    """ShellConfig with required fields filled in."""
    fields: dict[str, Any] = {
        "color": "#2196f3",
        "on_generate_route": lambda name: name,
    }
    fields.update(overrides)
    return ShellConfig(**fields)


def make_bridge(
    *,
    platform_locale: Locale | None = None,
    router: StackRouter | None = None,
    **config_overrides: Any,
) -> tuple[LifecycleBridge, PlatformDispatcher, RecordingComposition]:
    """Unmounted bridge wired to a fresh dispatcher and recording composition."""
    dispatcher = PlatformDispatcher(locale=platform_locale or Locale("en", "US"))
    composition = RecordingComposition(router)
    bridge = LifecycleBridge(make_config(**config_overrides), dispatcher, composition)
    return bridge, dispatcher, composition

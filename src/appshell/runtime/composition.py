"""Presentation description handed to the Composition capability.

The shell never renders anything. On every rebuild it produces a
ShellDescription: the resolved locale, the combined delegate list, the
title, live platform metrics and a tree of ShellNode layers. The
Composition capability turns that description into whatever it renders.

Layer order is a contract. Each layer encloses every layer before it:

    navigator
    -> text style             (config.text_style is set)
    -> stack + perf overlay   (overlay shown, or any checkerboard flag)
    -> semantics debugger     (show_semantics_debugger)
    -> widget inspector       (DEBUG build, config flag or override)
    -> non-production banner  (DEBUG build, config flag and override allow)
    -> localizations
    -> title                  (outermost)

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from appshell.enums import BuildMode, LayerKind

if TYPE_CHECKING:
    from appshell.localization import Locale, LoadedLocalizations, LocalizationsDelegate
    from appshell.runtime.config import DebugOverrides, ShellConfig
    from appshell.runtime.navigation import NavigatorSlot
    from appshell.runtime.platform import PlatformMetrics

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Capability
    "Composition",
    # Description types
    "ShellNode",
    "ShellDescription",
    "TitleContext",
    # Assembly
    "build_shell_tree",
]


@dataclass(frozen=True, slots=True)
class ShellNode:
    """One presentation layer.

    Wrappers have exactly one child. The performance overlay stack has two:
    the content, then the overlay positioned above it. The navigator is the
    only leaf.

    Attributes:
        kind: Layer kind
        props: Read-only layer properties
        children: Enclosed nodes, content first
    """

    kind: LayerKind
    props: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    children: tuple[ShellNode, ...] = ()

    @classmethod
    def wrap(cls, kind: LayerKind, child: ShellNode, **props: Any) -> ShellNode:
        return cls(kind, MappingProxyType(props), (child,))

    @property
    def child(self) -> ShellNode | None:
        """Enclosed content node (first child), or None for leaves."""
        return self.children[0] if self.children else None

    def walk(self) -> Iterator[ShellNode]:
        """Depth-first, pre-order traversal."""
        yield self
        for child in self.children:
            yield from child.walk()

    def content_path(self) -> tuple[LayerKind, ...]:
        """Layer kinds from this node down to the navigator, outermost first."""
        kinds: list[LayerKind] = []
        node: ShellNode | None = self
        while node is not None:
            kinds.append(node.kind)
            node = node.child
        return tuple(kinds)

    def find(self, kind: LayerKind) -> ShellNode | None:
        """First node of ``kind`` in pre-order, or None."""
        return next((node for node in self.walk() if node.kind is kind), None)


@dataclass(frozen=True, slots=True)
class TitleContext:
    """Context passed to on_generate_title.

    Built below the localizations layer, so title generators can read
    loaded localized resources.

    Attributes:
        locale: Locale shown to the composition
        localizations: Resources loaded for ``locale``
        metrics: Platform metrics at composition time
    """

    locale: Locale
    localizations: LoadedLocalizations
    metrics: PlatformMetrics

    def localizations_of(self, type_key: object) -> Any | None:
        """Loaded resource for a delegate type, or None."""
        return self.localizations.of(type_key)


@dataclass(frozen=True, slots=True)
class ShellDescription:
    """Everything the Composition capability needs for one rebuild.

    Attributes:
        locale: Locale for the localizations layer
        delegates: Application delegates followed by the built-in default
        localizations: Resources loaded from ``delegates`` for ``locale``
        title: Title string (never None)
        color: Primary color from configuration
        metrics: Live platform metrics snapshot
        build_mode: Build flavor used to decide debug-only layers
        navigator: Slot the composition must attach the mounted Router to
        tree: Root (title) layer
    """

    locale: Locale
    delegates: tuple[LocalizationsDelegate[Any], ...]
    localizations: LoadedLocalizations
    title: str
    color: object
    metrics: PlatformMetrics
    build_mode: BuildMode
    navigator: NavigatorSlot
    tree: ShellNode


@runtime_checkable
class Composition(Protocol):
    """Declarative rendering capability consumed by the shell.

    render() is invoked once per flushed rebuild. Implementations that
    mount a navigator must call ``description.navigator.attach(router)``.
    """

    def render(self, description: ShellDescription) -> object:
        """Render ``description``; the return value is passed back to the caller."""
        ...


def build_shell_tree(
    config: ShellConfig,
    *,
    navigator: NavigatorSlot,
    initial_route: str,
    locale: Locale,
    delegates: tuple[LocalizationsDelegate[Any], ...],
    title: str,
    overrides: DebugOverrides,
) -> ShellNode:
    """Assemble the layer tree in contract order.

    Flags are evaluated once per call; process-wide overrides are read at
    call time.

    Args:
        config: Shell configuration
        navigator: Slot exposed on the navigator node
        initial_route: Route the navigator starts with
        locale: Locale for the localizations layer
        delegates: Combined delegate list
        title: Resolved title
        overrides: Process-wide debug overrides

    Returns:
        Outermost (title) node
    """
    result = ShellNode(
        LayerKind.NAVIGATOR,
        MappingProxyType(
            {
                "initial_route": initial_route,
                "on_generate_route": config.on_generate_route,
                "on_unknown_route": config.on_unknown_route,
                "observers": config.navigator_observers,
                "slot": navigator,
            }
        ),
    )

    if config.text_style is not None:
        result = ShellNode.wrap(LayerKind.TEXT_STYLE, result, style=config.text_style)

    checkerboard = {
        "checkerboard_raster_cache_images": config.checkerboard_raster_cache_images,
        "checkerboard_offscreen_layers": config.checkerboard_offscreen_layers,
    }
    overlay: ShellNode | None = None
    if config.show_performance_overlay or overrides.show_performance_overlay:
        overlay = ShellNode(
            LayerKind.PERFORMANCE_OVERLAY,
            MappingProxyType({"all_enabled": True, "anchor": "top", **checkerboard}),
        )
    elif any(checkerboard.values()):
        overlay = ShellNode(
            LayerKind.PERFORMANCE_OVERLAY,
            MappingProxyType({"all_enabled": False, "anchor": "top", **checkerboard}),
        )
    if overlay is not None:
        result = ShellNode(LayerKind.STACK, MappingProxyType({}), (result, overlay))

    if config.show_semantics_debugger:
        result = ShellNode.wrap(LayerKind.SEMANTICS_DEBUGGER, result)

    if config.build_mode.is_debug:
        if config.show_widget_inspector or overrides.show_widget_inspector:
            result = ShellNode.wrap(
                LayerKind.WIDGET_INSPECTOR,
                result,
                select_button_builder=config.inspector_select_button_builder,
            )
        if config.show_non_production_banner and overrides.allow_banner:
            result = ShellNode.wrap(LayerKind.NON_PRODUCTION_BANNER, result)

    result = ShellNode.wrap(
        LayerKind.LOCALIZATIONS, result, locale=locale, delegates=delegates
    )
    return ShellNode.wrap(LayerKind.TITLE, result, title=title, color=config.color)

"""Runtime: lifecycle bridge, platform events, configuration and composition.

Python 3.13+.
"""

from .bridge import LifecycleBridge, schedule_soon
from .composition import (
    Composition,
    ShellDescription,
    ShellNode,
    TitleContext,
    build_shell_tree,
)
from .config import DebugOverrides, ShellConfig, debug_overrides
from .navigation import NavigatorSlot, Router
from .platform import PlatformDispatcher, PlatformMetrics, Subscription

__all__ = [
    "Composition",
    "DebugOverrides",
    "LifecycleBridge",
    "NavigatorSlot",
    "PlatformDispatcher",
    "PlatformMetrics",
    "Router",
    "ShellConfig",
    "ShellDescription",
    "ShellNode",
    "Subscription",
    "TitleContext",
    "build_shell_tree",
    "debug_overrides",
    "schedule_soon",
]

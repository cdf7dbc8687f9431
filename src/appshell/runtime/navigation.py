"""Navigation capability contract and the shell's reference to it.

The navigation stack itself lives outside the shell. The shell only needs
two operations from it, described by the Router protocol, and holds the
mounted instance in a NavigatorSlot: an explicit optional reference that the
composition fills in when it mounts the navigator and the shell clears at
unmount.

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from appshell.diagnostics import ErrorTemplate, NavigatorNotMountedError, ShellStateError

__all__ = ["NavigatorSlot", "Router"]

logger = logging.getLogger(__name__)


@runtime_checkable
class Router(Protocol):
    """Navigation stack operations consumed by the shell.

    Example:
        >>> class ListRouter:
        ...     def __init__(self) -> None:
        ...         self.stack = ["/"]
        ...     async def maybe_pop(self) -> bool:
        ...         if len(self.stack) > 1:
        ...             self.stack.pop()
        ...             return True
        ...         return False
        ...     def push_named(self, route_name: str) -> None:
        ...         self.stack.append(route_name)
    """

    async def maybe_pop(self) -> bool:
        """Pop the top route if the stack allows it.

        May suspend, e.g. while a transition is in flight.

        Returns:
            True if a route was popped, False if already at the root
        """
        ...

    def push_named(self, route_name: str) -> object:
        """Push the route named ``route_name``. Must not block on the transition."""
        ...


class NavigatorSlot:
    """Optional reference to the Router mounted for one shell.

    Set once by the composition via attach(), cleared by the shell via
    detach(). Access goes through require(), which fails loudly when no
    navigator is mounted.
    """

    __slots__ = ("_router",)

    def __init__(self) -> None:
        self._router: Router | None = None

    @property
    def router(self) -> Router | None:
        return self._router

    @property
    def is_mounted(self) -> bool:
        return self._router is not None

    def attach(self, router: Router) -> None:
        """Record the mounted Router. Re-attaching the same instance is a no-op.

        Raises:
            ShellStateError: If a different Router is already attached
        """
        if self._router is router:
            return
        if self._router is not None:
            raise ShellStateError(ErrorTemplate.navigator_already_attached())
        self._router = router
        logger.debug("Navigator attached: %r", router)

    def detach(self) -> None:
        """Forget the Router (idempotent)."""
        if self._router is not None:
            logger.debug("Navigator detached: %r", self._router)
        self._router = None

    def require(self, operation: str) -> Router:
        """Return the mounted Router.

        Args:
            operation: Description used in the error message

        Raises:
            NavigatorNotMountedError: If nothing is attached
        """
        if self._router is None:
            raise NavigatorNotMountedError(ErrorTemplate.navigator_not_mounted(operation))
        return self._router

    def __repr__(self) -> str:
        return f"NavigatorSlot(router={self._router!r})"

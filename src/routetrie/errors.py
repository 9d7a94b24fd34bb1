"""Exception hierarchy shared by patterns, the trie and the router."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from routetrie.route import Route


class RouteTrieError(Exception):
    """Base for all routetrie errors."""


class UnexpectedNullError(RouteTrieError, TypeError):
    """A required argument was None."""


class IllegalArgumentError(RouteTrieError, ValueError):
    """An argument failed a precondition."""


class RouterFrozenError(RouteTrieError, RuntimeError):
    """Registration attempted after the router was finalized."""


class RouteConflictError(RouteTrieError):
    """Two routes collide.

    Raised by ``Router.register`` for a duplicate name or a structurally
    identical pattern, and by ``Router.check_no_route_conflicts`` when two
    patterns can match the same concrete path. In the latter case ``path``
    holds the offending segments, with ``<any>`` standing in for positions
    where any value would do.
    """

    def __init__(
        self,
        route1: Route,
        route2: Route,
        description: str = "Route conflict",
        path: tuple[str, ...] | None = None,
    ) -> None:
        self.route1 = route1
        self.route2 = route2
        self.description = description
        self.path = path
        super().__init__(f"{description}: \n\t{route1}\n\t{route2}")


T = TypeVar("T")


def check_not_none(reference: T | None, name: str) -> T:
    if reference is None:
        msg = f"{name} must not be None"
        raise UnexpectedNullError(msg)
    return reference

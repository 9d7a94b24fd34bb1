"""Named route registry and path dispatcher.

Usage::

    router = Router()
    router.register(Route.of("user", "/user/:id"))
    router.add("users", "/user")
    router.finalize()  # raises RouteConflictError on ambiguous routes
    router.match("/user/10")  # Route(user,/user/:id)
    router.resolve("/user/10").params  # {"id": "10"}

Registration must happen on a single thread. Once built, ``match``,
``resolve`` and ``get_route`` never mutate state and may be called
concurrently.
"""

import logging
from collections.abc import Iterator

from routetrie.errors import RouteConflictError, RouterFrozenError, check_not_none
from routetrie.pattern import split_path
from routetrie.route import Route, RouteMatch
from routetrie.trie import RoutesTrie

logger = logging.getLogger(__name__)


class Router:
    __slots__ = ("_finalized", "_routes_by_name", "_trie")
    _trie: RoutesTrie
    _routes_by_name: dict[str, Route]
    _finalized: bool

    def __init__(self) -> None:
        self._trie = RoutesTrie()
        self._routes_by_name = {}
        self._finalized = False

    def register(self, route: Route) -> None:
        """Registers route under its name, error on a name or pattern collision."""
        check_not_none(route, "route")
        if self._finalized:
            msg = f"cannot register {route}, router is finalized"
            raise RouterFrozenError(msg)
        existing = self._routes_by_name.get(route.name)
        if existing is not None:
            raise RouteConflictError(route, existing)
        self._trie.register(route)
        self._routes_by_name[route.name] = route
        logger.debug("registered %s", route)

    def add(self, name: str, template: str) -> Route:
        """Builds a route from template and registers it."""
        route = Route.of(name, template)
        self.register(route)
        return route

    def get_route(self, name: str) -> Route | None:
        return self._routes_by_name.get(name)

    def match(self, path: str) -> Route | None:
        """Returns the route matching path, or None."""
        check_not_none(path, "path")
        return self._trie.match(split_path(path))

    def resolve(self, path: str) -> RouteMatch | None:
        """Returns the route matching path together with its wildcard bindings."""
        segments = split_path(check_not_none(path, "path"))
        route = self._trie.match(segments)
        if route is None:
            return None
        return RouteMatch(route=route, params=route.pattern.parse_path(segments))

    def check_no_route_conflicts(self) -> None:
        """Raises RouteConflictError if any concrete path matches two routes.

        Call once after all routes are registered; registration alone only
        rejects duplicate names and identical patterns.
        """
        ambiguous = self._trie.find_ambiguous_routes()
        if ambiguous is not None:
            raise RouteConflictError(
                ambiguous.route1,
                ambiguous.route2,
                f"Path /{'/'.join(ambiguous.path)} would match both routes.",
                path=ambiguous.path,
            )
        logger.info("no conflicts among %d routes", len(self._routes_by_name))

    def finalize(self) -> None:
        """Checks for route conflicts and freezes the router.

        Idempotent - safe to call multiple times.
        """
        if self._finalized:
            return
        self.check_no_route_conflicts()
        self._finalized = True

    @property
    def finalized(self) -> bool:
        return self._finalized

    @property
    def routes(self) -> tuple[Route, ...]:
        """Registered routes in registration order."""
        return tuple(self._routes_by_name.values())

    @property
    def trie(self) -> RoutesTrie:
        return self._trie

    def __len__(self) -> int:
        return len(self._routes_by_name)

    def __contains__(self, name: object) -> bool:
        return name in self._routes_by_name

    def __iter__(self) -> Iterator[Route]:
        return iter(self._routes_by_name.values())

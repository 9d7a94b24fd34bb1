"""Segment-based routes trie with static ambiguity detection.

One node per distinct sequence of matched keys. Literal segments are keyed
by their text; all wildcard segments at a position share a single branch
regardless of their binding name. Lookup prefers the literal branch and
falls back to the wildcard branch without backtracking, so two routes are
ambiguous only when a wildcard branch and a sibling literal branch can both
lead to a leaf for the same concrete path. ``find_ambiguous_routes`` proves
whether such a path exists.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import TypeAlias

from routetrie.errors import RouteConflictError, check_not_none
from routetrie.pattern import Literal
from routetrie.route import Route

ANY_SEGMENT = "<any>"  # stands in for a segment only wildcards constrain

Path: TypeAlias = tuple[str, ...]


@dataclass(frozen=True, slots=True)
class AmbiguousRoutes:
    """Two routes that both match ``path``."""

    path: Path
    route1: Route
    route2: Route


@dataclass(slots=True)
class RoutesTrie:
    """Trie node. Mutable while routes are registered, read-only afterwards."""

    literal_branches: dict[str, RoutesTrie] = field(default_factory=dict)
    wildcard_branch: RoutesTrie | None = field(default=None)
    leaf: Route | None = field(default=None)

    def register(self, route: Route) -> None:
        """Insert route, error if a route with the same shape is already registered."""
        check_not_none(route, "route")
        node = self
        for seg in route.pattern.segments:
            if isinstance(seg, Literal):
                node = node._ensure_literal_branch(seg.text)
            else:
                node = node._ensure_wildcard_branch()
        if node.leaf is not None:
            raise RouteConflictError(route, node.leaf)
        node.leaf = route

    def match(self, path: Sequence[str]) -> Route | None:
        """Traverses the trie to find the route for path segments.

        Each segment priority is: exact match > wildcard match.
        """
        check_not_none(path, "path")
        node = self
        for seg in path:
            child = node.literal_branches.get(seg)
            if child is not None:  # exact match
                node = child
                continue
            if node.wildcard_branch is not None:  # fallback to wildcard match
                node = node.wildcard_branch
                continue
            return None  # no match
        return node.leaf

    def find_ambiguous_routes(self) -> AmbiguousRoutes | None:
        """Return one path matched by two routes, or None if there is none."""
        return _walk_ambiguous_path(self, ())

    def routes(self) -> Iterator[Route]:
        """Yield every registered route, depth first, literals before wildcards."""
        if self.leaf is not None:
            yield self.leaf
        for child in self.literal_branches.values():
            yield from child.routes()
        if self.wildcard_branch is not None:
            yield from self.wildcard_branch.routes()

    def _ensure_literal_branch(self, literal: str) -> RoutesTrie:
        child = self.literal_branches.get(literal)
        if child is None:
            child = self.literal_branches[literal] = RoutesTrie()
        return child

    def _ensure_wildcard_branch(self) -> RoutesTrie:
        if self.wildcard_branch is None:
            self.wildcard_branch = RoutesTrie()
        return self.wildcard_branch


def _first_present(
    candidates: Iterable[AmbiguousRoutes | None],
) -> AmbiguousRoutes | None:
    return next((c for c in candidates if c is not None), None)


def _walk_ambiguous_path(node: RoutesTrie, path: Path) -> AmbiguousRoutes | None:
    return _first_present(_path_candidates(node, path))


def _path_candidates(
    node: RoutesTrie, path: Path
) -> Iterator[AmbiguousRoutes | None]:
    """Lazily check every subtree of node.

    Literal siblings cannot collide with each other (identical shapes are
    rejected on insertion), but every value reaching a literal child also
    reaches the wildcard child, so each literal child is paired with it.
    """
    for key, child in node.literal_branches.items():
        yield _walk_ambiguous_path(child, (*path, key))
    wildcard = node.wildcard_branch
    if wildcard is None:
        return
    for key, child in node.literal_branches.items():
        yield _walk_ambiguous_tries((*path, key), child, wildcard)
    yield _walk_ambiguous_path(wildcard, (*path, ANY_SEGMENT))


def _walk_ambiguous_tries(
    path: Path, trie1: RoutesTrie, trie2: RoutesTrie
) -> AmbiguousRoutes | None:
    return _first_present(_tries_candidates(path, trie1, trie2))


def _tries_candidates(
    path: Path, trie1: RoutesTrie, trie2: RoutesTrie
) -> Iterator[AmbiguousRoutes | None]:
    """Lazily compare two subtries reachable from the same concrete path."""
    if trie1.leaf is not None and trie2.leaf is not None:
        yield AmbiguousRoutes(path, trie1.leaf, trie2.leaf)
        return
    for key, child1 in trie1.literal_branches.items():
        child2 = trie2.literal_branches.get(key)
        if child2 is not None:
            yield _walk_ambiguous_tries((*path, key), child1, child2)
    wildcard1, wildcard2 = trie1.wildcard_branch, trie2.wildcard_branch
    if wildcard1 is not None and wildcard2 is not None:
        yield _walk_ambiguous_tries((*path, ANY_SEGMENT), wildcard1, wildcard2)
    # a wildcard subsumes every literal on the other side
    if wildcard1 is not None:
        for key, child2 in trie2.literal_branches.items():
            yield _walk_ambiguous_tries((*path, key), wildcard1, child2)
    if wildcard2 is not None:
        for key, child1 in trie1.literal_branches.items():
            yield _walk_ambiguous_tries((*path, key), child1, wildcard2)

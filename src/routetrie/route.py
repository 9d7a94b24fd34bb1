"""Route and RouteMatch frozen dataclasses."""

from __future__ import annotations

from dataclasses import dataclass

from routetrie.errors import check_not_none
from routetrie.pattern import PathPattern


@dataclass(frozen=True, slots=True)
class Route:
    """A named path pattern.

    The name is the external identifier used for reverse lookup and path
    generation; it is unique within a router.
    """

    name: str
    pattern: PathPattern

    def __post_init__(self) -> None:
        check_not_none(self.name, "name")
        check_not_none(self.pattern, "pattern")

    @classmethod
    def of(cls, name: str, template: str) -> Route:
        return cls(name, PathPattern(check_not_none(template, "template")))

    def __str__(self) -> str:
        return f"Route({self.name},{self.pattern})"


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route resolution."""

    route: Route
    params: dict[str, str]

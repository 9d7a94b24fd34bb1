from importlib.metadata import version

from .errors import (
    IllegalArgumentError,
    RouteConflictError,
    RouterFrozenError,
    RouteTrieError,
    UnexpectedNullError,
)
from .pattern import Literal, PathPattern, SegmentPattern, Wildcard, split_path
from .route import Route, RouteMatch
from .router import Router

__all__ = [
    "IllegalArgumentError",
    "Literal",
    "PathPattern",
    "Route",
    "RouteConflictError",
    "RouteMatch",
    "RouteTrieError",
    "Router",
    "RouterFrozenError",
    "SegmentPattern",
    "UnexpectedNullError",
    "Wildcard",
    "__version__",
    "split_path",
]

__version__ = version("routetrie")

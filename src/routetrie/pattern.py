"""Path templates: parsing, matching, binding extraction and generation.

A template is a ``/`` separated list of segments. Leading, trailing and
repeated slashes are ignored. A segment starting with ``:`` is a wildcard
binding the concrete segment to the name that follows; anything else is a
literal matched verbatim. The empty template denotes the root path.

    "/user/:id/list" -> (Literal("user"), Wildcard("id"), Literal("list"))
    ""               -> (Literal(""),)
"""

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import TypeAlias

from routetrie.errors import IllegalArgumentError, check_not_none

_SLASHES = re.compile(r"/+")


def split_path(path: str) -> list[str]:
    """Split a path into segments, ignoring leading, trailing and repeated slashes.

    The root path (``""``, ``"/"``, ``"///"``) is a single empty segment.
    """
    return _SLASHES.split(path.strip("/"))


@dataclass(frozen=True, slots=True)
class Literal:
    """Matches exactly one segment value."""

    text: str

    def matches(self, segment: str | None) -> bool:
        return segment == self.text

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class Wildcard:
    """Matches any segment, binding it to ``name``."""

    name: str

    def matches(self, segment: str | None) -> bool:
        return segment is not None

    def __str__(self) -> str:
        return ":" + self.name


SegmentPattern: TypeAlias = Literal | Wildcard


def _parse_segment(segment: str) -> SegmentPattern:
    if segment.startswith(":"):
        if len(segment) == 1:
            msg = "wildcard segment must be named, provided ':'"
            raise IllegalArgumentError(msg)
        return Wildcard(segment[1:])
    return Literal(segment)


class PathPattern:
    """An ordered, immutable sequence of segment patterns built from a template."""

    __slots__ = ("_segments",)
    _segments: tuple[SegmentPattern, ...]

    def __init__(self, template: str) -> None:
        check_not_none(template, "template")
        self._segments = tuple(_parse_segment(seg) for seg in split_path(template))

    @property
    def segments(self) -> tuple[SegmentPattern, ...]:
        return self._segments

    @property
    def wildcard_names(self) -> tuple[str, ...]:
        return tuple(seg.name for seg in self._segments if isinstance(seg, Wildcard))

    def matches(self, path: str) -> bool:
        return self.matches_path(split_path(path))

    def matches_path(self, path: Sequence[str]) -> bool:
        if len(path) != len(self._segments):
            return False
        return all(
            seg.matches(value) for seg, value in zip(self._segments, path, strict=True)
        )

    def matches_segment(self, segment: str, position: int) -> bool:
        if not 0 <= position < len(self._segments):
            msg = f"position {position} out of range for {self}"
            raise IllegalArgumentError(msg)
        return self._segments[position].matches(segment)

    def parse(self, path: str) -> dict[str, str]:
        """Return the wildcard bindings of ``path``; it must match this pattern."""
        return self.parse_path(split_path(path))

    def parse_path(self, path: Sequence[str]) -> dict[str, str]:
        if not self.matches_path(path):
            msg = f"path /{'/'.join(path)} does not match {self}"
            raise IllegalArgumentError(msg)
        return {
            seg.name: value
            for seg, value in zip(self._segments, path, strict=True)
            if isinstance(seg, Wildcard)
        }

    def generate(self, bindings: Mapping[str, str], leading_slash: bool = True) -> str:
        """Build a concrete path from ``bindings``.

        Every wildcard name must be bound; unused keys are ignored. Values
        are inserted verbatim, so a value that is empty or contains ``/``
        yields a path this pattern does not parse back.
        """
        path = "/".join(self.generate_path(bindings))
        return "/" + path if leading_slash else path

    def generate_path(self, bindings: Mapping[str, str]) -> list[str]:
        check_not_none(bindings, "bindings")
        path: list[str] = []
        for seg in self._segments:
            if isinstance(seg, Literal):
                path.append(seg.text)
            elif seg.name in bindings:
                path.append(bindings[seg.name])
            else:
                msg = f"Missing parameter '{seg.name}'"
                raise IllegalArgumentError(msg)
        return path

    def __len__(self) -> int:
        return len(self._segments)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathPattern):
            return NotImplemented
        return self._segments == other._segments

    def __hash__(self) -> int:
        return hash(self._segments)

    def __repr__(self) -> str:
        return f"PathPattern({str(self)!r})"

    def __str__(self) -> str:
        return "/" + "/".join(str(seg) for seg in self._segments)

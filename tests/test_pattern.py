import pytest

from routetrie import (
    IllegalArgumentError,
    Literal,
    PathPattern,
    UnexpectedNullError,
    Wildcard,
    split_path,
)


@pytest.mark.parametrize(
    "path, expected",
    [
        ("", [""]),
        ("/", [""]),
        ("///", [""]),
        ("/a/b", ["a", "b"]),
        ("a/b/", ["a", "b"]),
        ("///a//b//", ["a", "b"]),
    ],
)
def test_split_path(path: str, expected: list[str]) -> None:
    assert split_path(path) == expected


def test_segments() -> None:
    pattern = PathPattern("/user/:id/list")
    assert pattern.segments == (Literal("user"), Wildcard("id"), Literal("list"))
    assert pattern.wildcard_names == ("id",)
    assert len(pattern) == 3


def test_root_segments() -> None:
    assert PathPattern("").segments == (Literal(""),)
    assert PathPattern("//") == PathPattern("")


@pytest.mark.parametrize(
    "path",
    [
        "/some/literal/path",
        "some/literal/path",
        "some/literal/path/",
        "/some/literal/path/",
        "///some/literal/path//",
    ],
)
def test_literal_matches_regardless_of_slashes(path: str) -> None:
    assert PathPattern("/some/literal/path").matches(path)


def test_literal_does_not_match_different_path() -> None:
    assert not PathPattern("/some/literal/path").matches("/some/other/path")


def test_wildcard_matches_and_parses() -> None:
    pattern = PathPattern("/user/:id/list")
    assert pattern.matches("/user/10/list")
    assert pattern.parse("/user/10/list") == {"id": "10"}


def test_length_mismatch_never_matches() -> None:
    assert not PathPattern("/user/:id/list").matches("/user/10/list/test")
    assert not PathPattern("/user/list").matches("/user/list/test")
    assert not PathPattern("/a/:id").matches("/a/1/2")
    assert not PathPattern("/a/:id").matches("/a")


def test_root_pattern_matches_root_only() -> None:
    pattern = PathPattern("")
    assert pattern.matches("")
    assert pattern.matches("/")
    assert pattern.matches("///")
    assert not pattern.matches("/sample")


def test_null_template_not_allowed() -> None:
    with pytest.raises(UnexpectedNullError):
        PathPattern(None)  # type: ignore[arg-type]


def test_unnamed_wildcard_not_allowed() -> None:
    with pytest.raises(IllegalArgumentError):
        PathPattern("/user/:")


def test_matches_segment() -> None:
    pattern = PathPattern("/user/:id")
    assert pattern.matches_segment("user", 0)
    assert not pattern.matches_segment("users", 0)
    assert pattern.matches_segment("anything", 1)


@pytest.mark.parametrize("position", [2, -1])
def test_matches_segment_out_of_range(position: int) -> None:
    with pytest.raises(IllegalArgumentError):
        PathPattern("/user/:id").matches_segment("user", position)


def test_parse_non_matching_path() -> None:
    with pytest.raises(IllegalArgumentError):
        PathPattern("/user/:id").parse("/account/10")


def test_parse_ignores_literals() -> None:
    assert PathPattern("/a/b").parse("/a/b") == {}


def test_generate() -> None:
    pattern = PathPattern("/user/:id/:method")
    params = {"id": "10", "method": "list"}
    assert pattern.generate(params) == "/user/10/list"
    assert pattern.generate(params, leading_slash=False) == "user/10/list"


def test_generate_ignores_extra_bindings() -> None:
    assert PathPattern("/user/:id/").generate({"id": "10", "extra": "20"}) == "/user/10"


def test_generate_missing_binding() -> None:
    with pytest.raises(IllegalArgumentError, match="Missing parameter 'id'"):
        PathPattern("/user/:id/").generate({})


def test_generate_root() -> None:
    assert PathPattern("").generate({}) == "/"
    assert PathPattern("").generate({}, leading_slash=False) == ""


@pytest.mark.parametrize(
    "template, bindings",
    [
        ("/user/:id", {"id": "10"}),
        ("/:model/:id/edit", {"model": "invoice", "id": "7", "unused": "x"}),
        ("/a/:x/b/:y", {"x": "1", "y": "2"}),
    ],
)
def test_parse_generate_round_trip(template: str, bindings: dict[str, str]) -> None:
    pattern = PathPattern(template)
    expected = {k: bindings[k] for k in pattern.wildcard_names}
    assert pattern.parse(pattern.generate(bindings)) == expected


@pytest.mark.parametrize(
    "template, expected",
    [
        ("", "/"),
        ("/user/:id/list", "/user/:id/list"),
        ("//user///:id/", "/user/:id"),
    ],
)
def test_str(template: str, expected: str) -> None:
    assert str(PathPattern(template)) == expected


@pytest.mark.parametrize("value", ["", "a/b"])
def test_generate_inserts_values_verbatim(value: str) -> None:
    pattern = PathPattern("/user/:id")
    path = pattern.generate({"id": value})
    assert path == f"/user/{value}"
    with pytest.raises(IllegalArgumentError):
        pattern.parse(path)

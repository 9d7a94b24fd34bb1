"""Human readable rendering of a router's route table."""

from routetrie.router import Router
from routetrie.trie import RoutesTrie


def format_routes(router: Router, *, tree: bool = False) -> str:
    """Format registered routes as a human-readable string.

    By default produces a column-aligned flat route list, sorted by pattern:

        root          /
        user_list     /user
        user_detail   /user/:id
        user_rename   /user/:id/rename

    With `tree=True`, produces a visual tree of the routes trie instead.
    Wildcards sharing a branch are shown as `:*`; each route is listed
    under the node it terminates at:

        /
        ├── [root]
        └── user
            ├── [user_list]
            └── :*
                ├── [user_detail]
                └── rename
                    └── [user_rename]
    """
    if tree:
        return _format_tree(router.trie)
    return _format_route_list(router)


def _format_route_list(router: Router) -> str:
    rows = sorted(
        ((route.name, str(route.pattern)) for route in router),
        key=lambda r: (r[1], r[0]),
    )
    if not rows:
        return ""
    name_w = max(len(name) for name, _ in rows)
    return "\n".join(f"{name:<{name_w}}   {pattern}" for name, pattern in rows)


def _format_tree(root: RoutesTrie) -> str:
    lines: list[str] = ["/"]
    # the root pattern lives under the empty literal segment
    _render_tree(root, "", lines=lines, skip_root_segment=True)
    return "\n".join(lines)


def _render_tree(
    node: RoutesTrie, prefix: str, *, lines: list[str], skip_root_segment: bool = False
) -> None:
    items: list[tuple[str, RoutesTrie | None]] = []

    if skip_root_segment:
        empty_child = node.literal_branches.get("")
        if empty_child is not None and empty_child.leaf is not None:
            items.append((f"[{empty_child.leaf.name}]", None))

    if node.leaf is not None:
        items.append((f"[{node.leaf.name}]", None))

    for seg, child in sorted(node.literal_branches.items()):
        if skip_root_segment and seg == "":
            continue
        items.append((seg, child))

    if node.wildcard_branch is not None:
        items.append((":*", node.wildcard_branch))

    for i, (label, child) in enumerate(items):
        is_last = i == len(items) - 1
        connector = "└── " if is_last else "├── "
        lines.append(f"{prefix}{connector}{label}")
        if child is not None:
            extension = "    " if is_last else "│   "
            _render_tree(child, prefix + extension, lines=lines)

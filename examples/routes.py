# /// script
# requires-python = ">=3.12"
# dependencies = [
#     "routetrie @ file:///${PROJECT_ROOT}/../routetrie",
# ]
# ///
"""Route table demo.

Builds a router, checks it for ambiguous routes and dispatches a few paths.
"""

import logging
import sys

from routetrie import RouteConflictError, Router
from routetrie.format import format_routes


def build() -> Router:
    router = Router()
    router.add("home", "")
    router.add("user_list", "/user")
    router.add("user_detail", "/user/:id")
    router.add("user_rename", "/user/:id/rename")
    router.add("model_edit", "/:model/:id/edit")
    return router


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)

    router = build()
    print(format_routes(router, tree=True))
    router.finalize()

    for path in ("/", "/user/10", "/user/10/rename", "/invoice/7/edit", "/nope"):
        match = router.resolve(path)
        if match is None:
            print(f"{path} -> 404")
        else:
            print(f"{path} -> {match.route.name} {match.params}")

    detail = router.get_route("user_detail")
    assert detail is not None
    print(detail.pattern.generate({"id": "42"}))

    # /user/:id/edit would shadow /:model/:id/edit for /user/<id>/edit
    router = build()
    router.add("user_edit", "/user/:id/edit")
    try:
        router.finalize()
    except RouteConflictError as e:
        print(e, file=sys.stderr)


if __name__ == "__main__":
    main()

from routetrie import Route, Router


def make_router(**templates: str) -> Router:
    """Router with one route per keyword, registered in keyword order."""
    router = Router()
    for name, template in templates.items():
        router.register(Route.of(name, template))
    return router

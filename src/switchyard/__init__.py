"""Switchyard — many endpoints behind one serverless function.

Maps an incoming (method, path remainder) pair to a registered handler,
extracts named path segments, and answers 404 when nothing matches.

Basic usage::

    from switchyard import RequestContext, Response, Router

    router = Router()

    @router.get("/users/(userId)")
    async def get_user(request, params):
        return Response(body={"id": params["userId"]})

    async def main(request: RequestContext) -> Response:
        return await router.route(request)
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "DuplicateRouteError",
    "RequestContext",
    "Response",
    "Route",
    "RouteMatch",
    "Router",
    "RouterConfig",
    "RouterFrozenError",
    "SwitchyardError",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import switchyard`` fast while providing a clean top-level API.
    """
    if name == "Router":
        from switchyard.routing.router import Router

        return Router

    if name in ("Route", "RouteMatch"):
        from switchyard.routing import route as _route

        return getattr(_route, name)

    if name == "RouterConfig":
        from switchyard.config import RouterConfig

        return RouterConfig

    if name == "RequestContext":
        from switchyard.http.request import RequestContext

        return RequestContext

    if name == "Response":
        from switchyard.http.response import Response

        return Response

    if name in (
        "ConfigurationError",
        "DuplicateRouteError",
        "RouterFrozenError",
        "SwitchyardError",
    ):
        from switchyard import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)

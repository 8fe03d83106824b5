"""Ordered route table with first-match dispatch.

Routes are registered during setup and scanned in registration order per
request. The table is frozen on the first dispatch so it stays read-only
while requests are in flight.
"""

import logging
import threading
from collections.abc import Callable, Iterator
from typing import Any

import anyio

from switchyard._internal.invoke import invoke
from switchyard._internal.types import Handler
from switchyard.config import RouterConfig
from switchyard.errors import DuplicateRouteError, RouterFrozenError
from switchyard.http.request import RequestContext
from switchyard.http.response import not_found
from switchyard.routing.route import PathSegment, Route, RouteMatch

logger = logging.getLogger("switchyard.routing")


def parse_pattern(pattern: str, config: RouterConfig | None = None) -> tuple[PathSegment, ...]:
    """Parse a route pattern into segments.

    The leading empty segment produced by the initial ``/`` is dropped.
    Nothing is validated; degenerate patterns parse to whatever splitting
    yields.

    Examples::

        "/users"             -> (PathSegment("users"),)
        "/users/(id)"        -> (PathSegment("users"), PathSegment("(id)", True, "id"))
        "/"                  -> (PathSegment(""),)
        ""                   -> ()
    """
    config = config or RouterConfig()
    delimiters = {ord(config.param_open): None, ord(config.param_close): None}

    parts = pattern.split("/")[1:]
    segments: list[PathSegment] = []
    for part in parts:
        if part.startswith(config.param_open):
            segments.append(
                PathSegment(value=part, is_param=True, param_name=part.translate(delimiters))
            )
        else:
            segments.append(PathSegment(value=part))
    return tuple(segments)


class Router:
    """Maps (method, path remainder) to handlers.

    Usage::

        router = Router()
        router.add_route("GET", "/users/(userId)", get_user)

        async def main(request: RequestContext) -> Response:
            return await router.route(request)

    Handlers are called as ``handler(request, params)`` and may be sync or
    async. Whatever they return is passed back unmodified.

    Thread safety:
        Registration is single-threaded setup. The freeze transition uses a
        Lock + double-check so exactly one caller flips the flag even when
        the host fans out the first requests concurrently.
    """

    __slots__ = ("_freeze_lock", "_frozen", "_routes", "config")

    def __init__(self, config: RouterConfig | None = None) -> None:
        self.config: RouterConfig = config or RouterConfig()
        self._routes: dict[str, Route] = {}
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

    # -- Registration --

    def add_route(self, method: str, pattern: str, handler: Handler) -> None:
        """Register *handler* for *method* requests matching *pattern*.

        Args:
            method: HTTP method, compared exactly (``"GET"``, not ``"get"``).
            pattern: Path pattern starting with ``/``. Wrap a segment in the
                configured delimiters to capture it: ``/users/(userId)``.
            handler: ``(request, params) -> Response``, sync or async.

        Re-registering the same method and pattern replaces the earlier
        handler in place, unless ``config.strict`` is set.
        """
        self._check_not_frozen()

        route = Route(
            method=method,
            pattern=pattern,
            handler=handler,
            segments=parse_pattern(pattern, self.config),
        )
        if route.key in self._routes:
            if self.config.strict:
                raise DuplicateRouteError(method, pattern)
            logger.debug("Replacing handler for %s %s", method, pattern)

        self._routes[route.key] = route
        logger.debug(
            "Registered %s %s -> %s", method, pattern, getattr(handler, "__qualname__", handler)
        )

    def on(self, method: str, pattern: str) -> Callable[[Handler], Handler]:
        """Register a route handler via decorator::

            @router.on("GET", "/users/(userId)")
            async def get_user(request, params): ...
        """

        def decorator(func: Handler) -> Handler:
            self.add_route(method, pattern, func)
            return func

        return decorator

    def get(self, pattern: str) -> Callable[[Handler], Handler]:
        return self.on("GET", pattern)

    def post(self, pattern: str) -> Callable[[Handler], Handler]:
        return self.on("POST", pattern)

    def put(self, pattern: str) -> Callable[[Handler], Handler]:
        return self.on("PUT", pattern)

    def patch(self, pattern: str) -> Callable[[Handler], Handler]:
        return self.on("PATCH", pattern)

    def delete(self, pattern: str) -> Callable[[Handler], Handler]:
        return self.on("DELETE", pattern)

    # -- Lifecycle --

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Close registration. Idempotent and safe to race."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._frozen = True
            logger.debug("Router frozen with %d route(s)", len(self._routes))

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot add routes after the router has started dispatching. "
                "Register every route during setup, before the first request."
            )
            raise RouterFrozenError(msg)

    # -- Introspection --

    @property
    def routes(self) -> tuple[Route, ...]:
        """Registered routes in dispatch order."""
        return tuple(self._routes.values())

    def __len__(self) -> int:
        return len(self._routes)

    def __iter__(self) -> Iterator[Route]:
        return iter(self.routes)

    # -- Dispatch --

    def match(self, method: str, path: str | None) -> RouteMatch | None:
        """Return the first route accepting *method* and *path*, or ``None``.

        Routes are tried in registration order and the first hit wins.
        """
        for route in self._routes.values():
            if route.test(method, path):
                return RouteMatch(route=route, params=route.params_for(path))
        return None

    async def route(self, request: RequestContext) -> Any:
        """Dispatch *request* to the first matching handler.

        Returns the handler's response unmodified, or a not-found
        ``Response`` when nothing matches. Handler exceptions propagate.
        """
        if self.config.freeze_on_dispatch:
            self.freeze()

        match = self.match(request.method, request.path)
        if match is None:
            logger.debug("No route for %s %r", request.method, request.path)
            return not_found(self.config.not_found_status)

        logger.debug(
            "%s %r matched %s %s",
            request.method,
            request.path,
            match.route.method,
            match.route.pattern,
        )
        return await invoke(match.route.handler, request, match.params)

    def route_sync(self, request: RequestContext) -> Any:
        """Blocking form of :meth:`route` for hosts with a plain-function entry point.

        Runs the dispatch on a fresh event loop, so it must not be called
        from inside a running loop.
        """
        return anyio.run(self.route, request)

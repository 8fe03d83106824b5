"""Route and RouteMatch frozen dataclasses."""

from dataclasses import dataclass
from typing import Any

from switchyard._internal.types import Handler, Params


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route pattern.

    Literal:  ``/users``    (is_param=False)
    Param:    ``/(userId)`` (is_param=True, param_name="userId")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None


@dataclass(frozen=True, slots=True)
class Route:
    """A registered route: method, pattern, handler and the parsed pattern.

    Created by ``Router.add_route``; immutable thereafter.
    """

    method: str
    pattern: str
    handler: Handler
    segments: tuple[PathSegment, ...]

    @property
    def key(self) -> str:
        """Route table key. Registering the same key again replaces this route."""
        return self.method + self.pattern

    def test(self, method: str, path: str | None) -> bool:
        """Whether a request with *method* and path remainder *path* hits this route.

        Literal segments must equal the request segment at the same index,
        parameter segments accept anything, and the segment counts must be
        equal. An absent path routes like ``""``.
        """
        if method != self.method:
            return False

        parts = (path or "").split("/")
        if len(parts) != len(self.segments):
            return False

        for segment, part in zip(self.segments, parts, strict=True):
            if not segment.is_param and segment.value != part:
                return False
        return True

    def params_for(self, path: str | None) -> Params:
        """Bind each parameter segment's name to the request segment at its index."""
        parts = (path or "").split("/")
        params: Params = {}
        for index, segment in enumerate(self.segments):
            if segment.is_param and segment.param_name is not None:
                params[segment.param_name] = parts[index]
        return params

    def describe(self) -> dict[str, Any]:
        """Introspection row used by ``switchyard routes``."""
        return {
            "method": self.method,
            "pattern": self.pattern,
            "handler": getattr(self.handler, "__qualname__", repr(self.handler)),
            "params": [s.param_name for s in self.segments if s.is_param],
        }


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match."""

    route: Route
    params: Params

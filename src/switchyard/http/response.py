"""HTTP response envelope with chainable .with_*() transformation API.

Each transformation returns a new Response. The router never inspects or
rewrites what a handler returns; this type exists so handlers and the
not-found fallback share one shape.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

NOT_FOUND = 404


@dataclass(frozen=True, slots=True)
class Response:
    """A response envelope: ``{status, headers?, body?}``.

    ``headers`` and ``body`` stay ``None`` unless set, so a bare
    ``Response(status=204)`` carries neither.
    """

    status: int = 200
    headers: Mapping[str, str] | None = None
    body: Any = None

    # -- Chainable transformations --

    def with_status(self, status: int) -> Response:
        """Return a new Response with a different status code."""
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> Response:
        """Return a new Response with an additional header."""
        return replace(self, headers={**(self.headers or {}), name: value})

    def with_headers(self, headers: Mapping[str, str]) -> Response:
        """Return a new Response with additional headers."""
        return replace(self, headers={**(self.headers or {}), **headers})

    def with_body(self, body: Any) -> Response:
        """Return a new Response with a different body."""
        return replace(self, body=body)

    # -- Host envelope --

    def to_dict(self) -> dict[str, Any]:
        """The plain-mapping form most serverless hosts accept as a return value."""
        envelope: dict[str, Any] = {"status": self.status}
        if self.headers is not None:
            envelope["headers"] = dict(self.headers)
        envelope["body"] = self.body
        return envelope


def not_found(status: int = NOT_FOUND) -> Response:
    """The fixed fallback returned when no route matches: no headers, no body."""
    return Response(status=status, body=None)

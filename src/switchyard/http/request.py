"""Immutable request context.

The host owns the transport. By the time a request reaches the router the
host has already stripped the function's own route prefix and captured what
is left as the *path remainder*. A context carries that remainder plus the
method, and whatever else the host bound to the invocation.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True, slots=True)
class RequestContext:
    """The request as seen by the router and handed to handlers.

    ``path`` is the remainder past the function prefix, without a leading
    slash (``"users/42"``). ``None`` means the host bound nothing, which
    routes exactly like ``""``.
    """

    method: str
    path: str | None = None
    binding_data: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    invocation_id: str | None = None

    @classmethod
    def from_binding_data(
        cls,
        method: str,
        binding_data: Mapping[str, Any],
        *,
        path_key: str = "path",
        invocation_id: str | None = None,
    ) -> RequestContext:
        """Build a context from the host's binding data.

        Functions declared with a trailing ``{*path}`` wildcard receive the
        remainder under ``binding_data["path"]``; the key is absent when the
        function itself was requested::

            ctx = RequestContext.from_binding_data("GET", {"path": "users/42"})
            ctx.path  # "users/42"
        """
        path = binding_data.get(path_key)
        return cls(
            method=method,
            path=None if path is None else str(path),
            binding_data=MappingProxyType(dict(binding_data)),
            invocation_id=invocation_id,
        )

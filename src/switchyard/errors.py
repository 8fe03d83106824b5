"""Switchyard exception hierarchy.

Only setup-time misuse raises. A request that matches no route is answered
with a not-found ``Response``, never an exception, and handler failures
propagate to the host untouched.
"""


class SwitchyardError(Exception):
    """Base for all switchyard-specific errors."""


class ConfigurationError(SwitchyardError):
    """Raised when the router is configured or built incorrectly."""


class RouterFrozenError(ConfigurationError):
    """Raised when a route is registered after the router started serving."""


class DuplicateRouteError(ConfigurationError):
    """Raised in strict mode when a method + pattern pair is registered twice."""

    def __init__(self, method: str, pattern: str) -> None:
        self.method = method
        self.pattern = pattern
        super().__init__(f"Route {method} {pattern!r} is already registered.")

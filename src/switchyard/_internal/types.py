"""Shared type aliases used across switchyard modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Route handler — called as handler(request, params), sync or async
Handler: TypeAlias = Callable[..., Any]

# Path parameters extracted from a matched request
Params: TypeAlias = dict[str, str]

"""Locate the Router a function module builds at import time.

Function modules usually create one module-level router during cold start,
so ``switchyard routes myfunc`` finds it without naming the attribute.
"""

import importlib
from types import ModuleType

from switchyard.routing.router import Router


def _discover(module: ModuleType) -> Router:
    """The module's ``router`` attribute, else its only Router global."""
    if isinstance(getattr(module, "router", None), Router):
        return module.router

    found = {name: obj for name, obj in vars(module).items() if isinstance(obj, Router)}
    if len(found) == 1:
        return next(iter(found.values()))
    if not found:
        msg = f"module {module.__name__!r} defines no switchyard Router"
    else:
        msg = (
            f"module {module.__name__!r} defines several routers "
            f"({', '.join(sorted(found))}); pick one with {module.__name__}:NAME"
        )
    raise AttributeError(msg)


def resolve_router(import_string: str) -> Router:
    """Resolve ``"module"`` or ``"module:name"`` to a Router.

    ``name`` may also be a zero-argument factory. Its result has to be a
    router still in its build phase: one that has already dispatched is
    shared serving state, not a fresh table built for inspection.

    Raises:
        ModuleNotFoundError: the module cannot be imported.
        AttributeError: ``name`` is missing, or discovery finds zero or
            several routers.
        TypeError: the target is neither a Router nor a factory producing
            an unfrozen one.
    """
    module_path, _, attr_name = import_string.partition(":")
    module = importlib.import_module(module_path)
    if not attr_name:
        return _discover(module)

    target = getattr(module, attr_name)
    if isinstance(target, Router):
        return target
    if not callable(target):
        msg = f"{import_string!r} is a {type(target).__name__}, not a switchyard Router"
        raise TypeError(msg)

    try:
        built = target()
    except Exception as exc:
        msg = f"router factory {import_string!r} failed: {exc}"
        raise TypeError(msg) from exc

    if not isinstance(built, Router):
        msg = f"router factory {import_string!r} returned {type(built).__name__}"
        raise TypeError(msg)
    if built.frozen:
        msg = f"router factory {import_string!r} returned a router that is already dispatching"
        raise TypeError(msg)
    return built

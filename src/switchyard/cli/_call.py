"""``switchyard call`` — dispatch a single request from the shell.

Builds a ``RequestContext`` from the command line, runs it through the
router and prints the response envelope as JSON. Exits 1 when the router
found no route, whatever status a matched handler chose.
"""

import argparse
import json
import logging
import sys
from typing import Any

from switchyard.cli._resolve import resolve_router
from switchyard.http.request import RequestContext
from switchyard.http.response import Response

logger = logging.getLogger("switchyard.cli")


def _envelope(result: Any) -> dict[str, Any]:
    if isinstance(result, Response):
        return result.to_dict()
    if isinstance(result, dict):
        return result
    return {"body": result}


def run_call(args: argparse.Namespace) -> None:
    """Dispatch ``args.method args.path`` through the resolved router."""
    try:
        router = resolve_router(args.router)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc

    request = RequestContext(method=args.method, path=args.path)
    matched = router.match(request.method, request.path) is not None
    logger.debug("Dispatching %s %r (matched=%s)", request.method, request.path, matched)
    envelope = _envelope(router.route_sync(request))

    print(json.dumps(envelope, indent=2, default=str))
    if not matched:
        raise SystemExit(1)

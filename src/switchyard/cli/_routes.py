"""``switchyard routes`` — list registered routes.

Resolves an import string to a Router and prints every route with its
method, pattern, and handler, in the order requests are tried.
"""

import argparse
import sys

from switchyard.cli._resolve import resolve_router


def run_routes(args: argparse.Namespace) -> None:
    """List registered routes for a switchyard Router."""
    try:
        router = resolve_router(args.router)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc

    if not router.routes:
        print("No routes registered.")
        return

    rows = [
        (row["method"], row["pattern"], row["handler"])
        for row in (route.describe() for route in router.routes)
    ]

    max_method = max(max(len(r[0]) for r in rows), 6)  # "METHOD" header
    max_pattern = max(max(len(r[1]) for r in rows), 7)  # "PATTERN" header

    fmt = f"{{:<{max_method}}}  {{:<{max_pattern}}}  {{}}"
    print(fmt.format("METHOD", "PATTERN", "HANDLER"))
    sep_len = max_method + max_pattern + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for method, pattern, handler in rows:
        print(fmt.format(method, pattern, handler))

"""Switchyard CLI — inspect and exercise a route table from the shell.

Entry point registered as ``switchyard`` in ``pyproject.toml``::

    [project.scripts]
    switchyard = "switchyard.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``switchyard`` command."""
    parser = argparse.ArgumentParser(
        prog="switchyard",
        description="Switchyard — many endpoints behind one serverless function.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log registration and matching decisions to stderr",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- switchyard routes ------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument(
        "router",
        help="Import string (e.g. myfunc:router)",
    )

    # -- switchyard call --------------------------------------------------
    call_parser = subparsers.add_parser("call", help="Dispatch one request and print the response")
    call_parser.add_argument(
        "router",
        help="Import string (e.g. myfunc:router)",
    )
    call_parser.add_argument("method", help="HTTP method (e.g. GET)")
    call_parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Path remainder past the function prefix (e.g. users/42)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        from switchyard.cli._logging import configure_logging

        configure_logging()

    if args.command == "routes":
        from switchyard.cli._routes import run_routes

        run_routes(args)
    elif args.command == "call":
        from switchyard.cli._call import run_call

        run_call(args)

"""Logging setup for ``switchyard --verbose``.

The library itself never installs handlers; only the CLI does.
"""

import logging


def configure_logging(level: int = logging.DEBUG) -> None:
    """Send ``switchyard.*`` records to stderr."""
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger("switchyard").setLevel(level)

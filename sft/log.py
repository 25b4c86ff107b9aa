"""Logging setup for sft.

Diagnostics go through the standard logging module to stderr; user-facing
output stays on the rich console of each command.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(verbose: bool = False) -> None:
    """Route log records for the sft package through a rich handler.

    Args:
        verbose: Log INFO and above instead of WARNING and above.
    """
    logger = logging.getLogger("sft")
    logger.setLevel(logging.INFO if verbose else logging.WARNING)

    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(console=Console(stderr=True), show_path=False, show_time=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)

"""Logging setup for the pokedeck CLI.

Library modules only call ``logging.getLogger(__name__)``; the CLI decides
where records go. Records are rendered on stderr through Rich so they sit
alongside the console output without mixing into it.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(verbose: bool = False, console: Console | None = None) -> None:
    """Attach a RichHandler to the pokedeck logger, once.

    WARNING and above by default; DEBUG with ``verbose``.
    """
    logger = logging.getLogger("pokedeck")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if any(isinstance(h, RichHandler) for h in logger.handlers):
        return

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)

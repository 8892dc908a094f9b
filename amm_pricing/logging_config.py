"""structlog setup for applications embedding the pricing core.

Library modules only call ``structlog.get_logger()``; the consuming
application decides how (and whether) events are rendered.
"""

from __future__ import annotations

import logging

import structlog


def configure_logging(debug: bool = False) -> None:
    """Configure structlog with console rendering.

    Args:
        debug: Emit debug events (solver iterations, quote breakdowns).
            When False, only INFO and above are rendered.
    """
    level = logging.DEBUG if debug else logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=False,
    )

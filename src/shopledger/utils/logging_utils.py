"""Logging helpers for shopledger.

Modules create loggers with ``get_logger(__name__)``. Nothing is printed
until ``configure_logging`` installs a handler, which the CLI does once per
invocation.
"""

import logging
from typing import Optional

_HANDLER: Optional[logging.Handler] = None

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"


def configure_logging(level: int = logging.WARNING) -> None:
    """Attach a stderr handler to the ``shopledger`` logger and set its level.

    Calling this again only adjusts the level, so repeated CLI invocations in
    one process (as in tests) never stack duplicate handlers.
    """
    global _HANDLER

    package_logger = logging.getLogger("shopledger")
    if _HANDLER is None:
        _HANDLER = logging.StreamHandler()
        _HANDLER.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        package_logger.addHandler(_HANDLER)
    package_logger.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module logger under the ``shopledger`` namespace."""
    if name is None:
        return logging.getLogger("shopledger")
    return logging.getLogger(name)

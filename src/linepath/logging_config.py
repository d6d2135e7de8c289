"""
Logging setup for applications embedding LinePath.

The library itself only creates module loggers under the ``linepath``
namespace and never configures handlers on import.
"""

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s :: %(message)s"

_installed_handler: logging.Handler | None = None


def configure_logging(
    level: int = logging.WARNING, handler: logging.Handler | None = None
) -> logging.Logger:
    """
    Attach a handler to the ``linepath`` logger.

    Calling this again replaces the handler installed by the previous call
    instead of adding a second one. A handler passed in is installed as-is;
    only the default stream handler gets the LinePath format.

    Params:
        level: Minimum level to emit
        handler: Handler to install; defaults to a stderr StreamHandler

    Returns:
        The configured ``linepath`` logger
    """
    global _installed_handler

    logger = logging.getLogger("linepath")
    if _installed_handler is not None:
        logger.removeHandler(_installed_handler)

    if handler is None:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger.addHandler(handler)
    logger.setLevel(level)
    _installed_handler = handler
    return logger

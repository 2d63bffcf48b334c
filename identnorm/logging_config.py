"""Logging setup for identnorm.

Library modules obtain their loggers through :func:`get_logger`; nothing is
emitted until the host application calls :func:`setup_logging` or configures
the ``identnorm`` logger itself.
"""

import logging

from rich.logging import RichHandler

LOGGER_NAME = "identnorm"

_handler: logging.Handler | None = None

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``identnorm`` namespace.

    Args:
        name: Module name, usually ``__name__``.

    Returns:
        The named logger.
    """
    if name != LOGGER_NAME and not name.startswith(f"{LOGGER_NAME}."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def setup_logging(level: int | str = logging.WARNING, use_rich: bool = True) -> logging.Logger:
    """Attach a console handler to the package logger.

    Calling this again replaces the previously installed handler.

    Args:
        level: Log level for the package logger.
        use_rich: Render records with rich instead of a plain stream handler.

    Returns:
        The configured package logger.
    """
    global _handler

    logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        logger.removeHandler(_handler)

    if use_rich:
        _handler = RichHandler(show_path=False, rich_tracebacks=True)
        _handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        _handler = logging.StreamHandler()
        _handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )

    logger.addHandler(_handler)
    logger.setLevel(level)
    logger.debug("Logging configured (level=%s, rich=%s)", level, use_rich)
    return logger

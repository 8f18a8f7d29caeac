"""Centralised logging configuration for the ``actual_importer`` package.

Every module obtains its logger via ``get_logger(__name__)``. Entrypoints call
``configure_logging`` once at startup so that all package loggers share the
same handler, format, and level. Library modules never attach handlers.
"""

from __future__ import annotations

import logging
import sys

_PKG_LOGGER_NAME = "actual_importer"
_CONFIGURED = False

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-40s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: int | str = logging.INFO) -> None:
    """Attach one console handler to the package root logger.

    Args:
        level: Minimum severity to emit, as int or level name.

    Returns:
        None: Configures logging as side effect.

    Raises:
        ValueError: Raised when the level name is unknown.
    """

    global _CONFIGURED  # noqa: PLW0603
    if _CONFIGURED:
        return

    resolved_level = logging.getLevelName(level.strip().upper()) if isinstance(level, str) else level
    if not isinstance(resolved_level, int):
        raise ValueError(f"unsupported log level={level}")

    root = logging.getLogger(_PKG_LOGGER_NAME)
    for handler in list(root.handlers):
        if isinstance(handler, logging.NullHandler):
            root.removeHandler(handler)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(resolved_level)
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root.setLevel(resolved_level)
    root.addHandler(console)
    root.propagate = False

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger, keeping the package silent until configured.

    Args:
        name: Dotted module name, usually ``__name__``.

    Returns:
        logging.Logger: Logger under the ``actual_importer`` namespace.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    package_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not package_logger.handlers:
        package_logger.addHandler(logging.NullHandler())
    if name == _PKG_LOGGER_NAME or name.startswith(f"{_PKG_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_PKG_LOGGER_NAME}.{name}")

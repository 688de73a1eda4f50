"""Logger setup shared by the service, the Celery task and the CLI."""

import os
import sys
import logging
from typing import Optional

ROOT_LOGGER_NAME = "image-optimizer"

STRUCTURED_FORMAT = (
    "%(asctime)s | %(name)s | %(levelname)-8s | "
    "%(filename)s:%(lineno)d | %(funcName)s() | %(message)s"
)
SIMPLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_level(level: Optional[str]) -> int:
    name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    resolved = logging.getLevelName(name)
    # Unknown names come back as "Level <name>"
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logger(
    name: str = ROOT_LOGGER_NAME,
    level: Optional[str] = None,
    format_type: str = "structured",
) -> logging.Logger:
    """
    Configure ``name`` to write to stdout.

    The level comes from ``level`` or else ``LOG_LEVEL`` (INFO when unset or
    unknown) and is re-applied on every call. The format is ``LOG_FORMAT`` or
    else ``format_type``: "structured" adds source location, anything else
    selects the simple format. Only one handler is ever attached.
    """
    logger = logging.getLogger(name)
    logger.setLevel(_resolve_level(level))

    if not logger.handlers:
        format_name = os.getenv("LOG_FORMAT", format_type).lower()
        handler = logging.StreamHandler(sys.stdout)
        if format_name == "structured":
            handler.setFormatter(
                logging.Formatter(STRUCTURED_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
            )
        else:
            handler.setFormatter(logging.Formatter(SIMPLE_FORMAT))
        logger.addHandler(handler)

    logger.propagate = False
    return logger


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """
    Get a configured logger nested under the package logger.

    ``get_logger("task")`` returns ``image-optimizer.task``.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return setup_logger(name)

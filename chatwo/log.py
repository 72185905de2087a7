"""Logging setup built on loguru."""

import sys
from typing import Any, TextIO

from loguru import logger

from chatwo.interface import ILogger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DDTHH:mm:ss.SSSZ}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[component]: <10}</cyan> | "
    "{message}"
)

DEFAULT_COMPONENT = "chatwo"


def _tag_component(record: Any) -> bool:
    record["extra"].setdefault("component", DEFAULT_COMPONENT)
    return True


def get_logger(component: str) -> ILogger:
    """Return a logger view tagged with the component name."""
    return logger.bind(component=component)


def configure_logging(level: str = "INFO", *, sink: TextIO | Any = sys.stderr) -> int:
    """Replace loguru's default handler with a single console handler.

    Returns the handler id so callers can remove it again.
    """
    logger.remove()
    return logger.add(
        sink, level=level.upper(), format=LOG_FORMAT, filter=_tag_component
    )

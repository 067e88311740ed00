import logging
import os
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_LOGGING_CONFIGURED: bool = False


def _resolve_level(level: Optional[Union[str, int]]) -> int:
    if level is None:
        level = os.environ.get("LOG_LEVEL") or logging.INFO
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: Optional[Union[str, int]] = None) -> int:
    """
    Configures the root logger and its handlers; returns the applied level.

    Arguments:
        level (str | int, optional): Explicit level. Falls back to the
            LOG_LEVEL environment variable, then INFO.

    Returns:
        int: The numeric level applied to the root logger.
    """
    global _LOGGING_CONFIGURED
    resolved: int = _resolve_level(level)
    root_logger: logging.Logger = logging.getLogger()

    if not _LOGGING_CONFIGURED and not root_logger.handlers:
        logging.basicConfig(format=LOG_FORMAT, level=resolved)
    for handler in root_logger.handlers:
        handler.setLevel(resolved)
    root_logger.setLevel(resolved)
    _LOGGING_CONFIGURED = True
    return resolved


def get_logger(name: str) -> logging.Logger:
    logger: logging.Logger = logging.getLogger(name)
    if not _LOGGING_CONFIGURED:
        configure_logging()
    return logger

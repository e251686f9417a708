"""Logging setup.

Modules log through ``logging.getLogger(__name__)``; this only wires a
handler on the package logger so applications embedding the library
keep full control of the root logger.
"""

from __future__ import annotations

import logging
import re
import sys
from typing import Optional

from .config import ObservabilityConfig, get_config

PACKAGE_LOGGER = "here_geocoder"

_API_KEY_PATTERN = re.compile(r"(apiKey=)[^&\s'\"]*")


def redact_url(url: str) -> str:
    """Hide the API key in a request URL or in a message quoting one."""
    return _API_KEY_PATTERN.sub(r"\1***", url)


def configure_logging(config: Optional[ObservabilityConfig] = None) -> logging.Logger:
    """Attach a stderr handler to the package logger.

    Calling it again replaces the handler instead of stacking a new one.

    Args:
        config: Logging configuration, defaults to the global one.

    Returns:
        The package logger.
    """
    config = config or get_config().observability

    formatter = logging.Formatter(config.format, datefmt="%Y-%m-%d %H:%M:%S")
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(config.level.upper())
    logger.handlers.clear()
    logger.addHandler(handler)
    return logger

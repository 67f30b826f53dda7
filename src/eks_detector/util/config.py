# (c) Copyright IBM Corp. 2025

import logging
import math
from typing import Any, Optional, Union

from eks_detector.log import logger

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def parse_log_level(value: Any) -> Optional[int]:
    """
    Parses a log level name such as "debug" or "WARN".

    @param value: String with the level name (case-insensitive)
    @return: the logging level or None if the name is unknown
    """
    if not isinstance(value, str):
        logger.warning(f"Unknown log level specified: {value}")
        return None

    level = LOG_LEVELS.get(value.strip().lower())
    if level is None:
        logger.warning(f"Unknown log level specified: {value}")
    return level


def parse_timeout_ms(value: Union[str, int, float, None]) -> Optional[float]:
    """
    Converts a timeout in milliseconds into seconds for the requests package.

    @param value: milliseconds as a string or a number
    @return: seconds or None if the value is not a positive, finite number
    """
    if value is None:
        return None

    if isinstance(value, bool):
        logger.warning(f"Likely invalid timeout value: {value}.  Using default.")
        return None

    try:
        timeout = float(value) / 1000
    except (TypeError, ValueError, OverflowError):
        logger.warning(f"Likely invalid timeout value: {value}.  Using default.")
        return None

    if not timeout > 0 or not math.isfinite(timeout):
        logger.warning(f"Timeout must be a positive, finite number of milliseconds: {value}")
        return None
    return timeout

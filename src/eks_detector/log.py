# (c) Copyright IBM Corp. 2025

import logging

logger = None

LOG_FORMAT = "%(asctime)s: %(process)d %(levelname)s %(name)s: %(message)s"

KNOWN_LEVELS = [logging.DEBUG, logging.INFO, logging.WARN, logging.ERROR]


def get_standard_logger() -> logging.Logger:
    """
    Retrieves and configures a standard logger for the eks_detector package

    @return: Logger
    """
    standard_logger = logging.getLogger("eks_detector")

    # Importing twice (e.g. reloads in tests) must not stack handlers
    if not standard_logger.handlers:
        ch = logging.StreamHandler()
        f = logging.Formatter(LOG_FORMAT)
        ch.setFormatter(f)
        standard_logger.addHandler(ch)

    standard_logger.setLevel(logging.WARNING)
    return standard_logger


def update_log_level(level: int) -> None:
    """Uses <level> to update the package logger"""
    if level not in KNOWN_LEVELS:
        logger.warning("update_log_level: Unknown log level set: %s", level)
        return

    logger.setLevel(level)


logger = get_standard_logger()

"""
Loguru setup shared by the API and the Streamlit page.

Usage:
    from utils.logger import logger
"""

import sys

from loguru import logger

from utils.config import settings

LOG_FORMAT_CONSOLE = (
    "<white>{time:YYYY-MM-DD HH:mm:ss.SSS}</white> | "
    "<level>{level: <8}</level> | "
    "<light-black>{name}:{function}:{line}</light-black> - "
    "<level>{message}</level>"
)
LOG_FORMAT_FILE = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logging(level: str = settings.LOG_LEVEL, log_file: str = settings.LOG_FILE):
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT_CONSOLE, colorize=True)
    if log_file:
        logger.add(
            log_file,
            level=level.upper(),
            format=LOG_FORMAT_FILE,
            rotation="00:00",
            retention="30 days",
            compression="zip",
            encoding="utf-8",
        )
    return logger


setup_logging()

# intake_wizard/logger.py
import logging
import sys

from intake_wizard.config import get_settings


def setup_logger(name: str = "intake_wizard") -> logging.Logger:
    """
    Create the package logger with a single stdout handler.

    Calling it again returns the already configured logger.
    """
    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    level = getattr(logging, get_settings().log_level.upper(), logging.INFO)
    logger.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | [%(name)s] | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)

    logger.addHandler(handler)

    return logger


logger = setup_logger()

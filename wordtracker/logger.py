"""Logging setup for WordTracker.

Library modules only create module-level loggers; handlers are attached
here, by the command line entry point. Console output is colour-coded by
level and an optional timestamped log file keeps the full record of a run.
"""

import logging
import os
from datetime import datetime
from typing import Optional

from .config import LoggingConfig

LOGGER_NAME = "wordtracker"
LOG_FORMAT = "[%(levelname)s] [%(asctime)s] [%(module)s:%(funcName)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class ColorFormatter(logging.Formatter):
    """Log formatter that adds ANSI colour codes based on the record's level."""

    COLORS = {
        'DEBUG': '\033[94m',    # Blue
        'INFO': '\033[92m',     # Green
        'WARNING': '\033[93m',  # Yellow
        'ERROR': '\033[91m',    # Red
        'CRITICAL': '\033[95m', # Magenta
    }
    RESET = '\033[0m'

    def format(self, record):
        color = self.COLORS.get(record.levelname, self.RESET)
        message = super().format(record)
        return f"{color}{message}{self.RESET}"


def setup_logger(config: Optional[LoggingConfig] = None) -> logging.Logger:
    """Configure the package logger.

    Handlers from a previous call are replaced, so calling this more than
    once in a process does not duplicate output.

    Args:
        config: Logging options (defaults to INFO, console only, coloured)

    Returns:
        logging.Logger: The configured ``wordtracker`` logger
    """
    config = config or LoggingConfig()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config.level.upper())
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    formatter_cls = ColorFormatter if config.color else logging.Formatter
    console_handler.setFormatter(formatter_cls(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(console_handler)

    if config.log_dir is not None:
        os.makedirs(config.log_dir, exist_ok=True)
        timestamp = datetime.now().strftime("%Y-%m-%d_%H%M%S")
        log_path = os.path.join(config.log_dir, f"run_{timestamp}.log")
        file_handler = logging.FileHandler(log_path, mode='w', encoding='utf-8')
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(file_handler)

    return logger

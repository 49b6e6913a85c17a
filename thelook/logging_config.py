# thelook/logging_config.py

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .config import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(settings: Settings) -> logging.Logger:
    """Attach console (and, with LOG_FILE set, rotating file) output to the `thelook` logger."""
    logger = logging.getLogger("thelook")
    logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))

    # create_app may run more than once per process (tests)
    if logger.handlers:
        return logger

    handlers = [logging.StreamHandler(sys.stdout)]
    if settings.log_file:
        log_dir = Path(settings.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(RotatingFileHandler(
            log_dir / settings.log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        ))

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger

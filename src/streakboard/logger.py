# SPDX-License-Identifier: MIT

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
DEFAULT_LOG_LEVEL = "INFO"


def setup_logger(
    log_file: Path,
    level: str = DEFAULT_LOG_LEVEL,
    max_bytes: int = 1_000_000,
    backup_count: int = 3,
) -> logging.Logger:
    log_file.parent.mkdir(exist_ok=True, parents=True)
    logger = logging.getLogger("streakboard")

    for handler in list(logger.handlers):
        if isinstance(handler, RotatingFileHandler):
            logger.removeHandler(handler)
            handler.close()

    handler = RotatingFileHandler(
        log_file, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    level = str(level).upper()
    if level not in LOG_LEVELS:
        logger.setLevel(DEFAULT_LOG_LEVEL)
        logger.warning("unknown log level %r, using %s", level, DEFAULT_LOG_LEVEL)
    else:
        logger.setLevel(level)
    return logger

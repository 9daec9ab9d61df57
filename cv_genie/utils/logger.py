"""Logging configuration for the CV Genie service."""

import logging
import sys
import time
from contextlib import contextmanager
from typing import Iterator, Optional

from cv_genie.config import LOG_LEVEL


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Get a configured logger instance."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(level if level is not None else LOG_LEVEL)
    return logger


@contextmanager
def stage_timer(logger: logging.Logger, stage: str) -> Iterator[None]:
    """Log start, duration and failure of one pipeline stage."""
    started = time.perf_counter()
    logger.info("Stage started: %s", stage)
    try:
        yield
    except Exception as e:
        logger.error(
            "Stage failed: %s after %.2fs: %s", stage, time.perf_counter() - started, e
        )
        raise
    logger.info("Stage finished: %s in %.2fs", stage, time.perf_counter() - started)

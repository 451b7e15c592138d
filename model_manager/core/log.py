# model_manager/core/log.py
import os
import sys

from loguru import logger

from .config import Settings, get_settings


def configure_logging(settings: Settings | None = None) -> None:
    """
    Replace loguru's default sink with one at the configured level, plus an
    optional rotating file sink when LOG_FILE is set.
    """
    s = settings or get_settings()
    logger.remove()
    logger.add(sys.stderr, level=s.LOG_LEVEL.upper())
    if s.LOG_FILE:
        log_dir = os.path.dirname(os.path.abspath(s.LOG_FILE))
        os.makedirs(log_dir, exist_ok=True)
        logger.add(
            s.LOG_FILE,
            level=s.LOG_LEVEL.upper(),
            rotation=s.LOG_ROTATION,
            retention=s.LOG_RETENTION,
        )

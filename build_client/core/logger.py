import logging
from logging.handlers import RotatingFileHandler
import os

from .settings import settings

logger = logging.getLogger("build_client")
logger.setLevel(settings.LOG_LEVEL.upper())

if not logger.hasHandlers():
    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s", "%Y-%m-%d %H:%M:%S"
    )

    # File output only when a log file is configured
    if settings.LOG_FILE:
        log_dir = os.path.dirname(os.path.abspath(settings.LOG_FILE))
        os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(settings.LOG_FILE, maxBytes=10_000_000, backupCount=5)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    logger.addHandler(console)

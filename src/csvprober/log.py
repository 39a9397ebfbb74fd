import logging
import sys

from .cfg import settings


def get_logger(name: str = "csvprober") -> logging.Logger:
    """
    Konfiguracja loggera:
    - format:  YYYY-mm-dd HH:MM:SS | LEVEL | csvprober | message
    - poziom z settings.LOG_LEVEL (ENV lub .env, domyślnie INFO)
    - wyjście na STDERR (STDOUT należy do wyniku CLI)
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    level_name = settings.LOG_LEVEL.upper()
    level = getattr(logging, level_name, logging.INFO)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | csvprober | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))

    logger.setLevel(level)
    logger.addHandler(handler)
    logger.propagate = False
    return logger

log = get_logger()

import functools
import logging
import sys

LOGGER_NAME = "folder_backup"

LOG_FORMATTER = logging.Formatter("[%(asctime)s %(levelname)s] %(message)s")
LOG_FORMATTER.default_msec_format = "%s.%03d"


@functools.lru_cache
def get() -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(LOG_FORMATTER)
    handler.setLevel(logging.INFO)
    logger.addHandler(handler)
    return logger


def set_console_level(level: int) -> None:
    for handler in get().handlers:
        if type(handler) is logging.StreamHandler:
            handler.setLevel(level)

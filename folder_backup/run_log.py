import contextlib
import logging
import os
from typing import Generator

from . import logger
from .consts import RUN_LOG_KEEP_LINES, RUN_LOG_MAX_BYTES


def trim_run_log(
        path: str,
        max_bytes: int = RUN_LOG_MAX_BYTES,
        keep_lines: int = RUN_LOG_KEEP_LINES,
) -> bool:
    """
    Cut the run log down to its last ``keep_lines`` lines once it grows past
    ``max_bytes``. Returns True when the file was trimmed.
    """
    if not os.path.isfile(path) or os.path.getsize(path) <= max_bytes:
        return False

    with open(path, "r", encoding="utf-8", errors="replace") as f:
        lines = f.readlines()

    tmp = path + ".tmp"
    with open(tmp, "w", encoding="utf-8") as f:
        f.writelines(lines[-keep_lines:])
    os.replace(tmp, path)

    logger.get().debug(
        f"Trimmed run log '{path}' from {len(lines)} to "
        f"{min(len(lines), keep_lines)} lines"
    )
    return True


@contextlib.contextmanager
def open_run_log(path: str) -> Generator[logging.Logger, None, None]:
    """
    Route everything the backup logger emits, archiver output included, to
    the append-only run log at ``path`` for the duration of the block.
    """
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    trim_run_log(path)

    log = logger.get()
    handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    handler.setFormatter(logger.LOG_FORMATTER)
    handler.setLevel(logging.DEBUG)
    log.addHandler(handler)
    try:
        yield log
    finally:
        log.removeHandler(handler)
        handler.close()

import locale
import os

from . import logger
from .consts import BACKUP_FROM_MARKER, BACKUP_TO_MARKER, LIST_TEMPLATE
from .exceptions import (
    BackupListNotFound, EmptyFromList, EmptyToList, MissingFromSection,
    MissingToSection,
)
from .models.target import BackupList


def parse(raw_text: str) -> BackupList:
    lines = [
        line.strip()
        for line in raw_text.splitlines()
        if line.strip() and not line.strip().startswith("#")
    ]

    if BACKUP_FROM_MARKER not in lines:
        raise MissingFromSection()
    if BACKUP_TO_MARKER not in lines:
        raise MissingToSection()

    from_index = lines.index(BACKUP_FROM_MARKER)
    to_index = lines.index(BACKUP_TO_MARKER)

    sources = lines[from_index + 1:to_index]
    destinations = lines[to_index + 1:]

    if not sources:
        raise EmptyFromList()
    if not destinations:
        raise EmptyToList()

    return BackupList(sources=sources, destinations=destinations)


def load_backup_list(path: str) -> BackupList:
    if not os.path.isfile(path):
        raise BackupListNotFound(path)

    try:
        with open(path, "r", encoding="utf-8-sig") as f:
            raw_text = f.read()
    except UnicodeDecodeError:
        encoding = locale.getpreferredencoding(False)
        logger.get().debug(
            f"Backup list '{path}' is not UTF-8, reading it as {encoding}"
        )
        with open(path, "r", encoding=encoding, errors="replace") as f:
            raw_text = f.read()

    return parse(raw_text)


def write_template(path: str) -> None:
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(LIST_TEMPLATE)

import os
from enum import Enum
from typing import NamedTuple, Optional


class OperationType(str, Enum):
    SINGLE = "single"
    LIST = "list"
    INIT_LIST = "init-list"


class _ArchiveFormatItem(NamedTuple):
    extension: str
    compression_flag: Optional[str]


class ArchiveFormat(Enum):
    TAR = _ArchiveFormatItem(".tar", None)
    TAR_GZ = _ArchiveFormatItem(".tar.gz", "--gzip")
    TAR_BZ2 = _ArchiveFormatItem(".tar.bz2", "--bzip2")
    TAR_XZ = _ArchiveFormatItem(".tar.xz", "--xz")
    TAR_LZ = _ArchiveFormatItem(".tar.lz", "--lzma")

    @property
    def extension(self) -> str:
        return self.value.extension

    @property
    def compression_flag(self) -> Optional[str]:
        return self.value.compression_flag


DEFAULT_FORMAT = ArchiveFormat.TAR_GZ

BACKUP_FROM_MARKER = "[Backup From]"
BACKUP_TO_MARKER = "[Backup To]"

DATE_FORMAT = "%Y-%m-%d"

APP_DIR = os.path.join(os.path.expanduser("~"), ".folder_backup")
DEFAULT_LIST_PATH = os.path.join(APP_DIR, "BackupList.txt")
DEFAULT_LOG_PATH = os.path.join(APP_DIR, "backup.log")
DEFAULT_TAR_EXECUTABLE = "tar"
PARTIAL_SUFFIX = ".partial"

RUN_LOG_MAX_BYTES = 25 * 1024 * 1024
RUN_LOG_KEEP_LINES = 50000

LIST_TEMPLATE = f"""\
# Folders listed under {BACKUP_FROM_MARKER} are archived into every folder
# listed under {BACKUP_TO_MARKER}. Lines starting with '#' are ignored.
{BACKUP_FROM_MARKER}
{os.path.join(os.path.expanduser("~"), "Documents")}
{BACKUP_TO_MARKER}
{os.path.join(os.path.expanduser("~"), "Backups")}
"""

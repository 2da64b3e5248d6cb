import datetime
from typing import Optional

from ..consts import (
    ArchiveFormat, DATE_FORMAT, DEFAULT_FORMAT, DEFAULT_LOG_PATH,
    DEFAULT_TAR_EXECUTABLE,
)
from ..paths import resolve_format
from .args import Args
from .model import Model


class BackupConfig(Model):
    """
    Settings shared by every component of one run. ``today`` is stamped
    once, when the config is built.
    """

    def __init__(
            self,
            archive_format: ArchiveFormat = DEFAULT_FORMAT,
            update_in_place: bool = True,
            today: Optional[str] = None,
            tar_executable: str = DEFAULT_TAR_EXECUTABLE,
            run_log_path: str = DEFAULT_LOG_PATH,
            assume_yes: bool = False,
    ):
        self.archive_format = archive_format
        self.update_in_place = update_in_place
        self.today = today or datetime.date.today().strftime(DATE_FORMAT)
        self.tar_executable = tar_executable
        self.run_log_path = run_log_path
        self.assume_yes = assume_yes

        self.validate()

    def validate(self):
        if not isinstance(self.archive_format, ArchiveFormat):
            raise ValueError(
                f"Unrecognized archive format: '{self.archive_format}'"
            )
        if not self.tar_executable:
            raise ValueError("Archiver executable is required")

    @classmethod
    def from_args(cls, args: Args) -> "BackupConfig":
        return cls(
            archive_format=resolve_format(args.archive_format),
            update_in_place=not args.no_update,
            tar_executable=args.tar_executable,
            run_log_path=args.log_path,
            assume_yes=args.assume_yes,
        )

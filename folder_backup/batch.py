from typing import Callable, Optional

from . import logger
from .archiver import ArchiveInvoker
from .consts import ArchiveFormat
from .exceptions import BackupError, NeedsDestinationConfirmation
from .models.config import BackupConfig
from .models.target import BackupList, BackupTarget, BatchReport
from .paths import ensure_destination, resolve_output_name


class BatchRunner:
    """
    Archives backup targets one after another.

    A list with M sources and N destinations yields M x N archives: every
    source is written to every destination.
    """

    def __init__(
            self,
            config: BackupConfig,
            invoker: Optional[ArchiveInvoker] = None,
            confirm_destination: Optional[Callable[[str], bool]] = None,
    ):
        self.config = config
        self.invoker = invoker or ArchiveInvoker(config.tar_executable)
        self.confirm_destination = confirm_destination

    def run_target(self, target: BackupTarget, report: BatchReport) -> str:
        output_filename = resolve_output_name(
            target.source_path,
            target.destination_path,
            target.archive_format,
            target.update_in_place,
            self.config.today,
        )

        try:
            result = self.invoker.archive(
                target.source_path, output_filename,
                target.archive_format, target.update_in_place,
            )
        except NeedsDestinationConfirmation as e:
            ensure_destination(e.destination_dir, self.confirm_destination)
            result = self.invoker.archive(
                target.source_path, output_filename,
                target.archive_format, target.update_in_place,
            )

        if result.error:
            report.archiver_failures.append(
                (target.source_path, target.destination_path, result.error)
            )
        else:
            report.succeeded.append(output_filename)

        return output_filename

    def run_batch(
            self,
            backup_list: BackupList,
            archive_format: ArchiveFormat,
            update_in_place: bool,
    ) -> BatchReport:
        report = BatchReport()
        log = logger.get()

        for target in backup_list.targets(archive_format, update_in_place):
            try:
                self.run_target(target, report)
            except BackupError as e:
                log.error(
                    f"Skipping '{target.source_path}' -> "
                    f"'{target.destination_path}': {e}"
                )
                report.failed.append(
                    (target.source_path, target.destination_path, e)
                )

        log.info(
            f"Batch finished: {len(report.succeeded)} archived, "
            f"{len(report.failed)} failed, "
            f"{len(report.archiver_failures)} archiver error(s)"
        )
        log.debug(f"Batch report: {report.model_dump()}")
        return report

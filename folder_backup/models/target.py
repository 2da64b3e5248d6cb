from typing import List, NamedTuple, Tuple

from ..consts import ArchiveFormat
from ..exceptions import ArchiveProcessFailed, BackupError
from .model import Model


class BackupTarget(NamedTuple):
    source_path: str
    destination_path: str
    archive_format: ArchiveFormat
    update_in_place: bool


class BackupList(Model):
    def __init__(self, sources: List[str], destinations: List[str]):
        self.sources = sources
        self.destinations = destinations

    def targets(
            self, archive_format: ArchiveFormat, update_in_place: bool
    ) -> List[BackupTarget]:
        # every source goes to every destination, not a pairwise zip
        return [
            BackupTarget(source, destination, archive_format, update_in_place)
            for source in self.sources
            for destination in self.destinations
        ]


class BatchReport(Model):
    def __init__(self):
        self.succeeded: List[str] = []
        self.failed: List[Tuple[str, str, BackupError]] = []
        self.archiver_failures: List[
            Tuple[str, str, ArchiveProcessFailed]
        ] = []

    @property
    def success(self) -> bool:
        return not self.failed

    def model_dump(self) -> dict:
        return {
            "succeeded": list(self.succeeded),
            "failed": [(s, d, str(e)) for s, d, e in self.failed],
            "archiver_failures": [
                (s, d, str(e)) for s, d, e in self.archiver_failures
            ],
            "success": self.success,
        }

"""Tests for the batch runner."""

from pathlib import Path

import pytest

from folder_backup.backup_list import parse
from folder_backup.batch import BatchRunner
from folder_backup.consts import ArchiveFormat
from folder_backup.exceptions import (
    InvalidDestination, InvalidSource, NeedsDestinationConfirmation,
)
from folder_backup.models.config import BackupConfig
from folder_backup.models.target import BackupList, BackupTarget, BatchReport


def _directory_arg(command):
    return next(a for a in command if a.startswith("--directory="))[len("--directory="):]


def _file_arg(command):
    return next(a for a in command if a.startswith("--file="))[len("--file="):]


@pytest.fixture
def folders(tmp_path: Path):
    for name in ("A", "B", "X", "Y"):
        (tmp_path / name).mkdir()
    return tmp_path


class TestRunBatch:
    def test_cross_join(self, config: BackupConfig, fake_tar, folders: Path) -> None:
        backup_list = BackupList(
            sources=[str(folders / "A"), str(folders / "B")],
            destinations=[str(folders / "X"), str(folders / "Y")],
        )
        report = BatchRunner(config).run_batch(backup_list, ArchiveFormat.TAR_GZ, False)

        pairs = [
            (_directory_arg(c), str(Path(_file_arg(c)).parent))
            for c in fake_tar.calls
        ]
        assert pairs == [
            (str(folders / "A"), str(folders / "X")),
            (str(folders / "A"), str(folders / "Y")),
            (str(folders / "B"), str(folders / "X")),
            (str(folders / "B"), str(folders / "Y")),
        ]
        assert len(report.succeeded) == 4
        assert report.success

    def test_list_scenario_attempts_each_destination(self, config: BackupConfig, fake_tar) -> None:
        backup_list = parse("[Backup From]\nC:\\A\n[Backup To]\nD:\\B\nD:\\C")
        report = BatchRunner(config).run_batch(backup_list, ArchiveFormat.TAR_GZ, False)

        assert [(s, d) for s, d, _ in report.failed] == [
            ("C:\\A", "D:\\B"),
            ("C:\\A", "D:\\C"),
        ]
        assert all(isinstance(e, InvalidSource) for _, _, e in report.failed)
        assert not report.success

    def test_invalid_source_does_not_abort(self, config: BackupConfig, fake_tar, folders: Path) -> None:
        backup_list = BackupList(
            sources=[str(folders / "missing"), str(folders / "A")],
            destinations=[str(folders / "X")],
        )
        report = BatchRunner(config).run_batch(backup_list, ArchiveFormat.TAR, False)

        assert len(fake_tar.calls) == 1
        assert report.succeeded == [
            str(folders / "X" / f"A_{config.today}.tar")
        ]
        assert len(report.failed) == 1

    def test_declined_destination(self, config: BackupConfig, fake_tar, folders: Path) -> None:
        backup_list = BackupList(
            sources=[str(folders / "A")],
            destinations=[str(folders / "new"), str(folders / "X")],
        )
        runner = BatchRunner(config, confirm_destination=lambda _: False)
        report = runner.run_batch(backup_list, ArchiveFormat.TAR, False)

        source, destination, error = report.failed[0]
        assert destination == str(folders / "new")
        assert isinstance(error, NeedsDestinationConfirmation)
        assert not (folders / "new").exists()
        assert len(report.succeeded) == 1

    def test_destination_is_a_file(self, config: BackupConfig, fake_tar, folders: Path) -> None:
        (folders / "notadir").write_text("x")
        backup_list = BackupList(
            sources=[str(folders / "A")],
            destinations=[str(folders / "notadir"), str(folders / "X")],
        )
        runner = BatchRunner(config, confirm_destination=lambda _: True)
        report = runner.run_batch(backup_list, ArchiveFormat.TAR, False)

        source, destination, error = report.failed[0]
        assert destination == str(folders / "notadir")
        assert isinstance(error, InvalidDestination)
        assert report.succeeded == [str(folders / "X" / f"A_{config.today}.tar")]

    def test_confirmed_destination_is_created(self, config: BackupConfig, fake_tar, folders: Path) -> None:
        backup_list = BackupList(
            sources=[str(folders / "A")], destinations=[str(folders / "new")]
        )
        runner = BatchRunner(config, confirm_destination=lambda _: True)
        report = runner.run_batch(backup_list, ArchiveFormat.TAR, False)

        assert (folders / "new").is_dir()
        assert report.success
        assert len(fake_tar.calls) == 1

    def test_archiver_failure_is_reported_not_fatal(self, config: BackupConfig, fake_tar, folders: Path) -> None:
        fake_tar.returncode = 1
        backup_list = BackupList(
            sources=[str(folders / "A"), str(folders / "B")],
            destinations=[str(folders / "X")],
        )
        report = BatchRunner(config).run_batch(backup_list, ArchiveFormat.TAR, False)

        assert len(fake_tar.calls) == 2
        assert len(report.archiver_failures) == 2
        assert report.success


class TestRunTarget:
    def test_update_in_place_targets_same_file(self, config: BackupConfig, fake_tar, folders: Path) -> None:
        runner = BatchRunner(config)
        target = BackupTarget(str(folders / "A"), str(folders / "X"), ArchiveFormat.TAR, True)

        first = runner.run_target(target, BatchReport())
        second = runner.run_target(target, BatchReport())

        assert first == second
        assert "--create" in fake_tar.calls[0]
        assert "--update" in fake_tar.calls[1]


class TestBatchReport:
    def test_dump_stringifies_errors(self) -> None:
        report = BatchReport()
        report.failed.append(("/a", "/b", InvalidSource("/a")))

        dumped = report.model_dump()
        assert dumped["success"] is False
        assert dumped["failed"] == [("/a", "/b", str(InvalidSource("/a")))]

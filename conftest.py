import subprocess
from pathlib import Path
from typing import List

import pytest

from folder_backup.consts import ArchiveFormat
from folder_backup.models.config import BackupConfig

TODAY = "2026-01-31"


class FakeTar:
    """Stands in for the archiver process and records every command."""

    def __init__(self):
        self.calls: List[List[str]] = []
        self.returncode = 0
        self.output = b"./\n./notes.txt\n"

    def __call__(self, command, **kwargs):
        self.calls.append(command)
        if self.returncode == 0:
            output = next(a for a in command if a.startswith("--file="))
            Path(output[len("--file="):]).touch()
        return subprocess.CompletedProcess(
            command, self.returncode, stdout=self.output
        )


@pytest.fixture
def config(tmp_path: Path) -> BackupConfig:
    return BackupConfig(
        archive_format=ArchiveFormat.TAR_GZ,
        update_in_place=False,
        today=TODAY,
        run_log_path=str(tmp_path / "logs" / "backup.log"),
        assume_yes=True,
    )


@pytest.fixture
def fake_tar(monkeypatch) -> FakeTar:
    tar = FakeTar()
    monkeypatch.setattr("folder_backup.archiver.subprocess.run", tar)
    return tar


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    folder = tmp_path / "my documents"
    folder.mkdir()
    (folder / "notes.txt").write_text("hello")
    return folder

import os
import subprocess
from typing import List, Optional

from . import logger
from .consts import ArchiveFormat, DEFAULT_TAR_EXECUTABLE, PARTIAL_SUFFIX
from .exceptions import (
    ArchiveProcessFailed, BackupError, NeedsDestinationConfirmation,
)


class ArchiveResult:
    def __init__(self, command: List[str], returncode: int, log_lines: List[str]):
        self.command = command
        self.returncode = returncode
        self.log_lines = log_lines

    @property
    def error(self) -> Optional[ArchiveProcessFailed]:
        if self.returncode == 0:
            return None
        return ArchiveProcessFailed(self.command, self.returncode)


class ArchiveInvoker:
    def __init__(self, tar_executable: str = DEFAULT_TAR_EXECUTABLE):
        self.tar_executable = tar_executable

    def build_command(
            self,
            source_path: str,
            output_filename: str,
            archive_format: ArchiveFormat,
            update_in_place: bool,
    ) -> List[str]:
        # --update only appends members newer than the archived copies
        command = [
            self.tar_executable,
            "--update" if update_in_place else "--create",
            "--verbose",
        ]
        if archive_format.compression_flag:
            command.append(archive_format.compression_flag)
        command.extend([
            f"--file={output_filename}",
            f"--directory={source_path}",
            ".",
        ])

        return command

    def archive(
            self,
            source_path: str,
            output_filename: str,
            archive_format: ArchiveFormat,
            update_in_place: bool,
    ) -> ArchiveResult:
        destination_dir = os.path.dirname(output_filename) or "."
        if not os.path.isdir(destination_dir):
            raise NeedsDestinationConfirmation(destination_dir)

        exists = os.path.exists(output_filename)
        compressed = archive_format.compression_flag is not None
        # tar cannot update compressed archives, those are rebuilt instead
        rebuild = update_in_place and exists and compressed
        write_to = output_filename + PARTIAL_SUFFIX if rebuild else output_filename

        command = self.build_command(
            source_path, write_to, archive_format,
            update_in_place and exists and not compressed,
        )
        log = logger.get()
        log.info(f"Archiving '{source_path}' -> '{output_filename}'")
        log.debug(f"Running: {' '.join(command)}")

        try:
            result = subprocess.run(
                command,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
            )
        except FileNotFoundError:
            raise BackupError(
                f"Archiver '{self.tar_executable}' was not found"
            )
        except OSError as e:
            raise BackupError(
                f"Archiver '{self.tar_executable}' could not be started: {e}"
            )

        log_lines = result.stdout.decode(errors="replace").splitlines()
        for line in log_lines:
            log.debug(line)

        archive_result = ArchiveResult(command, result.returncode, log_lines)
        if archive_result.error:
            log.warning(f"{archive_result.error}, continuing")
            if rebuild and os.path.exists(write_to):
                os.remove(write_to)
        elif rebuild:
            try:
                os.replace(write_to, output_filename)
            except OSError as e:
                raise BackupError(
                    f"Could not replace '{output_filename}': {e}"
                )
            log.debug(f"Rebuilt compressed archive '{output_filename}'")

        return archive_result

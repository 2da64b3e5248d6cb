class BackupError(ValueError):
    pass


class InvalidSource(BackupError):
    def __init__(self, source_path: str):
        super().__init__(
            f"Source folder '{source_path}' does not exist or is not a folder"
        )
        self.source_path = source_path


class NeedsDestinationConfirmation(BackupError):
    def __init__(self, destination_dir: str):
        super().__init__(
            f"Destination folder '{destination_dir}' does not exist"
        )
        self.destination_dir = destination_dir


class ArchiveProcessFailed(BackupError):
    def __init__(self, command: list, returncode: int):
        super().__init__(
            f"Command '{' '.join(command)}' exited with code {returncode}"
        )
        self.command = command
        self.returncode = returncode


class BackupListError(BackupError):
    pass


class BackupListNotFound(BackupListError):
    def __init__(self, path: str):
        super().__init__(f"Backup list '{path}' does not exist")
        self.path = path


class MissingFromSection(BackupListError):
    def __init__(self):
        super().__init__("Backup list has no '[Backup From]' section")


class MissingToSection(BackupListError):
    def __init__(self):
        super().__init__("Backup list has no '[Backup To]' section")


class EmptyFromList(BackupListError):
    def __init__(self):
        super().__init__("Backup list has no folders to back up")


class EmptyToList(BackupListError):
    def __init__(self):
        super().__init__("Backup list has no destination folders")


class InvalidDestination(BackupError):
    def __init__(self, destination_dir: str, reason: str):
        super().__init__(
            f"Destination folder '{destination_dir}' is unusable: {reason}"
        )
        self.destination_dir = destination_dir

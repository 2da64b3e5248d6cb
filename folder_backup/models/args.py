from typing import Optional

from ..consts import OperationType
from .model import Model


class Args(Model):
    def __init__(
            self,
            operation: OperationType,
            input_path: Optional[str],
            output_path: Optional[str],
            archive_format: Optional[str],
            list_path: str,
            no_update: bool,
            assume_yes: bool,
            tar_executable: str,
            log_path: str,
            verbose: bool = False,
    ):
        self.operation = operation
        self.input_path = input_path
        self.output_path = output_path
        self.archive_format = archive_format
        self.list_path = list_path
        self.no_update = no_update
        self.assume_yes = assume_yes
        self.tar_executable = tar_executable
        self.log_path = log_path
        self.verbose = verbose

        self.validate()

    def validate(self):
        if self.operation not in OperationType.__members__.values():
            raise ValueError(f"Unrecognized operation: '{self.operation}'")

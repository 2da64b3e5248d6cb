import os
from abc import ABC, abstractmethod
from typing import Dict, Optional, Type

from .archiver import ArchiveInvoker
from .backup_list import load_backup_list, write_template
from .batch import BatchRunner
from .consts import OperationType
from .models.args import Args
from .models.config import BackupConfig
from .models.target import BackupTarget, BatchReport


class Operation(ABC):
    def __init__(self, args: Args, config: Optional[BackupConfig] = None):
        self.args = args
        self.config = config or BackupConfig.from_args(args)
        self.validate()

    @abstractmethod
    def execute(self) -> int:
        pass

    def validate(self):
        pass

    def _confirm_destination(self, destination_dir: str) -> bool:
        if self.config.assume_yes:
            return True

        answer = input(
            f"Destination folder '{destination_dir}' does not exist. "
            f"Create it? [Y/n]: "
        )
        return answer.lower() == "y" or answer.strip() == ""

    def _create_runner(self) -> BatchRunner:
        return BatchRunner(
            self.config,
            invoker=ArchiveInvoker(self.config.tar_executable),
            confirm_destination=self._confirm_destination,
        )

    def _print_report(self, report: BatchReport) -> int:
        print("================================================")
        print(f"Archives written: {len(report.succeeded)}")
        for output_filename in report.succeeded:
            print(f" - {output_filename}")

        if report.archiver_failures:
            print("The archiver reported errors for:")
            for source, destination, error in report.archiver_failures:
                print(f" - {source} -> {destination}: {error}")
            print(f"See '{self.config.run_log_path}' for the archiver output.")

        if report.failed:
            print("The following backups were skipped:")
            for source, destination, error in report.failed:
                print(f" - {source} -> {destination}: {error}")
        print("================================================")

        return 0 if report.success else 2


class OperationsFactory:
    ops: Dict[OperationType, Type[Operation]] = {}

    @classmethod
    def register_operation(
            cls, operation_type: OperationType, operation_cls: Type[Operation]
    ) -> None:
        cls.ops[operation_type] = operation_cls

    @classmethod
    def create_operation(
            cls, args: Args, config: Optional[BackupConfig] = None
    ) -> Operation:
        if not (operation := cls.ops.get(args.operation, None)):
            raise ValueError(f"Unrecognized operation: '{args.operation}'")

        return operation(args=args, config=config)


class SingleBackup(Operation):
    def validate(self) -> None:
        if not self.args.input_path:
            raise ValueError("Input path is required")

        if not self.args.output_path:
            raise ValueError("Output path is required")

    def execute(self) -> int:
        target = BackupTarget(
            source_path=os.path.abspath(self.args.input_path),
            destination_path=os.path.abspath(self.args.output_path),
            archive_format=self.config.archive_format,
            update_in_place=self.config.update_in_place,
        )
        report = BatchReport()
        self._create_runner().run_target(target, report)

        return self._print_report(report)


class ListBackup(Operation):
    def execute(self) -> int:
        backup_list = load_backup_list(self.args.list_path)
        print(
            f"Backing up {len(backup_list.sources)} folder(s) into "
            f"{len(backup_list.destinations)} destination(s)"
        )

        report = self._create_runner().run_batch(
            backup_list,
            self.config.archive_format,
            self.config.update_in_place,
        )

        return self._print_report(report)


class InitList(Operation):
    def execute(self) -> int:
        if os.path.exists(self.args.list_path):
            raise ValueError(
                f"Backup list '{self.args.list_path}' already exists"
            )

        write_template(self.args.list_path)
        print(f"Backup list template written to '{self.args.list_path}'")

        return 0


OperationsFactory.register_operation(OperationType.SINGLE, SingleBackup)
OperationsFactory.register_operation(OperationType.LIST, ListBackup)
OperationsFactory.register_operation(OperationType.INIT_LIST, InitList)

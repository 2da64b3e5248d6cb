import argparse
import logging
import sys

from . import logger
from .consts import (
    DEFAULT_LIST_PATH, DEFAULT_LOG_PATH, DEFAULT_TAR_EXECUTABLE, OperationType,
)
from .models.args import Args
from .models.config import BackupConfig
from .operations import OperationsFactory
from .run_log import open_run_log


def parse_args(argv=None) -> Args:
    arg_parser = argparse.ArgumentParser(
        description="Compress folders into dated tar archives"
    )
    arg_parser.add_argument(
        "--input", "-i", dest="input_path",
        help="Folder to back up",
        default=None
    )
    arg_parser.add_argument(
        "--output", "-o", dest="output_path",
        help="Folder to write the archive to",
        default=None
    )
    arg_parser.add_argument(
        "--format", "-f", dest="archive_format",
        help=(
            "Archive format, matched by suffix: .tar, .tar.gz, .tar.bz2, "
            ".tar.xz or .tar.lz (default is .tar.gz)"
        ),
        default=None
    )
    arg_parser.add_argument(
        "--use-list", "-l", action="store_true",
        help="Back up every folder of the backup list into every destination"
    )
    arg_parser.add_argument(
        "--list-path",
        help=f"Path to the backup list (default is {DEFAULT_LIST_PATH})",
        default=DEFAULT_LIST_PATH
    )
    arg_parser.add_argument(
        "--init-list", action="store_true",
        help="Write a template backup list to --list-path and exit"
    )
    arg_parser.add_argument(
        "--no-update", "-n", action="store_true",
        help="Always write a new archive instead of updating today's one"
    )
    arg_parser.add_argument(
        "--yes", "-y", dest="assume_yes", action="store_true",
        help="Create missing destination folders without asking"
    )
    arg_parser.add_argument(
        "--tar-executable",
        help="Archiver to invoke (default is tar)",
        default=DEFAULT_TAR_EXECUTABLE
    )
    arg_parser.add_argument(
        "--log-path",
        help=f"Path to the run log (default is {DEFAULT_LOG_PATH})",
        default=DEFAULT_LOG_PATH
    )
    arg_parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Print the archiver output"
    )
    args = arg_parser.parse_args(argv)

    if args.init_list:
        operation = OperationType.INIT_LIST
    elif args.use_list:
        operation = OperationType.LIST
    else:
        operation = OperationType.SINGLE

    return Args(
        operation=operation,
        input_path=args.input_path,
        output_path=args.output_path,
        archive_format=args.archive_format,
        list_path=args.list_path,
        no_update=args.no_update,
        assume_yes=args.assume_yes,
        tar_executable=args.tar_executable,
        log_path=args.log_path,
        verbose=args.verbose,
    )


def main(argv=None):
    try:
        args = parse_args(argv)
        if args.verbose:
            logger.set_console_level(logging.DEBUG)

        config = BackupConfig.from_args(args)
        with open_run_log(config.run_log_path):
            op = OperationsFactory.create_operation(args, config)
            exit_code = op.execute()
    except Exception as e:
        print(f"Error: {e}")
        sys.exit(1)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()

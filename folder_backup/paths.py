import os
from typing import Callable, Optional

from wcmatch import fnmatch

from . import logger
from .consts import ArchiveFormat, DEFAULT_FORMAT
from .exceptions import (
    InvalidDestination, InvalidSource, NeedsDestinationConfirmation,
)


def _format_patterns(archive_format: ArchiveFormat):
    # "backup.tar.gz" and a bare "tar.gz" both select gzip
    return [f"*{archive_format.extension}", archive_format.extension[1:]]


def resolve_format(format_string: Optional[str]) -> ArchiveFormat:
    if not format_string:
        return DEFAULT_FORMAT

    by_length = sorted(
        ArchiveFormat, key=lambda f: len(f.extension), reverse=True
    )
    for archive_format in by_length:
        if fnmatch.fnmatch(
                format_string.strip(), _format_patterns(archive_format),
                flags=fnmatch.IGNORECASE | fnmatch.DOTMATCH
        ):
            return archive_format

    logger.get().debug(
        f"Unrecognized format '{format_string}', "
        f"using {DEFAULT_FORMAT.extension}"
    )
    return DEFAULT_FORMAT


def archive_base_name(source_path: str) -> str:
    return os.path.basename(os.path.normpath(source_path)).replace(" ", "_")


def resolve_output_name(
        source_path: str,
        destination_dir: str,
        archive_format: ArchiveFormat,
        update_in_place: bool,
        today: str,
) -> str:
    """
    Derive the archive path for ``source_path`` inside ``destination_dir``.

    Without ``update_in_place`` the first free name among ``base_date.ext``,
    ``base_date (1).ext``, ``base_date (2).ext``... is returned. The probe is
    not atomic: a concurrent writer can take the name before it is used.
    """
    if not os.path.isdir(source_path):
        raise InvalidSource(source_path)

    stem = f"{archive_base_name(source_path)}_{today}"
    extension = archive_format.extension
    candidate = os.path.join(destination_dir, stem + extension)
    if update_in_place:
        return candidate

    suffix = 0
    while os.path.exists(candidate):
        suffix += 1
        candidate = os.path.join(
            destination_dir, f"{stem} ({suffix}){extension}"
        )

    return candidate


def ensure_destination(
        destination_dir: str,
        confirm: Optional[Callable[[str], bool]] = None,
) -> None:
    if os.path.isdir(destination_dir):
        return
    if os.path.exists(destination_dir):
        raise InvalidDestination(destination_dir, "not a folder")

    if confirm is None or not confirm(destination_dir):
        raise NeedsDestinationConfirmation(destination_dir)

    try:
        os.makedirs(destination_dir, exist_ok=True)
    except OSError as e:
        raise InvalidDestination(destination_dir, e.strerror or str(e))
    logger.get().info(f"Created destination folder '{destination_dir}'")

"""Upward search for the version marker file."""

import logging
import os
from pathlib import Path

from .exceptions import SearchDirectoryError, SemVerMissingError

MARKER_FILE_NAME = ".semver"

logger = logging.getLogger(__name__)


def is_root(directory: Path) -> bool:
    """Return True if ``directory`` is a filesystem root (``/`` or ``C:\\``)."""
    return directory.parent == directory


def find_marker(
    start_dir: str | os.PathLike[str], file_name: str = MARKER_FILE_NAME
) -> Path:
    """Find the nearest marker file at or above ``start_dir``.

    The walk has no depth limit; it ends at the first existing marker or at
    the filesystem root.

    Args:
        start_dir: Directory to start searching from.
        file_name: Name of the marker file.

    Returns:
        Absolute path of the marker file.

    Raises:
        SearchDirectoryError: If ``start_dir`` is not an existing directory.
        SemVerMissingError: If no marker exists up to the filesystem root.
    """
    if not Path(start_dir).is_dir():
        raise SearchDirectoryError(start_dir)

    directory = Path(os.path.abspath(start_dir))
    while True:
        candidate = directory / file_name
        logger.debug("Looking for version marker at %s", candidate)
        if candidate.exists():
            return candidate
        if is_root(directory):
            raise SemVerMissingError(start_dir)
        directory = directory.parent

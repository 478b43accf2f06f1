"""xsemver - semantic versions stored in a .semver marker file.

Parse and render versions with tag format templates, compare them, and keep a
single authoritative version for a directory tree in a ``.semver`` file found
by searching upward from a directory.
"""

from ._locator import MARKER_FILE_NAME
from ._template import TAG_FORMAT
from ._version import __version__
from .exceptions import (
    ConfigError,
    InvalidVersionError,
    InvalidVersionFileError,
    SearchDirectoryError,
    SemVerError,
    SemVerMissingError,
)
from .semver import SemVer, locate, locate_file

__all__ = [
    "MARKER_FILE_NAME",
    "TAG_FORMAT",
    "ConfigError",
    "InvalidVersionError",
    "InvalidVersionFileError",
    "SearchDirectoryError",
    "SemVer",
    "SemVerError",
    "SemVerMissingError",
    "__version__",
    "locate",
    "locate_file",
]

"""Exceptions raised by xsemver."""

import os
from pathlib import Path
from typing import Any, Self


class SemVerError(Exception):
    """Base exception for all xsemver errors."""


class InvalidVersionError(SemVerError, ValueError):
    """Raised when a version component fails validation.

    Attributes:
        field: Name of the offending component.
        value: The rejected value.
    """

    def __init__(self: Self, field: str, value: Any) -> None:
        """Initialize the error.

        Args:
            field: Name of the offending component.
            value: The rejected value.
        """
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field}: {value!r}")


class SearchDirectoryError(SemVerError, NotADirectoryError):
    """Raised when a marker search starts from something that is not a directory."""

    def __init__(self: Self, start_dir: str | os.PathLike[str]) -> None:
        """Initialize the error.

        Args:
            start_dir: The directory the search was asked to start from.
        """
        self.start_dir = Path(start_dir)
        super().__init__(f"{start_dir} is not a directory")


class SemVerMissingError(SemVerError, FileNotFoundError):
    """Raised when no marker file exists between a directory and the root."""

    def __init__(self: Self, start_dir: str | os.PathLike[str]) -> None:
        """Initialize the error.

        Args:
            start_dir: The directory the search started from.
        """
        self.start_dir = Path(start_dir)
        super().__init__(f"{start_dir} is not semantic versioned")


class InvalidVersionFileError(SemVerError, ValueError):
    """Raised when a version record is missing fields or cannot be read.

    Attributes:
        path: Path of the offending record.
        reason: Optional detail about what was wrong.
    """

    def __init__(
        self: Self, path: str | os.PathLike[str], reason: str | None = None
    ) -> None:
        """Initialize the error.

        Args:
            path: Path of the offending record.
            reason: Optional detail about what was wrong.
        """
        self.path = Path(path)
        self.reason = reason
        msg = f"Invalid semver file: {path}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)


class ConfigError(SemVerError):
    """Raised when xsemver configuration cannot be loaded."""

"""The semantic version value type."""

import functools
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Self

from ._locator import MARKER_FILE_NAME, find_marker
from ._record import VersionRecord, parse_record, read_record, write_record
from ._template import SPECIAL_PATTERN, TAG_FORMAT, Placeholder, compile_template
from .exceptions import InvalidVersionError, InvalidVersionFileError

_SPECIAL_RE = re.compile(SPECIAL_PATTERN)
_NUMERIC_FIELDS = frozenset({"major", "minor", "patch"})


def _validate_component(name: str, value: Any) -> None:
    if name in _NUMERIC_FIELDS:
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise InvalidVersionError(name, value)
    elif name == "special":
        if not isinstance(value, str):
            raise InvalidVersionError(name, value)
        if value and _SPECIAL_RE.fullmatch(value) is None:
            raise InvalidVersionError(name, value)


@functools.total_ordering
@dataclass(eq=False)
class SemVer:
    """Semantic version with an optional special (prerelease) suffix.

    Components are validated whenever they are set, including in ``__init__``.

    Attributes:
        major: Major version number.
        minor: Minor version number.
        patch: Patch version number.
        special: Prerelease suffix, or an empty string for a release.
    """

    major: int = 0
    minor: int = 0
    patch: int = 0
    special: str = ""
    _file: Path | None = field(default=None, init=False, repr=False, compare=False)

    FILE_NAME = MARKER_FILE_NAME
    TAG_FORMAT = TAG_FORMAT

    __hash__ = None  # type: ignore[assignment]

    def __setattr__(self: Self, name: str, value: Any) -> None:
        """Validate version components before assigning them."""
        _validate_component(name, value)
        super().__setattr__(name, value)

    @property
    def prerelease(self: Self) -> str:
        """Alias of ``special``."""
        return self.special

    @prerelease.setter
    def prerelease(self: Self, value: str) -> None:
        self.special = value

    @property
    def is_prerelease(self: Self) -> bool:
        """True if the version carries a special suffix."""
        return bool(self.special)

    @property
    def file(self: Self) -> Path | None:
        """Record this version was last loaded from or saved to."""
        return self._file

    @classmethod
    def parse(
        cls,
        version_string: str,
        fmt: str | None = None,
        allow_missing: bool = True,
    ) -> Self | None:
        """Parse a version out of a string written with a template.

        Args:
            version_string: String to search for a version.
            fmt: Template describing the string. Defaults to ``TAG_FORMAT``.
            allow_missing: If False, a template lacking any of ``%M``, ``%m``
                or ``%p`` never produces a version. If True, missing numbers
                default to 0.

        Returns:
            The parsed version, or None if the string does not match.

        Raises:
            InvalidVersionError: If the matched parts fail validation.

        Example:
            >>> SemVer.parse("release-2.1", "release-%M.%m")
            SemVer(2, 1, 0, '')
        """
        template = compile_template(TAG_FORMAT if fmt is None else fmt)
        groups = template.match(version_string)
        if groups is None:
            return None

        numbers = {
            name: int(groups[name]) if groups.get(name) is not None else None
            for name in ("major", "minor", "patch")
        }
        if not allow_missing and any(n is None for n in numbers.values()):
            return None

        return cls(
            major=numbers["major"] or 0,
            minor=numbers["minor"] or 0,
            patch=numbers["patch"] or 0,
            special=groups.get("special") or "",
        )

    def format(self: Self, fmt: str) -> str:
        """Render this version through a template.

        Args:
            fmt: Template using ``%M``, ``%m``, ``%p`` and ``%s``.

        Returns:
            The rendered string. ``%s`` renders as ``-special``, or as nothing
            when there is no special.
        """
        return compile_template(fmt).render(
            {
                Placeholder.MAJOR: str(self.major),
                Placeholder.MINOR: str(self.minor),
                Placeholder.PATCH: str(self.patch),
                Placeholder.SPECIAL: f"-{self.special}" if self.special else "",
            }
        )

    def compare(self: Self, other: "SemVer") -> int:
        """Compare with another version.

        Numbers compare numerically. On equal numbers a release sorts above
        any version with a special, and two specials compare as strings.

        Returns:
            -1, 0 or 1 as this version is lower than, equal to or higher than
            ``other``.

        Raises:
            TypeError: If ``other`` is not a SemVer.
        """
        if not isinstance(other, SemVer):
            raise TypeError(f"Cannot compare SemVer with {type(other).__name__}")

        ours = (self.major, self.minor, self.patch)
        theirs = (other.major, other.minor, other.patch)
        if ours != theirs:
            return -1 if ours < theirs else 1

        if self.is_prerelease != other.is_prerelease:
            return -1 if self.is_prerelease else 1

        if self.special == other.special:
            return 0
        return -1 if self.special < other.special else 1

    def __eq__(self: Self, other: object) -> bool:
        if not isinstance(other, SemVer):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self: Self, other: object) -> bool:
        if not isinstance(other, SemVer):
            return NotImplemented
        return self.compare(other) < 0

    def load(self: Self, file: str | os.PathLike[str]) -> Self:
        """Replace this version with the contents of a record.

        Args:
            file: Path of the YAML record.

        Returns:
            This instance.

        Raises:
            InvalidVersionFileError: If a field is missing or invalid.
        """
        path = Path(file)
        record = parse_record(path, read_record(path))
        try:
            loaded = type(self)(**record.model_dump())
        except InvalidVersionError as e:
            raise InvalidVersionFileError(path, str(e)) from e

        self.major = loaded.major
        self.minor = loaded.minor
        self.patch = loaded.patch
        self.special = loaded.special
        self._file = path
        return self

    def save(self: Self, file: str | os.PathLike[str] | None = None) -> None:
        """Write this version to a record.

        Args:
            file: Destination. Defaults to the record last loaded or saved.

        Raises:
            ValueError: If no destination is given or remembered.
        """
        if file is None:
            if self._file is None:
                raise ValueError("No version file given and none was loaded")
            file = self._file

        path = Path(file)
        write_record(
            path,
            VersionRecord(
                major=self.major,
                minor=self.minor,
                patch=self.patch,
                special=self.special,
            ),
        )
        self._file = path

    @classmethod
    def find_file(cls, start_dir: str | os.PathLike[str] | None = None) -> Path:
        """Locate the marker file at or above ``start_dir`` (default: cwd)."""
        directory = Path.cwd() if start_dir is None else start_dir
        return find_marker(directory, cls.FILE_NAME)

    @classmethod
    def find(cls, start_dir: str | os.PathLike[str] | None = None) -> Self:
        """Locate the marker file at or above ``start_dir`` and load it."""
        return cls().load(cls.find_file(start_dir))

    def __str__(self: Self) -> str:
        """Return the version rendered with ``TAG_FORMAT``."""
        return self.format(self.TAG_FORMAT)

    def __repr__(self: Self) -> str:
        """Return detailed string representation."""
        return f"SemVer({self.major}, {self.minor}, {self.patch}, {self.special!r})"


def locate_file(start_dir: str | os.PathLike[str] | None = None) -> Path:
    """Return the path of the nearest ``.semver`` at or above ``start_dir``.

    Args:
        start_dir: Directory to start from. Defaults to the working directory.
    """
    return SemVer.find_file(start_dir)


def locate(start_dir: str | os.PathLike[str] | None = None) -> SemVer:
    """Load the version from the nearest ``.semver`` at or above ``start_dir``.

    Args:
        start_dir: Directory to start from. Defaults to the working directory.
    """
    return SemVer.find(start_dir)

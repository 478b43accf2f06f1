"""Tests loading and saving .semver records."""

from collections.abc import Callable
from pathlib import Path

import pytest
import yaml

from xsemver import InvalidVersionFileError, SemVer
from xsemver._record import read_record


def test_save_then_load(tmp_path: Path) -> None:
    """Test a saved version loads back unchanged."""
    path = tmp_path / ".semver"
    SemVer(1, 4, 2, "beta1").save(path)

    loaded = SemVer().load(path)

    assert loaded == SemVer(1, 4, 2, "beta1")
    assert loaded.file == path


def test_saved_record_layout(tmp_path: Path) -> None:
    """Test the record is a plain YAML mapping in field order."""
    path = tmp_path / ".semver"
    SemVer(1, 4, 2).save(path)

    assert path.read_text() == "major: 1\nminor: 4\npatch: 2\nspecial: ''\n"
    assert yaml.safe_load(path.read_text()) == {
        "major": 1,
        "minor": 4,
        "patch": 2,
        "special": "",
    }


def test_load_returns_self(tmp_path: Path, write_semver: Callable[..., Path]) -> None:
    """Test load populates and returns the same instance."""
    path = write_semver(tmp_path)
    version = SemVer()
    assert version.load(path) is version
    assert version == SemVer(1, 4, 2)


def test_load_zero_components(
    tmp_path: Path, write_semver: Callable[..., Path]
) -> None:
    """Test explicit zeros are present values, not missing ones."""
    path = write_semver(tmp_path, 0, 0, 0)
    assert SemVer(9, 9, 9).load(path) == SemVer(0, 0, 0)


def test_load_ruby_symbol_keys(tmp_path: Path) -> None:
    """Test records written by the Ruby semver gem are readable."""
    path = tmp_path / ".semver"
    path.write_text("---\n:major: 1\n:minor: 2\n:patch: 3\n:special: ''\n")

    assert SemVer().load(path) == SemVer(1, 2, 3)


def test_load_missing_field(tmp_path: Path) -> None:
    """Test a record missing a field names the file."""
    path = tmp_path / ".semver"
    path.write_text("major: 1\nminor: 2\nspecial: ''\n")

    with pytest.raises(InvalidVersionFileError) as exc_info:
        SemVer().load(path)

    assert exc_info.value.path == path
    assert str(path) in str(exc_info.value)
    assert "patch" in str(exc_info.value)


@pytest.mark.parametrize(
    "content",
    [
        "",
        "major: 1\nminor: 2\npatch: 3\nspecial:\n",
        "major: '1'\nminor: 2\npatch: 3\nspecial: ''\n",
        "major: -1\nminor: 2\npatch: 3\nspecial: ''\n",
        "major: 1\nminor: 2\npatch: 3\nspecial: 1abc\n",
        "- 1\n- 2\n",
        "major: [1\n",
    ],
    ids=[
        "empty",
        "null-special",
        "quoted-number",
        "negative",
        "bad-special",
        "not-a-mapping",
        "bad-yaml",
    ],
)
def test_load_invalid_record(tmp_path: Path, content: str) -> None:
    """Test invalid records raise InvalidVersionFileError."""
    path = tmp_path / ".semver"
    path.write_text(content)

    with pytest.raises(InvalidVersionFileError, match="Invalid semver file"):
        SemVer().load(path)


def test_failed_load_leaves_version_unchanged(tmp_path: Path) -> None:
    """Test a failed load does not partially update the instance."""
    path = tmp_path / ".semver"
    path.write_text("major: 5\nminor: 6\npatch: -1\nspecial: ''\n")
    version = SemVer(1, 2, 3)

    with pytest.raises(InvalidVersionFileError):
        version.load(path)

    assert version == SemVer(1, 2, 3)
    assert version.file is None


def test_load_missing_file(tmp_path: Path) -> None:
    """Test a missing record raises the OS error unchanged."""
    with pytest.raises(FileNotFoundError):
        SemVer().load(tmp_path / ".semver")


def test_save_to_loaded_path(tmp_path: Path, write_semver: Callable[..., Path]) -> None:
    """Test save() without a path writes back to the loaded record."""
    path = write_semver(tmp_path)
    version = SemVer().load(path)
    version.special = "rc1"
    version.save()

    assert SemVer().load(path) == SemVer(1, 4, 2, "rc1")


def test_save_overrides_path(tmp_path: Path, write_semver: Callable[..., Path]) -> None:
    """Test an explicit path is written and remembered."""
    original = write_semver(tmp_path)
    other = tmp_path / "other.semver"
    version = SemVer().load(original)
    version.patch = 3

    version.save(other)
    version.save()

    assert version.file == other
    assert SemVer().load(other) == SemVer(1, 4, 3)
    assert SemVer().load(original) == SemVer(1, 4, 2)


def test_save_overwrites(tmp_path: Path) -> None:
    """Test saving replaces existing content."""
    path = tmp_path / ".semver"
    path.write_text("major: 1\nminor: 2\npatch: 3\nspecial: ''\nextra: junk\n")

    SemVer(2, 0, 0).save(path)

    assert "extra" not in path.read_text()


def test_save_without_path(tmp_path: Path) -> None:
    """Test save() needs a path when nothing was loaded."""
    with pytest.raises(ValueError, match="No version file"):
        SemVer().save()


def test_read_record_empty(tmp_path: Path) -> None:
    """Test an empty document reads as an empty mapping."""
    path = tmp_path / ".semver"
    path.write_text("")
    assert read_record(path) == {}

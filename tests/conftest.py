"""Shared fixtures."""

from pathlib import Path

import pytest


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    """Create ``a/b/c`` under tmp_path and return the ``a`` directory."""
    root = tmp_path / "a"
    (root / "b" / "c").mkdir(parents=True)
    return root


@pytest.fixture
def write_semver():
    """Return a helper that writes a ``.semver`` record into a directory."""

    def _write(
        directory: Path,
        major: int = 1,
        minor: int = 4,
        patch: int = 2,
        special: str = "",
    ) -> Path:
        path = directory / ".semver"
        path.write_text(
            f"major: {major}\nminor: {minor}\npatch: {patch}\nspecial: '{special}'\n"
        )
        return path

    return _write

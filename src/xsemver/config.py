"""Configuration loaded from xsemver.toml or pyproject.toml."""

import tomllib
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from ._template import TAG_FORMAT, Placeholder, tokenize
from .exceptions import ConfigError

CONFIG_FILE_NAME = "xsemver.toml"
PYPROJECT_FILE_NAME = "pyproject.toml"


class Settings(BaseModel):
    """User settings for the xsemver command-line tool.

    Attributes:
        tag_format: Template used to show and parse versions.
        log_level: Logging level used when ``--verbose`` is not given.
    """

    model_config = ConfigDict(extra="forbid")

    tag_format: str = TAG_FORMAT
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    @field_validator("tag_format")
    @classmethod
    def check_tag_format(cls, value: str) -> str:
        """Reject templates without any placeholder."""
        if not any(isinstance(t, Placeholder) for t in tokenize(value)):
            raise ValueError("tag_format must contain %M, %m, %p or %s")
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Any) -> Any:
        """Accept level names in any case."""
        return value.upper() if isinstance(value, str) else value


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {path}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e


def _settings_table(path: Path, data: dict[str, Any]) -> dict[str, Any] | None:
    if path.name == PYPROJECT_FILE_NAME:
        return data.get("tool", {}).get("xsemver")
    return data.get("xsemver")


def find_config_file(project_dir: Path) -> Path | None:
    """Find the config file for a project directory.

    ``xsemver.toml`` takes precedence over a ``pyproject.toml`` with a
    ``[tool.xsemver]`` table.

    Args:
        project_dir: Directory to look in.

    Returns:
        Path to the config file, or None if there is none.
    """
    config_file = project_dir / CONFIG_FILE_NAME
    if config_file.exists():
        return config_file

    pyproject = project_dir / PYPROJECT_FILE_NAME
    if pyproject.exists() and _settings_table(pyproject, _read_toml(pyproject)):
        return pyproject

    return None


def load_settings(
    config_path: Path | None = None, project_dir: Path | None = None
) -> Settings:
    """Load settings from an explicit file or the project directory.

    Args:
        config_path: Explicit config file. Must exist when given.
        project_dir: Directory to search when no path is given. Defaults to
            the working directory.

    Returns:
        Loaded settings, or defaults when no config file exists.

    Raises:
        ConfigError: If the file cannot be read or has invalid settings.
    """
    path = config_path or find_config_file(project_dir or Path.cwd())
    if path is None:
        return Settings()

    table = _settings_table(path, _read_toml(path)) or {}
    try:
        return Settings.model_validate(table)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigError(f"Invalid settings in {path}: {problems}") from e

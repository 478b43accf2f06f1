"""Reading and writing the YAML version record."""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from .exceptions import InvalidVersionFileError

logger = logging.getLogger(__name__)


class VersionRecord(BaseModel):
    """Fields stored in a ``.semver`` record.

    Every field must be present. Values are checked strictly so that a quoted
    ``"1"`` or a null ``special`` is reported as an invalid file.
    """

    model_config = ConfigDict(strict=True, extra="ignore")

    major: int
    minor: int
    patch: int
    special: str


def read_record(path: Path) -> dict[str, Any]:
    """Load a YAML mapping from ``path``.

    Keys written by the Ruby ``semver`` gem carry a leading colon
    (``:major: 1``); it is stripped.

    Args:
        path: Record to read.

    Returns:
        The mapping, or an empty dict for an empty document.

    Raises:
        InvalidVersionFileError: If the file is not YAML or not a mapping.
        OSError: If the file cannot be read.
    """
    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise InvalidVersionFileError(path, "not valid YAML") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidVersionFileError(path, "expected a mapping")
    return {str(key).lstrip(":"): value for key, value in data.items()}


def parse_record(path: Path, data: dict[str, Any]) -> VersionRecord:
    """Validate a loaded mapping as a version record.

    Raises:
        InvalidVersionFileError: If a field is missing or has the wrong type.
    """
    try:
        return VersionRecord.model_validate(data)
    except ValidationError as e:
        fields = sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]})
        raise InvalidVersionFileError(path, f"bad fields: {', '.join(fields)}") from e


def write_record(path: Path, record: VersionRecord) -> None:
    """Write ``record`` to ``path`` as YAML, replacing any existing content."""
    logger.debug("Writing version record to %s", path)
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(record.model_dump(), f, sort_keys=False)

"""
Postal dataset loader.

Reads the JSON dataset once at application start and turns it into an
immutable sequence of ``PostalRecord``. Loading is all-or-nothing: any
structural problem raises ``DatasetError`` instead of returning a partial
result, because a record without a usable city would silently fall out
of the city index.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .errors import DatasetError
from .models import CITY_FIELD, ZIP_FIELD, PostalRecord

logger = logging.getLogger(__name__)


def _validate_raw_record(position: int, raw: Any) -> None:
    """Raise ``DatasetError`` if one source object cannot become a record."""
    if not isinstance(raw, dict):
        raise DatasetError(f"Record {position} is not an object")

    city = raw.get(CITY_FIELD)
    if not isinstance(city, str) or not city:
        raise DatasetError(f"Record {position} is missing a '{CITY_FIELD}' value")

    # A JSON number has already lost any leading zeros
    zip_code = raw.get(ZIP_FIELD)
    if not isinstance(zip_code, str) or not zip_code:
        raise DatasetError(
            f"Record {position} must have a non-empty string '{ZIP_FIELD}' value"
        )


def parse_records(payload: Any) -> tuple[PostalRecord, ...]:
    """
    Convert a decoded dataset into postal records.

    Args:
        payload: The decoded JSON document, expected to be a list of objects.

    Returns:
        Records in dataset order.

    Raises:
        DatasetError: If the payload is not a non-empty list of valid records.
    """
    if not isinstance(payload, list):
        raise DatasetError("Dataset must be a JSON array of records")
    if not payload:
        raise DatasetError("Dataset contains no records")

    for position, raw in enumerate(payload):
        _validate_raw_record(position, raw)

    return tuple(PostalRecord.from_dict(raw) for raw in payload)


def load_records(path: str | Path) -> tuple[PostalRecord, ...]:
    """
    Load every postal record from a JSON dataset file.

    Args:
        path: Location of the dataset file.

    Returns:
        Records in the order they appear in the file.

    Raises:
        DatasetError: If the file is absent, not valid JSON, empty, or
            contains a malformed record.
    """
    dataset_path = Path(path)
    try:
        with dataset_path.open("r", encoding="utf-8") as dataset_file:
            payload = json.load(dataset_file)
    except OSError as exc:
        raise DatasetError(f"Unable to read dataset at '{dataset_path}': {exc}") from exc
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as exc:
        raise DatasetError(f"Dataset at '{dataset_path}' is not valid JSON: {exc}") from exc

    records = parse_records(payload)
    logger.info("Loaded %d zips from %s", len(records), dataset_path)
    return records

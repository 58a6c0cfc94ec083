"""
Data models for the ZIP lookup service.

This module defines the in-memory record type loaded from the postal
dataset. Records are immutable once created so the city index built
from them can be shared freely between requests.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

# Field names used by the source dataset
ZIP_FIELD = "zip"
CITY_FIELD = "city"


@dataclass(frozen=True)
class PostalRecord:
    """
    One postal code entry.

    Attributes:
        zip_code: ZIP identifier, kept as a string so leading zeros survive.
        city: City name in its display case.
        extra: Every other field of the source record (state, coordinates,
            ...), passed through untouched.
    """

    zip_code: str
    city: str
    extra: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        # Freeze the pass-through fields as well
        object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> PostalRecord:
        """Build a record from one source object."""
        extra = {
            key: value for key, value in raw.items()
            if key not in (ZIP_FIELD, CITY_FIELD)
        }
        return cls(zip_code=raw[ZIP_FIELD], city=raw[CITY_FIELD], extra=extra)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert the record to its JSON representation.

        Returns:
            Dictionary with the source field names, ZIP and city first.
        """
        return {
            ZIP_FIELD: self.zip_code,
            CITY_FIELD: self.city,
            **self.extra,
        }

    def __repr__(self) -> str:
        """Return string representation of the record."""
        return f"<PostalRecord {self.zip_code}: {self.city}>"

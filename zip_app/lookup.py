"""
City lookup service.

``CityLookup`` is the read interface the HTTP layer depends on;
``IndexedCityLookup`` answers it from a prebuilt in-memory ``CityIndex``.
Another backend only has to implement ``lookup`` to be injected into
the application factory.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from .errors import CityNotFound
from .index import CityIndex, normalize_city
from .models import PostalRecord


class CityLookup(ABC):
    """Read interface for resolving a city name to its postal records."""

    @abstractmethod
    def lookup(self, city_name: str) -> Sequence[PostalRecord]:
        """
        Return the records for a city, matched case-insensitively.

        Raises:
            CityNotFound: If no records exist for the city.
        """

    @property
    @abstractmethod
    def city_count(self) -> int:
        """Number of distinct normalized city names."""

    @property
    @abstractmethod
    def record_count(self) -> int:
        """Number of records available for lookup."""


class IndexedCityLookup(CityLookup):
    """CityLookup backed by an immutable in-memory CityIndex."""

    def __init__(self, index: CityIndex):
        self._index = index

    def lookup(self, city_name: str) -> tuple[PostalRecord, ...]:
        records = self._index.get(normalize_city(city_name))
        if records is None:
            raise CityNotFound(city_name)
        return records

    @property
    def city_count(self) -> int:
        return len(self._index)

    @property
    def record_count(self) -> int:
        return self._index.record_count

"""
City index built from postal records.

Groups records into buckets keyed by the normalized city name. The
index is built once and never mutated afterwards, which lets every
request thread read it without locking.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from types import MappingProxyType

from .models import PostalRecord


def normalize_city(name: str) -> str:
    """
    Return the lookup key for a city name.

    Only the case is changed: no trimming and no Unicode folding, so the
    build path and the query path must both go through this function.
    """
    return name.lower()


class CityIndex(Mapping[str, tuple[PostalRecord, ...]]):
    """
    Read-only mapping of normalized city name to an ordered bucket.

    Buckets are tuples in dataset order; the mapping itself is a
    ``MappingProxyType`` so neither can be changed after construction.
    """

    def __init__(self, buckets: Mapping[str, Sequence[PostalRecord]]):
        self._buckets = MappingProxyType(
            {key: tuple(bucket) for key, bucket in buckets.items()}
        )
        self._record_count = sum(len(bucket) for bucket in self._buckets.values())

    def __getitem__(self, key: str) -> tuple[PostalRecord, ...]:
        return self._buckets[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._buckets)

    def __len__(self) -> int:
        return len(self._buckets)

    @property
    def record_count(self) -> int:
        """Total number of records across all buckets."""
        return self._record_count

    def __repr__(self) -> str:
        return f"<CityIndex {len(self)} cities, {self._record_count} records>"


def build_city_index(records: Iterable[PostalRecord]) -> CityIndex:
    """
    Group records by normalized city name.

    Args:
        records: Postal records in dataset order.

    Returns:
        A CityIndex whose buckets keep the input order. Cities that differ
        only in case, or that repeat across states, share one bucket.
    """
    buckets: dict[str, list[PostalRecord]] = {}
    for record in records:
        buckets.setdefault(normalize_city(record.city), []).append(record)

    return CityIndex({key: tuple(bucket) for key, bucket in buckets.items()})

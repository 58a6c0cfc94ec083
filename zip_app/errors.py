"""
Exception types raised by the ZIP lookup service.

``DatasetError`` is fatal and stops the application factory before any
request is served. ``CityNotFound`` is an ordinary miss that the API
blueprint turns into a 404 response.
"""

from __future__ import annotations


class ZipLookupError(Exception):
    """Base class for errors raised by this package."""


class DatasetError(ZipLookupError):
    """The postal dataset is missing, unreadable, or structurally invalid."""


class CityNotFound(ZipLookupError, LookupError):
    """No bucket exists for the queried city name."""

    def __init__(self, city_name: str):
        super().__init__(f"No ZIP codes found for city '{city_name}'")
        self.city_name = city_name

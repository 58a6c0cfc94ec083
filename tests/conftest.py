"""
Shared pytest fixtures for the ZIP lookup test suite.

This module contains fixtures that are shared across all test modules.
Fixtures follow the Arrange-Act-Assert (AAA) pattern and ensure
test isolation by providing fresh data for each test.

Key Concepts Demonstrated:
- Fixture scopes (function, session)
- Fixture dependencies
- Test data factories
- Temporary dataset files
- Test client creation
"""

import json
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from faker import Faker

# Set testing environment before importing app
os.environ["FLASK_ENV"] = "testing"

from zip_app import create_app
from zip_app.models import PostalRecord


# Initialize Faker for generating test data
fake = Faker("en_US")

# Fixture dataset used by the testing configuration
TEST_DATASET_PATH = Path(__file__).resolve().parent / "data" / "zips.json"


# -----------------------------------------------------------------------------
# Application Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def app():
    """
    Create application instance for the test session.

    The index is read-only after startup, so one app instance can
    safely be shared by every test.

    Yields:
        Flask application instance configured for testing.
    """
    application = create_app("testing")
    yield application


@pytest.fixture(scope="function")
def client(app):
    """
    Create a test client for making HTTP requests.

    Args:
        app: Flask application fixture.

    Yields:
        Flask test client for making HTTP requests.
    """
    with app.test_client() as test_client:
        yield test_client


# -----------------------------------------------------------------------------
# Test Data Factory Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def record_factory() -> Callable[..., PostalRecord]:
    """
    Factory fixture for creating PostalRecord instances.

    Example:
        def test_something(record_factory):
            record = record_factory(city="Seattle")
            assert record.city == "Seattle"
    """

    def _create_record(
        zip_code: str | None = None,
        city: str | None = None,
        **extra: Any
    ) -> PostalRecord:
        """
        Create a record with the given or default values.

        Args:
            zip_code: ZIP code (defaults to a random 5-digit string).
            city: City name (defaults to a random city).
            extra: Pass-through fields (defaults to a random state).

        Returns:
            PostalRecord instance.
        """
        if not extra:
            extra = {"state": fake.state_abbr()}
        return PostalRecord(
            zip_code=zip_code or fake.zipcode(),
            city=city or fake.city(),
            extra=extra
        )

    return _create_record


@pytest.fixture
def raw_records() -> list[dict[str, Any]]:
    """
    Provide raw source objects as they appear in a dataset file.

    Returns:
        List of dictionaries with zip, city and state fields.
    """
    return [
        {"zip": "98101", "city": "Seattle", "state": "WA"},
        {"zip": "02108", "city": "Boston", "state": "MA"},
        {"zip": "98102", "city": "seattle", "state": "WA"},
    ]


@pytest.fixture
def dataset_file(tmp_path) -> Callable[[Any], Path]:
    """
    Factory fixture that writes a payload to a temporary dataset file.

    Strings are written verbatim so tests can produce invalid JSON;
    anything else is JSON-encoded.

    Returns:
        Function taking a payload and returning the file path.
    """

    def _write(payload: Any, name: str = "zips.json") -> Path:
        path = tmp_path / name
        if isinstance(payload, str):
            path.write_text(payload, encoding="utf-8")
        else:
            path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write


# -----------------------------------------------------------------------------
# API Helper Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def api_headers() -> dict[str, str]:
    """
    Provide common headers for API requests.

    Returns:
        Dictionary of HTTP headers.
    """
    return {"Accept": "application/json"}

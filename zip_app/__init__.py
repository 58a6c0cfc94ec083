"""
Flask application factory module.

This module creates and configures the Flask application using
the factory pattern, allowing for different configurations
(development, testing, production).

The postal dataset is loaded and indexed inside the factory, before any
blueprint can serve a request. A dataset problem raises ``DatasetError``
out of ``create_app`` so the process never starts with a partial index.
"""

from __future__ import annotations

import logging
import time

from flask import Flask, Response, g, request
from flask_cors import CORS

from config import get_config

from .index import build_city_index, normalize_city
from .loader import load_records
from .lookup import CityLookup, IndexedCityLookup

# Key under which the lookup service is stored in app.extensions
LOOKUP_EXTENSION = "city_lookup"

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def build_lookup(dataset_path: str) -> IndexedCityLookup:
    """
    Load the dataset and build the in-memory lookup service.

    Args:
        dataset_path: Location of the JSON dataset.

    Returns:
        Lookup service holding the freshly built city index.

    Raises:
        DatasetError: If the dataset cannot be loaded.
    """
    records = load_records(dataset_path)
    index = build_city_index(records)
    logger.info("Indexed %d records under %d cities", index.record_count, len(index))

    seattle = index.get(normalize_city("Seattle"))
    if seattle is not None:
        logger.info("There are %d zips in Seattle", len(seattle))

    return IndexedCityLookup(index)


def get_lookup(app: Flask) -> CityLookup:
    """Return the lookup service registered on the application."""
    return app.extensions[LOOKUP_EXTENSION]


def _register_request_logging(app: Flask) -> None:
    """Log one line per request with its status and duration."""

    @app.before_request
    def _start_timer() -> None:
        g.request_started = time.perf_counter()

    @app.after_request
    def _log_request(response: Response) -> Response:
        started = g.pop("request_started", None)
        elapsed_ms = (time.perf_counter() - started) * 1000 if started is not None else 0.0
        logger.info(
            "%s %s %s - %.3f ms",
            request.method,
            request.full_path.rstrip("?"),
            response.status_code,
            elapsed_ms,
        )
        return response


def create_app(config_name: str | None = None, lookup: CityLookup | None = None) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        config_name: Configuration environment name.
                     If None, uses FLASK_ENV environment variable.
        lookup: Optional prebuilt lookup service. When None, the dataset
                named by ZIP_DATASET_PATH is loaded and indexed.

    Returns:
        Configured Flask application instance.
    """
    app = Flask(__name__)

    # Load configuration
    config_class = get_config(config_name)
    app.config.from_object(config_class)

    logger.info("Creating app with config: %s", config_class.__name__)

    if lookup is None:
        lookup = build_lookup(app.config["ZIP_DATASET_PATH"])
    app.extensions[LOOKUP_EXTENSION] = lookup

    # Initialize extensions
    CORS(app, origins=app.config["CORS_ORIGINS"], send_wildcard=True)
    _register_request_logging(app)

    # Register blueprints
    from .routes.api import api_bp
    from .routes.views import views_bp
    from .routes.zips import zips_bp

    app.register_blueprint(api_bp, url_prefix="/api")
    app.register_blueprint(zips_bp)
    app.register_blueprint(views_bp)

    return app

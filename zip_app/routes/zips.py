"""
City-to-ZIP lookup endpoints.

Both paths answer the same query; ``/zips/city`` is the historical
route and ``/lookup/city`` the current one.

Endpoints:
    GET    /zips/city/<city_name>     - ZIP records for a city
    GET    /lookup/city/<city_name>   - Same as above
"""

import logging
from flask import Blueprint, current_app, jsonify, Response

from zip_app import get_lookup
from zip_app.errors import CityNotFound

logger = logging.getLogger(__name__)

zips_bp = Blueprint("zips", __name__)


@zips_bp.route("/zips/city/<city_name>", methods=["GET"])
@zips_bp.route("/lookup/city/<city_name>", methods=["GET"])
def get_zips_for_city(city_name: str) -> tuple[Response, int]:
    """
    List every ZIP record for a city, matched case-insensitively.

    Args:
        city_name: City name from the URL path.

    Returns:
        JSON array of records in dataset order and 200 status code,
        or error message and 404 if the city is unknown.
    """
    try:
        records = get_lookup(current_app).lookup(city_name)
    except CityNotFound:
        # A miss is a normal outcome, not a server fault
        logger.info("No zips for city %r", city_name)
        return jsonify({"error": "invalid city name", "city": city_name}), 404

    logger.info("Found %d zips for city %r", len(records), city_name)
    return jsonify([record.to_dict() for record in records]), 200

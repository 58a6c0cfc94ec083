"""WSGI entry point for the ZIP lookup service."""

import logging
import os

from zip_app import create_app

logger = logging.getLogger(__name__)

app = create_app(os.getenv("FLASK_ENV", "production"))


if __name__ == "__main__":
    # An empty HOST means every interface
    host = app.config["HOST"] or "0.0.0.0"
    port = app.config["PORT"]
    logger.info("server is listening at http://%s:%s", host, port)
    app.run(host=host, port=port)

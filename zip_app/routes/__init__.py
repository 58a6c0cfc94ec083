"""
Routes package for the ZIP lookup application.

This package contains route blueprints:
- api: service endpoints (health check) and JSON error handlers
- zips: city-to-ZIP lookup endpoints
- views: plain-text greeting route
"""

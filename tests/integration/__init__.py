"""
HTTP test package for the ZIP lookup service.

Tests use the Flask test client and demonstrate:
- Lookup hit and miss testing
- Application startup failure testing
- Error handling testing
"""

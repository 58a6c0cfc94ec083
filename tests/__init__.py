"""
Test suite for the ZIP lookup service.

This package contains:
- unit/: loader, index builder, lookup service and model tests
- integration/: HTTP tests through the Flask test client
- contracts/: payload checks against contracts/openapi.yaml
- smoke/: checks against a running server
"""

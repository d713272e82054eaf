"""API endpoint tests.

End-to-end tests for REST API endpoints using TestClient, with services
replaced through app.dependency_overrides.
"""

"""API tests package.

End-to-end tests for the system and profile endpoints using TestClient,
covering response formatting, error handling and HTTP status codes.
"""

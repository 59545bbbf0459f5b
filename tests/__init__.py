"""Test suite for the restmeta application layer.

Test structure:
- unit/: Settings, logging adapter and container tests
- api/: HTTP endpoint tests using TestClient

Metadata component tests live beside the component in
restmeta/metadata/tests/.
"""

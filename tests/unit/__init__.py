"""Unit tests for application infrastructure."""

"""Core application infrastructure (settings, errors, dependency container)."""

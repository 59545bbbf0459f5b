"""Domain-level abstractions shared by the application layers."""

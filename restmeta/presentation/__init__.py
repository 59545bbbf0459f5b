"""HTTP presentation layer (FastAPI routers, dependencies, error responses)."""

"""REST API layer (FastAPI routers, dependencies, error mapping)."""

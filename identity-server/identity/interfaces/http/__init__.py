"""FastAPI transport: routers, dependencies, error translation."""

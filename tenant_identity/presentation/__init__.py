"""Presentation layer: FastAPI routers, middleware and RFC 7807 errors."""

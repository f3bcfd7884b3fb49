"""Request tracing, access logs and per-endpoint hit counts.

Everything here is process-local: request IDs go into structlog contextvars and
the X-Request-Id header, and hit counts live in memory until restart.
"""

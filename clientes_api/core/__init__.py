"""
Core utilities shared across the Clientes API.

This package hosts configuration helpers (env vars, database URL, CORS) and
the logging setup. Routers and services read settings through
``get_settings()`` instead of touching os.environ directly.
"""

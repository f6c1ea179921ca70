"""
Core utilities shared across the landing package.

Configuration, logging setup, error types and small helpers live here so
that repositories, services and routers do not read os.environ directly.
"""

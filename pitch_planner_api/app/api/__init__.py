"""
API package.

``router.py`` aggregates the per-entity routers from ``endpoints``;
the application mounts the result under ``/api``.
"""

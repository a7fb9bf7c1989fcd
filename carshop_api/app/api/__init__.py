"""
API package containing the HTTP routes.

``router.py`` exposes a top‑level ``router`` which includes the
domain‑specific routers from ``endpoints``; the application mounts it
under ``/api``.
"""

"""
Application package initializer.

This package contains the main entrypoint for the mock API and all of
its submodules.  Each domain (profile, offerings, appointments) exposes
a router defined in ``api/endpoints``; the routers are aggregated in
``api/router.py`` and mounted under ``/api``.
"""

from .main import app, create_app  # noqa: F401

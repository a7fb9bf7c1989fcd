"""
Top‑level package for the CarShop mock API.

This file makes ``carshop_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``carshop_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []

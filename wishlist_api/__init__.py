"""
Top‑level package for the Wishlist API.

This file makes ``wishlist_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``wishlist_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []

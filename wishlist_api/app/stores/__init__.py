"""
Key‑value store layer.

The wishlist handler talks to three stores through the narrow
interfaces in ``base``.  ``memory`` provides dict‑backed
implementations for tests and local experiments; ``sqlite`` provides
a persistent implementation on top of the SQLite helpers in
``core.db``.
"""

from .base import CatalogStore, NotificationStore, Page, Stores, WishlistStore  # noqa: F401

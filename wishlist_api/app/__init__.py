"""
Application package initializer.

The project is organised into a few small pieces: ``core`` holds
configuration, security, logging and error definitions, ``stores``
holds the key‑value store interfaces and their implementations,
``services`` holds the wishlist business logic and ``api`` exposes it
over HTTP.  Versioning is handled by grouping routers under the
``api/<version>/`` hierarchy.
"""

from .main import app  # noqa: F401

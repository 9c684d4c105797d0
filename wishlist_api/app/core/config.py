"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields.  The
application factory receives a ``Settings`` instance explicitly, so
tests can build isolated applications with their own table names and
signing secret without touching the process environment.

Nothing here is validated at startup: a wrong table name or secret
surfaces on the first request that uses it.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Wishlist API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Token verification.  Tokens are issued elsewhere and signed with
    # the shared secret; the caller's identity is read from the claim
    # named by ``identity_claim``.
    jwt_secret: str = os.getenv("JWT_SECRET", "change_me")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))
    identity_claim: str = os.getenv("IDENTITY_CLAIM", "email")

    # Names of the three backing tables.
    wishlist_table: str = os.getenv("WISHLIST_TABLE", "wishlist")
    products_table: str = os.getenv("PRODUCTS_TABLE", "products")
    notifications_table: str = os.getenv("NOTIFICATIONS_TABLE", "notifications")

    # Path to the SQLite database used by the bundled store.  Relative
    # paths are resolved against the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "wishlist.db")

    # Number of wishlist rows fetched per store query when listing.
    page_size: int = int(os.getenv("PAGE_SIZE", "100"))

    def __post_init__(self) -> None:
        # A page must hold at least one row for pagination to advance.
        self.page_size = max(1, self.page_size)


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables should
# be set before importing this module.
settings = Settings()

"""
Pydantic schemas for wishlist entries.

A wishlist entry is a snapshot of a catalog product taken when the
user added it: later catalog changes are not reflected in stored
entries.  Entries are keyed by ``(owner_identity, item_key)`` where
``item_key`` is the uppercase product identifier.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class WishlistEntry(BaseModel):
    """A single stored wishlist row."""

    model_config = ConfigDict(populate_by_name=True)

    owner_identity: str = Field(..., alias="ownerIdentity")
    item_key: str = Field(..., alias="itemKey")
    product_id: str = Field(..., alias="productId")
    product_name: str = Field(..., alias="productName")
    price: float
    added_at: str = Field(..., alias="addedAt", description="ISO-8601 UTC timestamp")


class WishlistItems(BaseModel):
    """Response body for listing a wishlist."""

    items: List[WishlistEntry]


class MessageResponse(BaseModel):
    """Response body carrying a human readable message."""

    message: str

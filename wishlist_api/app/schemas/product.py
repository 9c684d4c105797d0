"""Pydantic schema for catalog products."""

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """A catalog product.  Read-only from the wishlist's point of view."""

    model_config = ConfigDict(populate_by_name=True)

    product_id: str = Field(..., alias="productId", description="Uppercase product identifier")
    product_name: str = Field(..., alias="productName")
    price: float

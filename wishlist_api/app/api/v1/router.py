"""
Top‑level router for version 1 of the API.
"""

from fastapi import APIRouter

from .endpoints import info, wishlist

router = APIRouter()

# The wishlist router carries its own "/wishlist" prefix so that the
# endpoint lives at "/wishlist" rather than "/wishlist/".
router.include_router(wishlist.router, tags=["wishlist"])
router.include_router(info.router, prefix="/info", tags=["info"])

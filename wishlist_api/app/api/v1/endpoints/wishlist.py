"""
Wishlist endpoint for API v1.

A single path serves the whole wishlist:

* ``OPTIONS`` answers cross‑origin preflight requests without
  authentication.
* ``GET`` lists the caller's wishlist.
* ``POST`` adds the product named by ``productId`` in the JSON body.
* ``DELETE`` removes the product named by ``productId``.

Any other method is answered with 405 once the caller is
authenticated.  Every method except ``OPTIONS`` requires a bearer
token; authentication is resolved before the request body is read or
any store is touched.
"""

import json

from fastapi import APIRouter, Depends, Request

from wishlist_api.app.core.errors import MethodNotAllowedError, ValidationError
from wishlist_api.app.core.security import get_current_identity
from wishlist_api.app.schemas.wishlist import MessageResponse, WishlistItems
from wishlist_api.app.services.wishlist_service import WishlistService

router = APIRouter(prefix="/wishlist")


def get_wishlist_service(request: Request) -> WishlistService:
    """Return the service instance the application was built with."""
    return request.app.state.wishlist_service


async def read_product_id(request: Request) -> str:
    """Extract ``productId`` from the JSON request body.

    An empty body counts as ``{}``.  Raises ``ValidationError`` when
    the body is not a JSON object or ``productId`` is missing or not a
    string.
    """
    raw = await request.body()
    body = {}
    if raw.strip():
        try:
            body = json.loads(raw)
        except ValueError as exc:
            raise ValidationError("Request body must be a JSON object") from exc
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    product_id = body.get("productId")
    if product_id is None or product_id == "":
        raise ValidationError("productId required")
    if not isinstance(product_id, str):
        raise ValidationError("productId must be a string")
    return product_id


@router.options("")
async def preflight() -> dict:
    return {}


@router.get("", response_model=WishlistItems)
async def list_wishlist(
    identity: str = Depends(get_current_identity),
    service: WishlistService = Depends(get_wishlist_service),
) -> WishlistItems:
    """Return every item on the caller's wishlist."""
    items = await service.list_items(identity)
    return WishlistItems(items=items)


@router.post("", response_model=MessageResponse)
async def add_to_wishlist(
    request: Request,
    identity: str = Depends(get_current_identity),
    service: WishlistService = Depends(get_wishlist_service),
) -> MessageResponse:
    """Add a catalog product to the caller's wishlist.

    Returns 404 if the product is unknown.  Adding a product that is
    already on the wishlist still returns 200, with a message saying so.
    """
    product_id = await read_product_id(request)
    message = await service.add_item(identity, product_id)
    return MessageResponse(message=message)


@router.delete("", response_model=MessageResponse)
async def remove_from_wishlist(
    request: Request,
    identity: str = Depends(get_current_identity),
    service: WishlistService = Depends(get_wishlist_service),
) -> MessageResponse:
    """Remove a product from the caller's wishlist.  Idempotent."""
    product_id = await read_product_id(request)
    message = await service.remove_item(identity, product_id)
    return MessageResponse(message=message)


@router.api_route("", methods=["PUT", "PATCH", "HEAD"], include_in_schema=False)
async def method_not_allowed(identity: str = Depends(get_current_identity)) -> None:
    """Reject unsupported methods once the caller is authenticated."""
    raise MethodNotAllowedError()

"""
Exception taxonomy for the wishlist handler.

Every error the handler raises on purpose derives from
``WishlistError`` and carries the HTTP status code and message it is
rendered with.  The application's exception handler turns these into
``{"message": ...}`` JSON bodies; anything that is not a
``WishlistError`` is treated as an internal failure (500).
"""

from fastapi import status


class WishlistError(Exception):
    """Base class for errors with a known HTTP representation."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class UnauthenticatedError(WishlistError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Authorization header missing"


class InvalidTokenError(WishlistError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid or expired token"


class ValidationError(WishlistError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "productId required"


class NotFoundError(WishlistError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Product not found"


class MethodNotAllowedError(WishlistError):
    status_code = status.HTTP_405_METHOD_NOT_ALLOWED
    default_message = "Method not allowed"


class DuplicateEntryError(WishlistError):
    """Raised by a store when a conditional create finds an existing row.

    The conflict is not a failure from the caller's point of view: the
    item they asked for is already on their wishlist, so it is rendered
    as a 200.
    """

    status_code = status.HTTP_200_OK
    default_message = "Item already in wishlist"

"""Version 1 of the Wishlist API."""

"""Domain entities of the catalog."""

from .product import Product  # noqa: F401

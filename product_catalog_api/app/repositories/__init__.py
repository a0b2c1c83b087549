"""
Storage layer for products.

The service depends only on the ``ProductRepository`` contract, so the
in‑memory ``ProductMap`` can be swapped for a file or database backed
store without touching the service or the API handlers.
"""

from .base import ProductRepository  # noqa: F401
from .product_map import ProductMap  # noqa: F401

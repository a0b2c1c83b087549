"""
In‑memory product storage.

Products live in a dictionary keyed by ID next to a monotonically
increasing ``last_id`` counter.  The map is shared by every request
handled by the server, so all operations run under a single lock.
Records are copied on the way in and on the way out; callers never
hold a reference to the stored object.
"""

import threading
from dataclasses import replace
from typing import Dict, Optional

from product_catalog_api.app.core.errors import ErrorKind, ProductError
from product_catalog_api.app.models.product import Product
from product_catalog_api.app.repositories.base import ProductRepository


class ProductMap(ProductRepository):
    """Dictionary backed ``ProductRepository``."""

    def __init__(self, db: Optional[Dict[int, Product]] = None, starting_id: int = 0) -> None:
        self._db: Dict[int, Product] = {}
        self._last_id = starting_id
        self._lock = threading.RLock()
        for product_id, product in (db or {}).items():
            self._db[product_id] = replace(product, id=product_id)
            self._last_id = max(self._last_id, product_id)

    @property
    def last_id(self) -> int:
        with self._lock:
            return self._last_id

    def count(self) -> int:
        with self._lock:
            return len(self._db)

    def save(self, product: Product) -> None:
        with self._lock:
            for stored in self._db.values():
                if stored.code_value == product.code_value:
                    raise ProductError(ErrorKind.CODE_ALREADY_EXISTS)

            self._last_id += 1
            product.id = self._last_id
            self._db[product.id] = replace(product)

    def get_by_id(self, product_id: int) -> Product:
        with self._lock:
            stored = self._db.get(product_id)
            if stored is None:
                raise ProductError(ErrorKind.NOT_FOUND)
            return replace(stored)

    def update(self, product: Product) -> None:
        with self._lock:
            if product.id not in self._db:
                raise ProductError(ErrorKind.NOT_FOUND)

            for stored in self._db.values():
                if stored.code_value == product.code_value and stored.id != product.id:
                    raise ProductError(ErrorKind.CODE_ALREADY_EXISTS)

            self._db[product.id] = replace(product)

    def delete(self, product_id: int) -> None:
        with self._lock:
            if product_id not in self._db:
                raise ProductError(ErrorKind.NOT_FOUND)
            del self._db[product_id]

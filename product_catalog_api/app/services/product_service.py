"""
Business logic for products.

``ProductService`` validates products before they reach the
repository and re‑tags repository errors with the name of the field
(or ``id``) that caused them, so the API layer can render precise
messages without knowing about storage.
"""

import logging
import re
from datetime import datetime

from product_catalog_api.app.core.errors import ErrorKind, ProductError
from product_catalog_api.app.models.product import Product
from product_catalog_api.app.repositories.base import ProductRepository

EXPIRATION_FORMAT = "%d/%m/%Y"
_EXPIRATION_PATTERN = re.compile(r"\d{2}/\d{2}/\d{4}")


def parse_expiration(value: str) -> datetime:
    """Parse a ``DD/MM/YYYY`` date.

    ``strptime`` alone accepts single digit days and months, so the
    shape is checked first.  Raises ``ValueError`` for anything that is
    not a real calendar date in that exact layout.
    """
    if not _EXPIRATION_PATTERN.fullmatch(value):
        raise ValueError(f"{value!r} does not match DD/MM/YYYY")
    return datetime.strptime(value, EXPIRATION_FORMAT)


class ProductService:
    """Сервис для управления товарами каталога."""

    def __init__(self, repository: ProductRepository) -> None:
        self._repository = repository

    @staticmethod
    def _validate(product: Product) -> None:
        """Reject the first missing or malformed field.

        Zero ``quantity`` and ``price`` count as missing.
        """
        if product.name == "":
            raise ProductError(ErrorKind.FIELD_REQUIRED, "name")
        if product.quantity == 0:
            raise ProductError(ErrorKind.FIELD_REQUIRED, "quantity")
        if product.code_value == "":
            raise ProductError(ErrorKind.FIELD_REQUIRED, "code_value")
        if product.expiration == "":
            raise ProductError(ErrorKind.FIELD_REQUIRED, "expiration")
        if product.price == 0:
            raise ProductError(ErrorKind.FIELD_REQUIRED, "price")

        try:
            parse_expiration(product.expiration)
        except ValueError as e:
            raise ProductError(ErrorKind.FIELD_FORMAT, "expiration") from e

    def save(self, product: Product) -> None:
        """Validate and store a new product; ``product.id`` is filled in."""
        self._validate(product)
        try:
            self._repository.save(product)
        except ProductError as e:
            if e.kind is ErrorKind.CODE_ALREADY_EXISTS:
                raise e.tagged("code_value") from e
            raise
        logging.getLogger(__name__).info("Created product %s (%s)", product.id, product.code_value)

    def get_by_id(self, product_id: int) -> Product:
        """Return the product with ``product_id``.

        An unknown ID is reported as ``PRODUCT_ID`` tagged ``id``.
        """
        try:
            return self._repository.get_by_id(product_id)
        except ProductError as e:
            if e.kind is ErrorKind.NOT_FOUND:
                raise e.tagged("id", ErrorKind.PRODUCT_ID) from e
            raise

    def update(self, product: Product) -> None:
        """Validate and replace the stored product that has ``product.id``."""
        self._validate(product)
        try:
            self._repository.update(product)
        except ProductError as e:
            if e.kind is ErrorKind.NOT_FOUND:
                raise e.tagged("id") from e
            if e.kind is ErrorKind.CODE_ALREADY_EXISTS:
                raise e.tagged("code_value") from e
            raise
        logging.getLogger(__name__).info("Updated product %s", product.id)

    def delete(self, product_id: int) -> None:
        """Remove the product with ``product_id``."""
        try:
            self._repository.delete(product_id)
        except ProductError as e:
            if e.kind is ErrorKind.NOT_FOUND:
                raise e.tagged("id") from e
            raise
        logging.getLogger(__name__).info("Deleted product %s", product_id)

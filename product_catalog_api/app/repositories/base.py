"""Abstract repository for the Product entity."""

from abc import ABC, abstractmethod

from product_catalog_api.app.models.product import Product


class ProductRepository(ABC):
    """Storage contract used by ``ProductService``.

    Implementations raise ``ProductError`` with kind ``NOT_FOUND`` for
    unknown IDs and ``CODE_ALREADY_EXISTS`` when a ``code_value`` is
    already taken by another product.
    """

    @abstractmethod
    def save(self, product: Product) -> None:
        """Store a new product and write the assigned ID to ``product.id``."""

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product:
        """Return the product stored under ``product_id``."""

    @abstractmethod
    def update(self, product: Product) -> None:
        """Replace the stored product that has ``product.id``."""

    @abstractmethod
    def delete(self, product_id: int) -> None:
        """Remove the product stored under ``product_id``."""

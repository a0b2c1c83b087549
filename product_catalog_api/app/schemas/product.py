"""
Pydantic models for product payloads.

``ProductRequest`` is the decoded request body for create, full update
and partial update.  Every field has the zero value of its type as a
default so that a partial update can be seeded from a stored product
and then overlaid with the keys present in the body.  Types are
strict: ``"5"`` is not accepted for ``quantity``.  ``ProductRead`` is
the ``data`` part of successful responses.
"""

from typing import Any, Dict, Tuple

from pydantic import BaseModel, Field

from product_catalog_api.app.models.product import Product

# Keys a create or full update body must carry.  ``is_published`` is optional.
REQUIRED_KEYS: Tuple[str, ...] = ("name", "quantity", "code_value", "expiration", "price")

# Quantities are 64-bit signed integers on the wire.
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class ProductRequest(BaseModel):
    """Schema for the body of POST, PUT and PATCH requests."""

    name: str = Field("", examples=["Milk"])
    quantity: int = Field(0, ge=INT64_MIN, le=INT64_MAX, examples=[10])
    code_value: str = Field("", examples=["MLK-001"])
    is_published: bool = Field(False, examples=[True])
    expiration: str = Field("", examples=["01/01/2030"])
    price: float = Field(0.0, examples=[9.5])

    model_config = {
        "strict": True,
        "extra": "ignore",
        # ``1e400`` decodes to ``inf``, which cannot be rendered back as JSON.
        "allow_inf_nan": False,
    }

    @classmethod
    def from_product(cls, product: Product) -> "ProductRequest":
        return cls(
            name=product.name,
            quantity=product.quantity,
            code_value=product.code_value,
            is_published=product.is_published,
            expiration=product.expiration,
            price=product.price,
        )

    def overlay(self, body: Dict[str, Any]) -> "ProductRequest":
        """Return a new request with the keys of ``body`` replacing current values.

        Validation errors propagate as ``pydantic.ValidationError``.
        """
        merged = self.model_dump()
        merged.update(body)
        return type(self).model_validate(merged)

    def to_product(self, product_id: int = 0) -> Product:
        return Product(
            id=product_id,
            name=self.name,
            quantity=self.quantity,
            code_value=self.code_value,
            is_published=self.is_published,
            expiration=self.expiration,
            price=self.price,
        )


class ProductRead(BaseModel):
    """Schema for reading a product from the API."""

    id: int
    name: str
    quantity: int
    code_value: str
    is_published: bool
    expiration: str
    price: float

    model_config = {
        "from_attributes": True,
    }

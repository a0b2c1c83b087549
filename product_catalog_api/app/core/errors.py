"""
Domain errors for the product catalog.

Every failure raised by the repository or the service is a
``ProductError`` carrying an ``ErrorKind`` and an optional field tag
naming the offending attribute.  The HTTP layer matches on ``kind``
to choose a status code and formats the message only at the edge.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Categories of domain failures.  Values are the human messages."""

    FIELD_REQUIRED = "field is required"
    FIELD_FORMAT = "field has an invalid format"
    CODE_ALREADY_EXISTS = "product code already exists"
    NOT_FOUND = "product not found"
    PRODUCT_ID = "product id provided is invalid"


class ProductError(Exception):
    """A categorized domain error, optionally tagged with a field name."""

    def __init__(self, kind: ErrorKind, field: Optional[str] = None) -> None:
        self.kind = kind
        self.field = field
        super().__init__(str(self))

    def tagged(self, field: str, kind: Optional[ErrorKind] = None) -> "ProductError":
        """Return a copy of this error carrying ``field`` (and ``kind``, if given)."""
        return ProductError(kind or self.kind, field)

    def __str__(self) -> str:
        if self.field:
            return f"{self.kind.value}: {self.field}"
        return self.kind.value

    def __repr__(self) -> str:
        return f"ProductError({self.kind.name}, field={self.field!r})"

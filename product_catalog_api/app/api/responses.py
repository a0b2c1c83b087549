"""
Response helpers shared by the endpoints.

Successful product responses are wrapped in an envelope with a
capitalized ``Message`` key and the product under ``data``; clients
depend on that exact shape.  Errors are short plain‑text messages.
"""

from fastapi import status
from fastapi.responses import JSONResponse, PlainTextResponse

from product_catalog_api.app.core.errors import ErrorKind, ProductError
from product_catalog_api.app.models.product import Product
from product_catalog_api.app.schemas.product import ProductRead

NOT_FOUND_MESSAGE = "product with the provided id not found"
INTERNAL_ERROR_MESSAGE = "internal server error"


def text(status_code: int, message: str) -> PlainTextResponse:
    return PlainTextResponse(message, status_code=status_code)


def product_envelope(status_code: int, message: str, product: Product) -> JSONResponse:
    """Render ``{"Message": message, "data": product}``."""
    data = ProductRead.model_validate(product).model_dump()
    return JSONResponse({"Message": message, "data": data}, status_code=status_code)


def invalid_body(reason: str = "") -> PlainTextResponse:
    if reason:
        return text(status.HTTP_400_BAD_REQUEST, f"invalid body: {reason}")
    return text(status.HTTP_400_BAD_REQUEST, "invalid body")


def error_response(error: ProductError) -> PlainTextResponse:
    """Map a domain error to its HTTP status and plain‑text body."""
    if error.kind in (ErrorKind.FIELD_REQUIRED, ErrorKind.FIELD_FORMAT, ErrorKind.CODE_ALREADY_EXISTS):
        return invalid_body(str(error))
    if error.kind in (ErrorKind.NOT_FOUND, ErrorKind.PRODUCT_ID):
        return text(status.HTTP_404_NOT_FOUND, NOT_FOUND_MESSAGE)
    return text(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)

"""
Product endpoints.

These routes expose create, retrieve, full update, partial update and
delete for catalog products.  Request bodies are read raw rather than
through FastAPI's body parameters because create and full update must
reject a body that omits a required key with a plain‑text message
naming the key, before any value is looked at.  Partial update seeds
the request from the stored product and overlays only the keys that
are present in the body.
"""

import json
import re
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Request, Response, status
from pydantic import ValidationError
from starlette.requests import ClientDisconnect

from product_catalog_api.app.api import responses
from product_catalog_api.app.api.dependencies import get_product_service
from product_catalog_api.app.core.errors import ProductError
from product_catalog_api.app.schemas.product import INT64_MAX, INT64_MIN, REQUIRED_KEYS, ProductRequest
from product_catalog_api.app.services.product_service import ProductService

router = APIRouter()

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


class MalformedBody(Exception):
    """The request body could not be turned into a ``ProductRequest``."""

    def __init__(self, reason: str = "") -> None:
        super().__init__(reason)
        self.reason = reason


def parse_id(raw: str) -> Optional[int]:
    """Parse a decimal path ID; ``None`` when it is not a 64-bit integer."""
    if not _ID_PATTERN.fullmatch(raw):
        return None
    value = int(raw)
    if not INT64_MIN <= value <= INT64_MAX:
        return None
    return value


def reject_constant(name: str) -> Any:
    """``json.loads`` hook refusing the non-standard ``NaN`` and ``Infinity`` literals."""
    raise ValueError(f"invalid JSON literal {name}")


def missing_key(body: Dict[str, Any], *keys: str) -> Optional[str]:
    """Return the first of ``keys`` absent from ``body``."""
    for key in keys:
        if key not in body:
            return key
    return None


async def read_body(request: Request) -> Dict[str, Any]:
    """Read the request body as a JSON object."""
    try:
        raw = await request.body()
    except ClientDisconnect as e:
        raise MalformedBody() from e
    try:
        body = json.loads(raw, parse_constant=reject_constant)
    except ValueError as e:
        raise MalformedBody(str(e)) from e
    if not isinstance(body, dict):
        raise MalformedBody("expected a JSON object")
    return body


def without_nulls(body: Dict[str, Any]) -> Dict[str, Any]:
    """Drop ``null`` values so they leave the target field untouched."""
    return {key: value for key, value in body.items() if value is not None}


def describe(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    return f"{location}: {first['msg']}" if location else first["msg"]


async def read_full_request(request: Request) -> ProductRequest:
    """Decode a create or full update body; every required key must be present."""
    body = await read_body(request)
    key = missing_key(body, *REQUIRED_KEYS)
    if key is not None:
        raise MalformedBody(f"key {key} does not exist")
    try:
        return ProductRequest.model_validate(without_nulls(body))
    except ValidationError as e:
        raise MalformedBody(describe(e)) from e


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_product(
    request: Request,
    service: ProductService = Depends(get_product_service),
) -> Response:
    """Create a product.

    The body must contain ``name``, ``quantity``, ``code_value``,
    ``expiration`` and ``price``; ``is_published`` defaults to false.
    Responds 201 with the stored product, including its new ``id``.
    """
    try:
        body = await read_full_request(request)
    except MalformedBody as e:
        return responses.invalid_body(e.reason)

    product = body.to_product()
    try:
        service.save(product)
    except ProductError as e:
        return responses.error_response(e)

    return responses.product_envelope(status.HTTP_201_CREATED, "Product created successfully", product)


@router.get("/{product_id}")
async def get_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> Response:
    """Retrieve a single product by its ID.  Responds 404 if it does not exist."""
    parsed_id = parse_id(product_id)
    if parsed_id is None:
        return responses.text(status.HTTP_400_BAD_REQUEST, "invalid id")

    try:
        product = service.get_by_id(parsed_id)
    except ProductError as e:
        return responses.error_response(e)

    return responses.product_envelope(status.HTTP_200_OK, "Product found successfully", product)


@router.put("/{product_id}")
async def update_product(
    product_id: str,
    request: Request,
    service: ProductService = Depends(get_product_service),
) -> Response:
    """Replace every mutable field of an existing product.

    Same body rules as creation.  The ID in the path wins over anything
    else; it is never changed.
    """
    parsed_id = parse_id(product_id)
    if parsed_id is None:
        return responses.text(status.HTTP_400_BAD_REQUEST, "invalid id")

    try:
        body = await read_full_request(request)
    except MalformedBody as e:
        return responses.invalid_body(e.reason)

    product = body.to_product(parsed_id)
    try:
        service.update(product)
    except ProductError as e:
        return responses.error_response(e)

    return responses.product_envelope(status.HTTP_200_OK, "Product updated successfully", product)


@router.patch("/{product_id}")
async def update_product_partial(
    product_id: str,
    request: Request,
    service: ProductService = Depends(get_product_service),
) -> Response:
    """Update only the fields present in the body.

    Omitted fields keep their stored values.  The merged product goes
    through the same validation as a full update.
    """
    parsed_id = parse_id(product_id)
    if parsed_id is None:
        return responses.text(status.HTTP_400_BAD_REQUEST, "invalid id")

    try:
        current = service.get_by_id(parsed_id)
    except ProductError as e:
        return responses.error_response(e)

    try:
        body = ProductRequest.from_product(current).overlay(without_nulls(await read_body(request)))
    except MalformedBody as e:
        return responses.invalid_body(e.reason)
    except ValidationError as e:
        return responses.invalid_body(describe(e))

    product = body.to_product(parsed_id)
    try:
        service.update(product)
    except ProductError as e:
        return responses.error_response(e)

    return responses.product_envelope(status.HTTP_200_OK, "Product updated successfully", product)


@router.delete("/{product_id}")
async def delete_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> Response:
    """Delete a product.  Responds 404 if it does not exist."""
    parsed_id = parse_id(product_id)
    if parsed_id is None:
        return responses.text(status.HTTP_400_BAD_REQUEST, "invalid id")

    try:
        service.delete(parsed_id)
    except ProductError as e:
        return responses.error_response(e)

    return responses.text(status.HTTP_200_OK, "Product deleted successfully")

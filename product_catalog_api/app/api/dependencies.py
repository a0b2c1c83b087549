"""FastAPI dependencies for the endpoints."""

from fastapi import Request

from product_catalog_api.app.services.product_service import ProductService


def get_product_service(request: Request) -> ProductService:
    """Return the service wired into the application by ``create_app``."""
    return request.app.state.product_service

"""
Top‑level API router.

This router aggregates the liveness probe and the product routes.
When new domains are introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import health, products

router = APIRouter()

router.include_router(health.router, tags=["health"])
router.include_router(products.router, prefix="/products", tags=["products"])

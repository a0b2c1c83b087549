"""Shared fixtures: a fresh application, store and client per test."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from product_catalog_api.app.main import create_app
from product_catalog_api.app.repositories.product_map import ProductMap
from product_catalog_api.app.services.product_service import ProductService


@pytest.fixture()
def repository() -> ProductMap:
    return ProductMap()


@pytest.fixture()
def service(repository) -> ProductService:
    return ProductService(repository)


@pytest.fixture()
def client(repository):
    """TestClient over an app backed by the ``repository`` fixture."""
    app = create_app(repository)
    with TestClient(app) as test_client:
        yield test_client

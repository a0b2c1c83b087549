"""
Main entrypoint for the Product Catalog API.

This module assembles the FastAPI application, sets up logging and
wires the repository, service and routers together.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Importing the app here
makes it easy to run with uvicorn or another ASGI server, e.g.::

    uvicorn product_catalog_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse

from .api.responses import INTERNAL_ERROR_MESSAGE
from .api.router import router
from .core.config import settings
from .core.logging_config import setup_logging
from .repositories.base import ProductRepository
from .repositories.product_map import ProductMap
from .services.product_service import ProductService


def create_app(repository: Optional[ProductRepository] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Each application owns its own store, so two apps never share
    products.

    Parameters
    ----------
    repository : Optional[ProductRepository]
        Storage backing the service.  Defaults to an empty in‑memory
        ``ProductMap`` whose counter starts at ``settings.starting_id``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the setup below
    # can safely log messages.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version)

    if repository is None:
        repository = ProductMap(starting_id=settings.starting_id)
    app.state.product_service = ProductService(repository)

    app.include_router(router)

    @app.exception_handler(Exception)
    async def unhandled_exception(request: Request, exc: Exception) -> PlainTextResponse:
        logging.getLogger(__name__).exception("Unhandled error on %s %s", request.method, request.url.path)
        return PlainTextResponse(INTERNAL_ERROR_MESSAGE, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()

"""Entry point for the Product Catalog API.

Starts the HTTP server on the address given by the ``SERVER_ADDRESS``
environment variable (default ``:8080``).  Other settings such as
``LOG_LEVEL`` may be placed in the environment before launching.

Usage:
    python run.py
"""
import sys

from product_catalog_api.app.server import main


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        pass

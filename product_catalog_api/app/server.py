"""
HTTP server bootstrap.

``main`` serves the application with Uvicorn on the configured
address and returns the process exit code: ``0`` after a clean
shutdown, ``1`` when the address is invalid or cannot be bound.
"""

import logging
import sys
from typing import Optional, Tuple

from uvicorn import Config, Server

from .core.config import settings
from .core.logging_config import setup_logging
from .main import create_app

DEFAULT_ADDRESS = ":8080"


def parse_address(address: str) -> Tuple[str, int]:
    """Split ``host:port`` into its parts.

    An empty host binds every interface.  An empty ``address`` falls
    back to ``DEFAULT_ADDRESS``.  Raises ``ValueError`` when the port
    is missing or out of range.
    """
    address = address or DEFAULT_ADDRESS
    host, sep, port = address.rpartition(":")
    if not sep or not port.isdigit():
        raise ValueError(f"invalid address {address!r}: expected host:port")
    port_number = int(port)
    if port_number > 65535:
        raise ValueError(f"invalid address {address!r}: port out of range")
    host = host.strip("[]")
    return host or "0.0.0.0", port_number


def main(address: Optional[str] = None) -> int:
    """Run the API until interrupted."""
    setup_logging(settings.log_level, settings.log_file)
    logger = logging.getLogger(__name__)

    try:
        host, port = parse_address(address if address is not None else settings.server_address)
    except ValueError as e:
        logger.error("%s", e)
        return 1

    config = Config(
        app=create_app(),
        host=host,
        port=port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logger.info("Serving %s on %s:%s", settings.project_name, host, port)
    try:
        server.run()
    except SystemExit as e:
        # Uvicorn exits with status 1 when the socket cannot be bound.
        logger.error("Server stopped with exit status %s", e.code)
        return 1 if e.code else 0
    except OSError as e:
        logger.error("Listener failed: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

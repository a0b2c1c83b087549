"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts with no configuration at all and listens on ``:8080``.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Product Catalog API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file in addition to the console output.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Listening address in ``host:port`` form.  An empty host (the
    # default ``:8080``) binds every interface.
    server_address: str = os.getenv("SERVER_ADDRESS", ":8080")

    # Value of the ID counter of a freshly created in‑memory store.  The
    # first saved product receives ``starting_id + 1``.
    starting_id: int = int(os.getenv("STARTING_ID", "0"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()

"""
Application package initializer.

The catalog is organised into layers that compose bottom‑up:
``repositories`` hold the products, ``services`` apply the domain
rules, and ``api`` translates HTTP requests into service calls.  The
wiring between them happens in ``main.create_app``.
"""

from .main import app  # noqa: F401

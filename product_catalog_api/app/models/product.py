"""
Product entity.

A product is identified by a numeric ``id`` assigned by the repository
on first save and by a human assigned ``code_value`` that must be
unique across the catalog.
"""

from dataclasses import dataclass


@dataclass
class Product:
    name: str = ""
    quantity: int = 0
    code_value: str = ""
    is_published: bool = False
    expiration: str = ""
    price: float = 0.0
    # Zero until the repository assigns an ID.
    id: int = 0

"""
Pydantic schema definitions for API payloads.

Schemas are separated from the ``Product`` dataclass to decouple the
wire representation from the domain entity.
"""

"""
Service layer abstraction.

Services encapsulate the business rules of the catalog.  They hold no
state of their own beyond the repository they delegate to, so the
in‑memory store can be replaced without changing the API handlers.
"""

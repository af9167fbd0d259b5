"""Infrastructure Layer — storage implementations and cross-cutting concerns.

Invariants:
    - Implements the Protocols in core/repository_protocols.py
    - All SQLAlchemy errors mapped to core/errors.py types before leaving this layer

Design Decisions:
    - One module per storage backend (SQL, in-memory) behind the same Protocol
"""

"""Services Layer — orchestration between routes and repositories.

Invariants:
    - Services depend on core Protocols, never on a concrete repository
    - Business rules come from core/ pure functions
"""

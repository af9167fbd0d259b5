"""Core Layer — domain types, rules, and boundary contracts. No IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Rule functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell; IO contracts declared as Protocols
"""

"""API Layer — FastAPI routes, dependencies, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON bodies or empty bodies with a status code

Design Decisions:
    - Thin routes delegate to services
"""

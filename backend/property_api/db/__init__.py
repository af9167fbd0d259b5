"""Database Metadata — SQLAlchemy declarative Base shared by models and migrations.

Invariants:
    - Only metadata lives here; engines and sessions belong to infrastructure/database.py

Design Decisions:
    - asyncpg driver for PostgreSQL (ADR: native async, no thread pool overhead)
"""

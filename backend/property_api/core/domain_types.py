"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - PropertyId wraps the store-assigned integer identity
    - All valid configuration states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: pydantic-settings parses them straight from environment variables
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

PropertyId = NewType("PropertyId", int)

# BIGINT column range; ids and integer fields outside it are rejected at the boundary
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


# ─── Enums ───────────────────────────────────────────────────────

class UpdateStrategy(str, Enum):
    """How a full-record update is written to storage."""
    IN_PLACE = "in_place"   # single UPDATE, identifier preserved
    REPLACE = "replace"     # delete + insert in one transaction, new identifier


class StorageBackend(str, Enum):
    """Which PropertyRepository implementation the API is wired to."""
    POSTGRES = "postgres"
    MEMORY = "memory"

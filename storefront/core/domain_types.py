"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ProductId, UserId wrap UUIDs — never use bare UUID in domain logic
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

ProductId = NewType("ProductId", UUID)
UserId = NewType("UserId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class SortDirection(str, Enum):
    """Creation-time ordering for listings — maps to ORDER BY direction."""
    ASC = "asc"
    DESC = "desc"

"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - InvoiceId and UserId wrap opaque strings — ids are never parsed or generated from content
    - All valid invoice states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

InvoiceId = NewType("InvoiceId", str)
UserId = NewType("UserId", str)


# ─── Enums ───────────────────────────────────────────────────────

class InvoiceStatus(str, Enum):
    """Invoice lifecycle states — maps to DB `status` column."""
    DRAFT = "draft"
    FINAL = "final"


# Structured columns stored as serialized text on the invoices table
STRUCTURED_FIELDS = ("items", "taxes", "labels")

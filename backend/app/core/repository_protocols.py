"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: boundary methods are async because implementations do IO
"""

from typing import Protocol

from app.core.domain_types import InvoiceId, UserId


class InvoiceLike(Protocol):
    """Structural contract for stored invoice rows handed back by the repository."""
    id: str
    user_id: str
    supplier_logo: str | None
    items: str
    taxes: str
    labels: str


class InvoiceRepository(Protocol):
    """Contract for invoice persistence — implemented by shell."""
    async def find_owned_or_fail(
        self, invoice_id: InvoiceId, owner_id: UserId,
    ) -> InvoiceLike: ...
    async def upsert(self, invoice_id: InvoiceId, record: dict) -> None: ...
    async def update_fields(self, invoice_id: InvoiceId, fields: dict) -> None: ...
    async def create(self, record: dict) -> InvoiceLike: ...

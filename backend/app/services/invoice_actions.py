"""Invoice Actions — save, delete-logo, read and create operations on owned invoices.

Invariants:
    - Every operation verifies ownership (id AND user_id) before touching the row
    - A failed ownership check aborts before any write
    - save_invoice performs exactly one write: an upsert with the full encoded record
    - Errors (ResourceNotFoundError, DatabaseError) propagate uncaught

Design Decisions:
    - Repository injected through __init__: the store is never a module global here
    - save_invoice keeps the ownership check even though the write is an upsert;
      new invoices come from create_invoice, so the insert branch of the upsert is
      only reached if the row vanishes between check and write
    - user_id stamped from the caller on every write, never read from the payload
"""

import logging
import uuid
from typing import Sequence

from app.core.domain_types import InvoiceId, UserId
from app.core.errors import (
    ErrorContext, InvoiceValidationError, ResourceNotFoundError,
)
from app.core.invoice_codec import (
    empty_invoice_record, encode_invoice_record, to_invoice_detail,
)
from app.core.repository_protocols import InvoiceLike, InvoiceRepository
from app.schemas.invoice import (
    CallerContext, InvoiceDetail, InvoiceFields, InvoiceItem, InvoiceTaxes,
)

logger = logging.getLogger(__name__)


class InvoiceActions:
    """Ownership-checked invoice mutations."""

    def __init__(self, repo: InvoiceRepository):
        self.repo = repo

    async def save_invoice(
        self,
        invoice_id: str,
        invoice: InvoiceFields,
        items: Sequence[InvoiceItem],
        taxes: Sequence[InvoiceTaxes],
        caller: CallerContext,
    ) -> None:
        """Persist the invoice, its items, taxes and labels."""
        owner_id = UserId(caller.user.id)
        target = await self._authorize(invoice_id, owner_id)

        record = encode_invoice_record(invoice, items, taxes, owner_id)
        await self.repo.upsert(target, record)
        logger.info(
            f"Invoice {target} saved ({len(items)} items, {len(taxes)} taxes)",
            extra={"invoice_id": target, "user_id": owner_id},
        )

    async def delete_logo(self, invoice_id: str, caller: CallerContext) -> None:
        """Clear the supplier logo reference."""
        owner_id = UserId(caller.user.id)
        target = await self._authorize(invoice_id, owner_id)

        await self.repo.update_fields(target, {"supplier_logo": None})
        logger.info(
            f"Invoice {target} logo cleared",
            extra={"invoice_id": target, "user_id": owner_id},
        )

    async def get_invoice(
        self, invoice_id: str, caller: CallerContext,
    ) -> InvoiceDetail:
        owner_id = UserId(caller.user.id)
        row = await self._find_owned(invoice_id, owner_id)
        return to_invoice_detail(row)

    async def create_invoice(self, caller: CallerContext) -> InvoiceDetail:
        """Create an empty draft invoice owned by the caller."""
        owner_id = UserId(caller.user.id)
        record = empty_invoice_record(owner_id)
        record["id"] = str(uuid.uuid4())
        row = await self.repo.create(record)
        logger.info(
            f"Invoice {row.id} created",
            extra={"invoice_id": row.id, "user_id": owner_id},
        )
        return to_invoice_detail(row)

    async def _authorize(self, invoice_id: str, owner_id: UserId) -> InvoiceId:
        row = await self._find_owned(invoice_id, owner_id)
        return InvoiceId(row.id)

    async def _find_owned(self, invoice_id: str, owner_id: UserId) -> InvoiceLike:
        if not invoice_id or not invoice_id.strip():
            raise InvoiceValidationError(
                "Invoice id must not be empty", "invoice_id",
                ErrorContext(user_id=owner_id),
            )
        try:
            return await self.repo.find_owned_or_fail(InvoiceId(invoice_id), owner_id)
        except ResourceNotFoundError:
            logger.warning(
                f"Ownership check failed for invoice {invoice_id}",
                extra={"invoice_id": invoice_id, "user_id": owner_id},
            )
            raise

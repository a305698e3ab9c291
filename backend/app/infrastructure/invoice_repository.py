"""SQL Invoice Repository — SQLAlchemy implementation of core InvoiceRepository.

Invariants:
    - find_owned_or_fail matches on id AND user_id in one query; absence and
      foreign ownership are indistinguishable to the caller (both 404)
    - Every write method commits exactly once
    - upsert writes the same record on both branches (no field diffing)

Design Decisions:
    - Session-level get + setattr over dialect INSERT .. ON CONFLICT: works on
      PostgreSQL and the SQLite test database alike
    - Errors are not caught here; the session manager maps them to DatabaseError
"""

import logging

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import InvoiceId, UserId
from app.core.errors import ErrorContext, ResourceNotFoundError
from app.models.invoice import Invoice

logger = logging.getLogger(__name__)


class SqlInvoiceRepository:
    """Invoice persistence over an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_owned_or_fail(
        self, invoice_id: InvoiceId, owner_id: UserId,
    ) -> Invoice:
        result = await self.db.execute(
            select(Invoice)
            .where(Invoice.id == invoice_id)
            .where(Invoice.user_id == owner_id)
        )
        invoice = result.scalar_one_or_none()
        if invoice is None:
            raise ResourceNotFoundError(
                "Invoice", invoice_id,
                ErrorContext(invoice_id=invoice_id, user_id=owner_id),
            )
        return invoice

    async def upsert(self, invoice_id: InvoiceId, record: dict) -> None:
        invoice = await self.db.get(Invoice, invoice_id)
        if invoice is None:
            logger.debug(
                "Invoice row absent at write time, inserting",
                extra={"invoice_id": invoice_id},
            )
            self.db.add(Invoice(id=invoice_id, **record))
        else:
            for name, value in record.items():
                setattr(invoice, name, value)
        await self.db.commit()

    async def update_fields(self, invoice_id: InvoiceId, fields: dict) -> None:
        await self.db.execute(
            update(Invoice).where(Invoice.id == invoice_id).values(**fields),
        )
        await self.db.commit()

    async def create(self, record: dict) -> Invoice:
        invoice = Invoice(**record)
        self.db.add(invoice)
        await self.db.commit()
        await self.db.refresh(invoice)
        return invoice

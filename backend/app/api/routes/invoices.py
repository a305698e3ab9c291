"""Invoice Routes — HTTP surface for the invoice detail page.

Invariants:
    - Every route resolves the caller before touching the database
    - Mutations return 204 with no body on success
    - Not-owned and nonexistent invoices are both 404 (raised by the repository)
"""

import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.auth import get_caller_context
from app.infrastructure.database import get_db
from app.infrastructure.invoice_repository import SqlInvoiceRepository
from app.schemas.invoice import CallerContext, InvoiceDetail, SaveInvoiceRequest
from app.services.invoice_actions import InvoiceActions

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/invoices", tags=["invoices"])


def get_invoice_actions(db: AsyncSession = Depends(get_db)) -> InvoiceActions:
    return InvoiceActions(SqlInvoiceRepository(db))


@router.post(
    "", response_model=InvoiceDetail, status_code=status.HTTP_201_CREATED,
)
async def create_invoice(
    caller: CallerContext = Depends(get_caller_context),
    actions: InvoiceActions = Depends(get_invoice_actions),
):
    """Create an empty draft invoice for the caller."""
    return await actions.create_invoice(caller)


@router.get("/{invoice_id}", response_model=InvoiceDetail)
async def get_invoice(
    invoice_id: str,
    caller: CallerContext = Depends(get_caller_context),
    actions: InvoiceActions = Depends(get_invoice_actions),
):
    return await actions.get_invoice(invoice_id, caller)


@router.put("/{invoice_id}", status_code=status.HTTP_204_NO_CONTENT)
async def save_invoice(
    invoice_id: str,
    body: SaveInvoiceRequest,
    caller: CallerContext = Depends(get_caller_context),
    actions: InvoiceActions = Depends(get_invoice_actions),
):
    """Save invoice fields, line items, taxes and labels."""
    await actions.save_invoice(
        invoice_id, body.invoice, body.items, body.taxes, caller,
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{invoice_id}/logo", status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_logo(
    invoice_id: str,
    caller: CallerContext = Depends(get_caller_context),
    actions: InvoiceActions = Depends(get_invoice_actions),
):
    """Clear the supplier logo on an invoice."""
    await actions.delete_logo(invoice_id, caller)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

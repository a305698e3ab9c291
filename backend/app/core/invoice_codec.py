"""Invoice Codec — converts between structured invoice input and the persisted record.

Invariants:
    - items, taxes and labels are always persisted as JSON text
    - decode_structured_fields(encode_invoice_record(...)) returns the original values
    - Ownership (user_id) comes from the caller, never from the client payload
    - Pure functions: no IO, no DB

Design Decisions:
    - Pydantic TypeAdapter for both directions: one schema drives encode and
      decode, so the text format cannot drift between them
"""

from typing import Iterable

from pydantic import TypeAdapter

from app.core.domain_types import STRUCTURED_FIELDS, UserId
from app.schemas.invoice import InvoiceFields, InvoiceItem, InvoiceTaxes, InvoiceDetail

_ITEMS = TypeAdapter(list[InvoiceItem])
_TAXES = TypeAdapter(list[InvoiceTaxes])
_LABELS = TypeAdapter(list[str])


def encode_items(items: Iterable[InvoiceItem]) -> str:
    return _ITEMS.dump_json(list(items)).decode()


def encode_taxes(taxes: Iterable[InvoiceTaxes]) -> str:
    return _TAXES.dump_json(list(taxes)).decode()


def encode_labels(labels: Iterable[str]) -> str:
    return _LABELS.dump_json(list(labels)).decode()


def encode_invoice_record(
    fields: InvoiceFields,
    items: Iterable[InvoiceItem],
    taxes: Iterable[InvoiceTaxes],
    owner_id: UserId,
) -> dict:
    """Build the full persistable record for an upsert.

    The same dict is used for both the create and the update branch.
    """
    record = fields.model_dump(exclude={"labels"})
    record["user_id"] = owner_id
    record["items"] = encode_items(items)
    record["taxes"] = encode_taxes(taxes)
    record["labels"] = encode_labels(fields.labels)
    return record


def empty_invoice_record(owner_id: UserId) -> dict:
    """Record for a brand-new draft invoice."""
    return encode_invoice_record(InvoiceFields(), [], [], owner_id)


def decode_structured_fields(row) -> dict:
    """Deserialize the text columns of a stored invoice row."""
    return {
        "items": _ITEMS.validate_json(row.items or "[]"),
        "taxes": _TAXES.validate_json(row.taxes or "[]"),
        "labels": _LABELS.validate_json(row.labels or "[]"),
    }


def to_invoice_detail(row) -> InvoiceDetail:
    """Map a stored invoice row to the public read model."""
    scalars = {
        name: getattr(row, name)
        for name in InvoiceFields.model_fields
        if name not in STRUCTURED_FIELDS
    }
    return InvoiceDetail(id=row.id, **scalars, **decode_structured_fields(row))

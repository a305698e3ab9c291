"""Invoice Schemas — boundary validation for invoice input and caller identity.

Invariants:
    - InvoiceFields drops ownership, items and taxes keys
    - Status dumps as plain str
    - CallerUser.id is stripped and must be non-empty
"""

import pytest
from pydantic import ValidationError

from app.schemas.invoice import (
    CallerContext,
    InvoiceFields,
    InvoiceItem,
    InvoiceTaxes,
    SaveInvoiceRequest,
)


def test_invoice_fields_ignore_foreign_keys():
    fields = InvoiceFields.model_validate(
        {"user_id": "u2", "items": "[]", "taxes": "[]", "number": "1"},
    )
    dumped = fields.model_dump()

    assert "user_id" not in dumped
    assert "items" not in dumped
    assert dumped["number"] == "1"


def test_status_dumps_as_plain_string():
    assert InvoiceFields(status="final").model_dump()["status"] == "final"


def test_unknown_status_rejected():
    with pytest.raises(ValidationError):
        InvoiceFields(status="paid")


def test_labels_default_to_empty_list():
    assert InvoiceFields().labels == []


def test_credit_line_quantity_accepted():
    assert InvoiceItem(quantity=-1, price=50).quantity == -1


def test_item_keeps_unknown_keys():
    raw = {"id": "line-1", "description": "Consulting", "quantity": 2.0, "price": 10.0, "unit": "h"}
    assert InvoiceItem.model_validate(raw).model_dump() == raw


def test_tax_keeps_unknown_keys():
    raw = {"description": "VAT", "amount": 20.0, "rate": 0.2}
    assert InvoiceTaxes.model_validate(raw).model_dump() == raw


def test_non_numeric_quantity_rejected():
    with pytest.raises(ValidationError):
        InvoiceItem(quantity="lots")


def test_save_request_defaults_items_and_taxes():
    req = SaveInvoiceRequest.model_validate({"invoice": {}})
    assert req.items == []
    assert req.taxes == []


def test_caller_id_is_stripped():
    assert CallerContext.for_user("  u1 ").user.id == "u1"


def test_blank_caller_id_rejected():
    with pytest.raises(ValidationError):
        CallerContext.for_user("   ")


def test_caller_context_ignores_other_shape():
    ctx = CallerContext.model_validate(
        {"user": {"id": "u1", "role": "admin"}, "session": "abc"},
    )
    assert ctx.model_dump() == {"user": {"id": "u1"}}

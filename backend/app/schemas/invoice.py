"""Invoice Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - InvoiceFields never carries ownership, items or taxes (extra keys ignored)
    - CallerContext exposes only user.id, stripped and non-empty
    - InvoiceItem / InvoiceTaxes are opaque list elements: unknown keys are kept
      and no sign rules apply (credit lines carry negative quantities)

Design Decisions:
    - items and taxes travel beside the invoice, not inside it: they are stored
      as serialized text and the actions encode them separately
    - use_enum_values on InvoiceFields: status dumps as plain str for the String column
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.domain_types import InvoiceStatus


class InvoiceItem(BaseModel):
    """A single invoice line."""
    model_config = ConfigDict(extra="allow")

    description: str = Field("", max_length=2000)
    quantity: float = 1
    price: float = 0


class InvoiceTaxes(BaseModel):
    """A tax entry applied on top of the invoice lines."""
    model_config = ConfigDict(extra="allow")

    description: str = Field("", max_length=500)
    amount: float = 0


class InvoiceFields(BaseModel):
    """Scalar invoice attributes plus labels, as edited on the detail page."""
    model_config = ConfigDict(extra="ignore", use_enum_values=True)

    number: str = Field("", max_length=64)
    invoice_date: date | None = None
    status: InvoiceStatus = InvoiceStatus.DRAFT
    supplier_name: str = Field("", max_length=500)
    supplier_contact: str = Field("", max_length=2000)
    supplier_logo: str | None = Field(None, max_length=2000)
    customer: str = Field("", max_length=2000)
    notes_a: str = Field("", max_length=5000)
    notes_b: str = Field("", max_length=5000)
    currency: str = Field("$", max_length=10)
    labels: list[str] = Field(default_factory=list)


class SaveInvoiceRequest(BaseModel):
    """Body of PUT /invoices/{invoice_id}."""
    invoice: InvoiceFields
    items: list[InvoiceItem] = Field(default_factory=list)
    taxes: list[InvoiceTaxes] = Field(default_factory=list)


class CallerUser(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str = Field(min_length=1, max_length=255)

    @field_validator("id", mode="before")
    @classmethod
    def strip_id(cls, v):
        if isinstance(v, str):
            v = v.strip()
        return v


class CallerContext(BaseModel):
    """Authenticated identity of the requester. Only user.id is consumed."""
    model_config = ConfigDict(extra="ignore")

    user: CallerUser

    @classmethod
    def for_user(cls, user_id: str) -> "CallerContext":
        return cls(user=CallerUser(id=user_id))


class InvoiceDetail(InvoiceFields):
    """Invoice read model — stored row with structured fields decoded."""
    id: str
    items: list[InvoiceItem] = Field(default_factory=list)
    taxes: list[InvoiceTaxes] = Field(default_factory=list)

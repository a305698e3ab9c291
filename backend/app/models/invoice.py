"""Invoice ORM — persists one invoice with its serialized line items, taxes and labels.

Invariants:
    - id is an opaque string primary key (client-visible, never parsed)
    - user_id is the ownership field; every mutation filters on it first
    - items, taxes, labels are JSON text, never NULL ('[]' when empty)
    - supplier_logo is nullable: cleared by the delete-logo action only

Design Decisions:
    - Text columns over JSON columns for structured fields: the stored form is the
      serialized text and the codec owns both directions
    - No updated_at: re-saving an identical payload leaves an identical row
"""

from datetime import date, datetime, timezone

from sqlalchemy import String, Text, Date, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Invoice(Base):
    """Invoice row — owned by exactly one user."""
    __tablename__ = "invoices"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    user_id: Mapped[str] = mapped_column(
        String(255), nullable=False, index=True,
    )
    number: Mapped[str] = mapped_column(String(64), nullable=False, default="")
    invoice_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="draft",
    )
    supplier_name: Mapped[str] = mapped_column(Text, nullable=False, default="")
    supplier_contact: Mapped[str] = mapped_column(Text, nullable=False, default="")
    supplier_logo: Mapped[str | None] = mapped_column(Text, nullable=True)
    customer: Mapped[str] = mapped_column(Text, nullable=False, default="")
    notes_a: Mapped[str] = mapped_column(Text, nullable=False, default="")
    notes_b: Mapped[str] = mapped_column(Text, nullable=False, default="")
    currency: Mapped[str] = mapped_column(String(10), nullable=False, default="$")
    items: Mapped[str] = mapped_column(Text, nullable=False, default="[]")
    taxes: Mapped[str] = mapped_column(Text, nullable=False, default="[]")
    labels: Mapped[str] = mapped_column(Text, nullable=False, default="[]")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

"""Create invoices table.

Revision ID: 001_create_invoices
Revises: None
Create Date: 2026-10-16

Structured fields (items, taxes, labels) are JSON text columns.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_create_invoices"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "invoices",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column("number", sa.String(64), nullable=False, server_default=""),
        sa.Column("invoice_date", sa.Date, nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="draft"),
        sa.Column("supplier_name", sa.Text, nullable=False, server_default=""),
        sa.Column("supplier_contact", sa.Text, nullable=False, server_default=""),
        sa.Column("supplier_logo", sa.Text, nullable=True),
        sa.Column("customer", sa.Text, nullable=False, server_default=""),
        sa.Column("notes_a", sa.Text, nullable=False, server_default=""),
        sa.Column("notes_b", sa.Text, nullable=False, server_default=""),
        sa.Column("currency", sa.String(10), nullable=False, server_default="$"),
        sa.Column("items", sa.Text, nullable=False, server_default="[]"),
        sa.Column("taxes", sa.Text, nullable=False, server_default="[]"),
        sa.Column("labels", sa.Text, nullable=False, server_default="[]"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_invoices_user_id", "invoices", ["user_id"])


def downgrade() -> None:
    op.drop_index("ix_invoices_user_id", table_name="invoices")
    op.drop_table("invoices")

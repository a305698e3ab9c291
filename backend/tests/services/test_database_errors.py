"""Database Errors — session manager maps store failures to DatabaseError.

Invariants:
    - IntegrityError inside a managed session surfaces as DatabaseError (503)
    - The failed session is rolled back; earlier committed rows survive
"""

import pytest
from sqlalchemy import select

from app.core.errors import DatabaseError
from app.models.invoice import Invoice


async def test_integrity_error_maps_to_database_error(fake_manager):
    with pytest.raises(DatabaseError) as exc_info:
        async with fake_manager.session() as db:
            db.add(Invoice(id="broken", user_id=None))
            await db.commit()

    assert exc_info.value.http_status == 503
    assert exc_info.value.operation == "commit"


async def test_duplicate_id_create_maps_to_database_error(fake_manager, seed_invoices):
    with pytest.raises(DatabaseError):
        async with fake_manager.session() as db:
            db.add(Invoice(id="inv1", user_id="u3"))
            await db.commit()

    async with fake_manager.session() as db:
        result = await db.execute(select(Invoice.user_id).where(Invoice.id == "inv1"))
        assert result.scalar_one() == "u1"


async def test_health_check_reports_healthy(fake_manager):
    assert await fake_manager.health_check() is True

"""Database Session Manager — health check and SQLAlchemy error mapping.

Invariants:
    - SQLAlchemy failures inside session() surface as DatabaseError with an operation tag
    - Non-database exceptions propagate unchanged after rollback
    - health_check() never raises: unreachable servers report False
    - get_db() yields sessions from the singleton and refuses to run uninitialized
"""

import pytest
from sqlalchemy import text

from eventsproject.core.errors import DatabaseError, ResourceNotFoundError
from eventsproject.infrastructure import database as db_module
from eventsproject.infrastructure.database import DatabaseSessionManager, get_db, init_db

_INSERT = text(
    "INSERT INTO participants (id, last_name, first_name, role) "
    "VALUES (1, 'Tounsi', 'Ahmed', 'organisateur')",
)


async def test_health_check_succeeds_on_sqlite(db_manager):
    assert await db_manager.health_check() is True


async def test_integrity_error_maps_to_database_error(db_manager):
    with pytest.raises(DatabaseError) as exc_info:
        async with db_manager.session() as db:
            await db.execute(_INSERT)
            await db.execute(_INSERT)
    assert exc_info.value.operation == "commit"
    assert exc_info.value.code == "DATABASE_ERROR"


async def test_operational_error_maps_to_database_error(db_manager):
    with pytest.raises(DatabaseError) as exc_info:
        async with db_manager.session() as db:
            await db.execute(text("SELECT * FROM missing_table"))
    assert exc_info.value.operation == "execute"


async def test_domain_errors_propagate_unchanged(db_manager):
    with pytest.raises(ResourceNotFoundError):
        async with db_manager.session():
            raise ResourceNotFoundError("Event", "Tech Day")


async def test_failed_session_is_rolled_back(db_manager):
    with pytest.raises(ResourceNotFoundError):
        async with db_manager.session() as db:
            await db.execute(_INSERT)
            raise ResourceNotFoundError("Event", "Tech Day")

    async with db_manager.session() as db:
        result = await db.execute(text("SELECT COUNT(*) FROM participants"))
        assert result.scalar_one() == 0


async def test_init_db_sets_singleton(monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    manager = init_db("sqlite+aiosqlite:///:memory:")
    try:
        assert isinstance(manager, DatabaseSessionManager)
        assert db_module.db_manager is manager
    finally:
        await manager.dispose()


async def test_health_check_returns_false_when_server_unreachable():
    manager = DatabaseSessionManager("postgresql+asyncpg://u:p@127.0.0.1:1/events")
    try:
        assert await manager.health_check() is False
    finally:
        await manager.dispose()


async def test_get_db_requires_initialized_manager(monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    with pytest.raises(RuntimeError, match="Database not initialized"):
        await get_db().__anext__()


async def test_get_db_yields_session_from_singleton(monkeypatch, db_manager):
    monkeypatch.setattr(db_module, "db_manager", db_manager)
    async for db in get_db():
        result = await db.execute(text("SELECT 1"))
        assert result.scalar_one() == 1

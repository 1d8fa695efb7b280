"""Infrastructure test fixtures — in-memory SQLite session manager per test.

Invariants:
    - Every test gets a fresh in-memory SQLite database with all tables created
    - new_uow() opens an independent session, so reads bypass the writer's identity map

Design Decisions:
    - SQLite in-memory via aiosqlite: fast, no external dependency, same async code path
"""

from contextlib import asynccontextmanager

import pytest

from eventsproject.infrastructure.database import DatabaseSessionManager
from eventsproject.infrastructure.sql_repositories import SqlUnitOfWork


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    await manager.create_all()
    yield manager
    await manager.dispose()


@pytest.fixture
def new_uow(db_manager):
    """Factory for units of work on independent sessions."""
    @asynccontextmanager
    async def _open():
        async with db_manager.session() as session:
            yield SqlUnitOfWork(session)
    return _open

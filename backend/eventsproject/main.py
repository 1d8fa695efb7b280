"""Event Engine Entry Point — wiring of settings, logging, database and services.

Invariants:
    - Logging configured once, before the database is touched
    - One SqlUnitOfWork per unit of work; commit only after the service call returns
    - Failures propagate: a failed recompute rolls back and exits non-zero

Design Decisions:
    - lifespan() async context manager owns startup/shutdown, like an ASGI lifespan
    - build_services() is the only place EventServices meets concrete repositories
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from eventsproject.config import Settings, get_settings
from eventsproject.core.entities import Event
from eventsproject.infrastructure.database import DatabaseSessionManager, init_db
from eventsproject.infrastructure.observability import setup_logging
from eventsproject.infrastructure.sql_repositories import SqlUnitOfWork
from eventsproject.services.event_services import EventServices

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(
    settings: Settings | None = None,
) -> AsyncGenerator[DatabaseSessionManager, None]:
    """Startup/shutdown lifecycle."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(settings.database_url, echo=settings.database_echo)
    await manager.create_all()
    logger.info("Event engine started")
    try:
        yield manager
    finally:
        await manager.dispose()
        logger.info("Event engine shutting down")


def build_services(uow: SqlUnitOfWork, settings: Settings | None = None) -> EventServices:
    """Wire EventServices onto the repositories of one unit of work."""
    settings = settings or get_settings()
    return EventServices(
        uow.events, uow.participants, uow.logistics,
        default_organizer=settings.organizer,
    )


async def recompute_costs_once(settings: Settings | None = None) -> list[Event]:
    """Run one cost recompute pass for the configured organizer and commit it."""
    settings = settings or get_settings()
    async with lifespan(settings) as manager:
        async with manager.session() as session:
            uow = SqlUnitOfWork(session)
            updated = await build_services(uow, settings).recompute_costs()
            await uow.commit()
    logger.info(f"Recomputed cost of {len(updated)} event(s)")
    return updated


if __name__ == "__main__":
    asyncio.run(recompute_costs_once())

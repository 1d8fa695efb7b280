"""Entry Point — one-shot recompute against a file-backed SQLite database."""

from eventsproject.config import Settings
from eventsproject.core.domain_types import Role
from eventsproject.core.entities import Event, Logistics, Participant
from eventsproject.infrastructure.database import DatabaseSessionManager
from eventsproject.infrastructure.sql_repositories import SqlUnitOfWork
from eventsproject.main import recompute_costs_once


async def test_recompute_costs_once_commits_costs(tmp_path):
    url = f"sqlite+aiosqlite:///{tmp_path / 'events.db'}"
    seed = DatabaseSessionManager(url)
    await seed.create_all()
    async with seed.session() as session:
        uow = SqlUnitOfWork(session)
        event = await uow.events.save(Event(
            description="Tech Day",
            participants={Participant(
                last_name="Tounsi", first_name="Ahmed", role=Role.ORGANISATEUR,
            )},
            logistics={
                Logistics(reserved=True, unit_price=15.0, quantity=3),
                Logistics(reserved=False, unit_price=4.0, quantity=1),
            },
        ))
        await uow.commit()
    await seed.dispose()

    updated = await recompute_costs_once(
        Settings(database_url=url, log_format="text"),
    )
    assert [e.cost for e in updated] == [45.0]

    check = DatabaseSessionManager(url)
    async with check.session() as session:
        loaded = await SqlUnitOfWork(session).events.find_by_id(event.id)
    await check.dispose()
    assert loaded.cost == 45.0

"""SQL Repositories — SQLAlchemy async implementations of the repository protocols.

Invariants:
    - One SqlUnitOfWork per AsyncSession; its three repositories share one identity map
    - Loading the same row twice in a unit of work returns the same domain object
    - Loaded events map empty link collections to None (absent set)
    - Loaded participants have events=None (populated by the engine, never by the store)
    - save() flushes, so new entities carry their id on return
    - Saving a logistics item links it to every tracked event whose set contains it

Design Decisions:
    - Domain dataclasses <-> ORM rows mapped here, core never sees SQLAlchemy
    - Identity map keyed by the domain object itself (entities hash by identity)
    - commit() is explicit: callers own the transaction boundary
"""

import logging
from datetime import date

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from eventsproject.core.domain_types import Role
from eventsproject.core.entities import Event, Logistics, Participant
from eventsproject.models import (
    Event as EventModel,
    Logistics as LogisticsModel,
    Participant as ParticipantModel,
)

logger = logging.getLogger(__name__)


class _IdentityMap:
    """Bidirectional map between domain objects and ORM rows for one session."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self._rows: dict[object, object] = {}
        self._domain: dict[tuple[type, int], object] = {}
        self._pending: list[tuple[object, object]] = []

    def remember(self, entity, row) -> None:
        self._rows[entity] = row
        self._domain[(type(row), row.id)] = entity

    def row_for(self, entity):
        return self._rows.get(entity)

    def tracked_events(self) -> list[Event]:
        return [e for e in self._rows if isinstance(e, Event)]

    # ─── Row -> domain ──────────────────────────────────────────

    def logistics_from_row(self, row: LogisticsModel) -> Logistics:
        cached = self._domain.get((LogisticsModel, row.id))
        if cached is not None:
            return cached
        item = Logistics(
            id=row.id, description=row.description, reserved=row.reserved,
            unit_price=row.unit_price, quantity=row.quantity,
        )
        self.remember(item, row)
        return item

    def participant_from_row(self, row: ParticipantModel) -> Participant:
        cached = self._domain.get((ParticipantModel, row.id))
        if cached is not None:
            return cached
        participant = Participant(
            id=row.id, last_name=row.last_name, first_name=row.first_name,
            role=Role(row.role),
        )
        self.remember(participant, row)
        return participant

    def event_from_row(self, row: EventModel) -> Event:
        cached = self._domain.get((EventModel, row.id))
        if cached is not None:
            return cached
        event = Event(
            id=row.id, description=row.description,
            start_date=row.start_date, end_date=row.end_date, cost=row.cost,
        )
        if row.participants:
            event.participants = {self.participant_from_row(p) for p in row.participants}
        if row.logistics:
            event.logistics = {self.logistics_from_row(item) for item in row.logistics}
        self.remember(event, row)
        return event

    # ─── Domain -> row ──────────────────────────────────────────

    async def _existing_row(self, entity, model: type):
        row = self._rows.get(entity)
        if row is None and entity.id is not None:
            row = await self.session.get(model, entity.id)
        return row

    def _new_row(self, entity, row):
        self.session.add(row)
        self._pending.append((entity, row))
        return row

    async def logistics_row(self, item: Logistics, overwrite: bool) -> LogisticsModel:
        row = await self._existing_row(item, LogisticsModel)
        if row is None:
            row = self._new_row(item, LogisticsModel(id=item.id))
            overwrite = True
        if overwrite:
            row.description = item.description
            row.reserved = item.reserved
            row.unit_price = item.unit_price
            row.quantity = item.quantity
        return row

    async def participant_row(
        self, participant: Participant, overwrite: bool,
    ) -> ParticipantModel:
        row = await self._existing_row(participant, ParticipantModel)
        if row is None:
            row = self._new_row(participant, ParticipantModel(id=participant.id))
            overwrite = True
        if overwrite:
            row.last_name = participant.last_name
            row.first_name = participant.first_name
            row.role = participant.role.value
        return row

    async def event_row(self, event: Event) -> EventModel:
        row = await self._existing_row(event, EventModel)
        if row is None:
            row = self._new_row(
                event, EventModel(id=event.id, participants=set(), logistics=set()),
            )
        row.description = event.description
        row.start_date = event.start_date
        row.end_date = event.end_date
        row.cost = event.cost
        row.participants = {
            await self.participant_row(p, overwrite=False)
            for p in (event.participants or ())
        }
        row.logistics = {
            await self.logistics_row(item, overwrite=False)
            for item in (event.logistics or ())
        }
        return row

    async def flush(self) -> None:
        """Flush pending rows and copy generated ids back onto their entities."""
        await self.session.flush()
        for entity, row in self._pending:
            entity.id = row.id
            self.remember(entity, row)
        self._pending.clear()


class SqlParticipantRepository:
    """Participant store over the participants table."""

    def __init__(self, identity_map: _IdentityMap):
        self._map = identity_map

    async def find_by_id(self, participant_id: int) -> Participant | None:
        row = await self._map.session.get(ParticipantModel, participant_id)
        return self._map.participant_from_row(row) if row else None

    async def save(self, participant: Participant) -> Participant:
        row = await self._map.participant_row(participant, overwrite=True)
        await self._map.flush()
        self._map.remember(participant, row)
        # Events already persisted pick up the link
        for event in participant.events or ():
            event_row = self._map.row_for(event)
            if event_row is not None:
                event_row.participants.add(row)
        await self._map.flush()
        return participant


class SqlLogisticsRepository:
    """Logistics store over the logistics table."""

    def __init__(self, identity_map: _IdentityMap):
        self._map = identity_map

    async def find_by_id(self, logistics_id: int) -> Logistics | None:
        row = await self._map.session.get(LogisticsModel, logistics_id)
        return self._map.logistics_from_row(row) if row else None

    async def save(self, logistics: Logistics) -> Logistics:
        row = await self._map.logistics_row(logistics, overwrite=True)
        await self._map.flush()
        self._map.remember(logistics, row)
        for event in self._map.tracked_events():
            if event.logistics and logistics in event.logistics:
                self._map.row_for(event).logistics.add(row)
                logger.debug(
                    "Linked logistics row to tracked event",
                    extra={"event_id": event.id, "logistics_id": logistics.id},
                )
        await self._map.flush()
        return logistics


class SqlEventRepository:
    """Event store over the events table and its link tables."""

    def __init__(self, identity_map: _IdentityMap):
        self._map = identity_map

    async def find_by_id(self, event_id: int) -> Event | None:
        row = await self._map.session.get(EventModel, event_id)
        return self._map.event_from_row(row) if row else None

    async def find_by_description(self, description: str) -> Event | None:
        result = await self._map.session.execute(
            select(EventModel)
            .where(EventModel.description == description)
            .order_by(EventModel.id)
            .limit(1),
        )
        row = result.scalar_one_or_none()
        return self._map.event_from_row(row) if row else None

    async def find_by_start_date_between(
        self, start: date, end: date,
    ) -> list[Event]:
        result = await self._map.session.execute(
            select(EventModel)
            .where(EventModel.start_date.between(start, end))
            .order_by(EventModel.id),
        )
        return [self._map.event_from_row(row) for row in result.scalars()]

    async def find_by_participant(
        self, last_name: str, first_name: str, role: Role,
    ) -> list[Event]:
        result = await self._map.session.execute(
            select(EventModel)
            .join(EventModel.participants)
            .where(ParticipantModel.last_name == last_name)
            .where(ParticipantModel.first_name == first_name)
            .where(ParticipantModel.role == role.value)
            .order_by(EventModel.id),
        )
        return [self._map.event_from_row(row) for row in result.scalars().unique()]

    async def save(self, event: Event) -> Event:
        row = await self._map.event_row(event)
        await self._map.flush()
        self._map.remember(event, row)
        return event


class SqlUnitOfWork:
    """Groups the three SQL repositories over a single AsyncSession."""

    def __init__(self, session: AsyncSession):
        self.session = session
        identity_map = _IdentityMap(session)
        self.events = SqlEventRepository(identity_map)
        self.participants = SqlParticipantRepository(identity_map)
        self.logistics = SqlLogisticsRepository(identity_map)

    async def commit(self) -> None:
        await self.session.commit()

"""In-Memory Repositories — dict-backed implementations of the repository protocols.

Invariants:
    - save() assigns the next integer id when the entity has none
    - Stored objects are the caller's objects (no copies), so mutations are visible
    - List lookups return entities ordered by id

Design Decisions:
    - Shared _InMemoryStore base: one id sequence and dict per entity type
    - Used by tests and scripts; the SQL adapter is the production path
"""

from datetime import date
from typing import Generic, TypeVar

from eventsproject.core.domain_types import Role
from eventsproject.core.entities import Event, Logistics, Participant

T = TypeVar("T", Event, Participant, Logistics)


class _InMemoryStore(Generic[T]):
    """Id-keyed dict with a monotonically increasing id sequence."""

    def __init__(self):
        self._rows: dict[int, T] = {}
        self._next_id = 1

    async def find_by_id(self, entity_id: int) -> T | None:
        return self._rows.get(entity_id)

    async def save(self, entity: T) -> T:
        if entity.id is None:
            entity.id = self._next_id
        self._next_id = max(self._next_id, entity.id + 1)
        self._rows[entity.id] = entity
        return entity

    def all(self) -> list[T]:
        return [self._rows[k] for k in sorted(self._rows)]


class InMemoryParticipantRepository(_InMemoryStore[Participant]):
    """Participant store."""


class InMemoryLogisticsRepository(_InMemoryStore[Logistics]):
    """Logistics store."""


class InMemoryEventRepository(_InMemoryStore[Event]):
    """Event store with description, date-range and participant lookups."""

    async def find_by_description(self, description: str) -> Event | None:
        return next(
            (e for e in self.all() if e.description == description), None,
        )

    async def find_by_start_date_between(
        self, start: date, end: date,
    ) -> list[Event]:
        return [
            e for e in self.all()
            if e.start_date is not None and start <= e.start_date <= end
        ]

    async def find_by_participant(
        self, last_name: str, first_name: str, role: Role,
    ) -> list[Event]:
        return [
            e for e in self.all()
            if any(
                p.last_name == last_name
                and p.first_name == first_name
                and p.role == role
                for p in (e.participants or ())
            )
        ]

"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Single lookups return the entity or None; list lookups return a (possibly empty) list
    - save() assigns an id when the entity has none and returns the stored entity

Design Decisions:
    - Protocol over ABC: structural subtyping, in-memory and SQL adapters need no common base
    - Async in Protocol: boundary methods are async because implementations do IO,
      but core pure functions are never async themselves; EventServices
      orchestrates the async calls around the pure logic
"""

from datetime import date
from typing import Protocol

from eventsproject.core.domain_types import EventId, LogisticsId, ParticipantId, Role
from eventsproject.core.entities import Event, Logistics, Participant


class ParticipantRepository(Protocol):
    """Contract for participant persistence — implemented by shell."""
    async def find_by_id(self, participant_id: ParticipantId) -> Participant | None: ...
    async def save(self, participant: Participant) -> Participant: ...


class EventRepository(Protocol):
    """Contract for event persistence — implemented by shell."""
    async def find_by_id(self, event_id: EventId) -> Event | None: ...
    async def find_by_description(self, description: str) -> Event | None: ...
    async def find_by_start_date_between(
        self, start: date, end: date,
    ) -> list[Event]: ...
    async def find_by_participant(
        self, last_name: str, first_name: str, role: Role,
    ) -> list[Event]: ...
    async def save(self, event: Event) -> Event: ...


class LogisticsRepository(Protocol):
    """Contract for logistics persistence — implemented by shell."""
    async def find_by_id(self, logistics_id: LogisticsId) -> Logistics | None: ...
    async def save(self, logistics: Logistics) -> Logistics: ...

"""Event Services — participant/logistics linking and reserved-cost aggregation.

Invariants:
    - Linking lookups that find nothing raise ResourceNotFoundError (never swallowed)
    - link_participant / link_participants_of_event save the event exactly once
    - link_logistics saves the event only when it had to allocate the logistics set
    - recompute_costs saves each organizer event once, cost from reserved items only
    - reserved_logistics_in_range returns None if an in-range event has no logistics

Design Decisions:
    - Repositories injected as Protocols: in-memory fakes in tests, SQL adapter in prod
    - Pure rules live in core/logistics_costing.py; this class only sequences IO
    - organizer defaults to Settings.organizer, overridable per call
"""

import logging
from datetime import date

from eventsproject.config import get_settings
from eventsproject.core.domain_types import ParticipantId
from eventsproject.core.entities import Event, Logistics, OrganizerIdentity, Participant
from eventsproject.core.errors import ResourceNotFoundError
from eventsproject.core.logistics_costing import (
    collect_reserved_logistics, compute_event_cost,
)
from eventsproject.core.repository_protocols import (
    EventRepository, LogisticsRepository, ParticipantRepository,
)

logger = logging.getLogger(__name__)


class EventServices:
    """Affects participants and logistics to events and keeps event costs current."""

    def __init__(
        self,
        events: EventRepository,
        participants: ParticipantRepository,
        logistics: LogisticsRepository,
        default_organizer: OrganizerIdentity | None = None,
    ):
        self.events = events
        self.participants = participants
        self.logistics = logistics
        self.default_organizer = default_organizer

    async def add_participant(self, participant: Participant) -> Participant:
        """Persist a participant and return the stored instance."""
        saved = await self.participants.save(participant)
        logger.info("Participant saved", extra={"participant_id": saved.id})
        return saved

    async def link_participant(self, event: Event, participant_id: ParticipantId) -> Event:
        """Affect the participant with this id to the event, then save the event.

        The participant is also mirrored into event.participants, so saving the
        event persists the link (the SQL adapter stores links from the event side).
        """
        participant = await self._get_participant_or_raise(participant_id)
        participant.ensure_events().add(event)
        event.ensure_participants().add(participant)
        saved = await self.events.save(event)
        logger.info(
            "Participant linked to event",
            extra={"event_id": saved.id, "participant_id": participant_id},
        )
        return saved

    async def link_participants_of_event(self, event: Event) -> Event:
        """Re-resolve every participant the event references and link each one."""
        for referenced in list(event.participants or ()):
            participant = await self._get_participant_or_raise(referenced.id)
            participant.ensure_events().add(event)
        saved = await self.events.save(event)
        logger.info(
            f"Linked {len(event.participants or ())} participant(s) to event",
            extra={"event_id": saved.id},
        )
        return saved

    async def link_logistics(
        self, logistics: Logistics, event_description: str,
    ) -> Logistics:
        """Affect a logistics item to the event found by description."""
        event = await self.events.find_by_description(event_description)
        if event is None:
            logger.warning(
                f"No event with description '{event_description}'",
                extra={"error_code": "RESOURCE_NOT_FOUND"},
            )
            raise ResourceNotFoundError("Event", event_description)

        # First insert allocates the set; only this branch persists the event
        if event.logistics is None:
            event.ensure_logistics()
            await self.events.save(event)
        event.logistics.add(logistics)

        saved = await self.logistics.save(logistics)
        logger.info(
            "Logistics linked to event",
            extra={"event_id": event.id, "logistics_id": saved.id},
        )
        return saved

    async def reserved_logistics_in_range(
        self, start: date, end: date,
    ) -> list[Logistics] | None:
        """Reserved logistics of events starting within [start, end].

        Returns None when any matching event has no logistics at all.
        """
        events = await self.events.find_by_start_date_between(start, end)
        result = collect_reserved_logistics(events)
        if result is None:
            logger.info(
                f"Range {start}..{end} contains an event without logistics",
                extra={"operation": "reserved_logistics_in_range"},
            )
        return result

    async def recompute_costs(
        self, organizer: OrganizerIdentity | None = None,
    ) -> list[Event]:
        """Recompute and persist the cost of every event the organizer is part of."""
        organizer = organizer or self._resolve_default_organizer()
        events = await self.events.find_by_participant(
            organizer.last_name, organizer.first_name, organizer.role,
        )
        updated = []
        for event in events:
            event.cost = compute_event_cost(event)
            updated.append(await self.events.save(event))
            logger.info(
                "Event cost recomputed",
                extra={"event_id": event.id, "cost": event.cost},
            )
        return updated

    async def _get_participant_or_raise(self, participant_id: ParticipantId) -> Participant:
        participant = await self.participants.find_by_id(participant_id)
        if participant is None:
            logger.warning(
                f"Participant {participant_id} not found",
                extra={"participant_id": participant_id, "error_code": "RESOURCE_NOT_FOUND"},
            )
            raise ResourceNotFoundError("Participant", participant_id)
        return participant

    def _resolve_default_organizer(self) -> OrganizerIdentity:
        if self.default_organizer is not None:
            return self.default_organizer
        return get_settings().organizer

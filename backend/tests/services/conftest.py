"""Service test fixtures — recording in-memory stores wired into EventServices.

Invariants:
    - Every test gets fresh, empty stores (no state shared between tests)
    - Seeding goes through the repositories' parent save(), so seeds are not recorded

Design Decisions:
    - Fixed organizer identity passed explicitly: tests never depend on env/.env
"""

import pytest

from eventsproject.core.domain_types import Role
from eventsproject.core.entities import OrganizerIdentity
from eventsproject.infrastructure.memory_repositories import (
    InMemoryEventRepository,
    InMemoryParticipantRepository,
)
from eventsproject.services.event_services import EventServices
from tests.services.fakes import (
    RecordingEventRepository,
    RecordingLogisticsRepository,
    RecordingParticipantRepository,
)

ORGANIZER = OrganizerIdentity("Tounsi", "Ahmed", Role.ORGANISATEUR)


@pytest.fixture
def event_repo():
    return RecordingEventRepository()


@pytest.fixture
def participant_repo():
    return RecordingParticipantRepository()


@pytest.fixture
def logistics_repo():
    return RecordingLogisticsRepository()


@pytest.fixture
def services(event_repo, participant_repo, logistics_repo):
    return EventServices(
        event_repo, participant_repo, logistics_repo,
        default_organizer=ORGANIZER,
    )


@pytest.fixture
def seed_participant(participant_repo):
    """Store a participant without recording the save."""
    async def _seed(participant):
        return await InMemoryParticipantRepository.save(participant_repo, participant)
    return _seed


@pytest.fixture
def seed_event(event_repo):
    """Store an event without recording the save."""
    async def _seed(event):
        return await InMemoryEventRepository.save(event_repo, event)
    return _seed

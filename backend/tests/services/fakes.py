"""Recording Fakes — in-memory repositories that log every save() call.

Invariants:
    - Behave exactly like the in-memory adapter (same lookups, same id assignment)
    - saved lists every entity passed to save(), in call order, duplicates included
    - saved_costs captures event cost at save time (later mutations do not leak)

Design Decisions:
    - Subclass the shipped adapter instead of MagicMock: lookups stay real,
      assertions target call counts like a mock would
"""

from eventsproject.infrastructure.memory_repositories import (
    InMemoryEventRepository,
    InMemoryLogisticsRepository,
    InMemoryParticipantRepository,
)


class RecordingEventRepository(InMemoryEventRepository):
    def __init__(self):
        super().__init__()
        self.saved = []
        self.saved_costs = []

    async def save(self, event):
        self.saved.append(event)
        self.saved_costs.append(event.cost)
        return await super().save(event)

    def save_count(self, event) -> int:
        return sum(1 for e in self.saved if e is event)


class RecordingParticipantRepository(InMemoryParticipantRepository):
    def __init__(self):
        super().__init__()
        self.saved = []

    async def save(self, participant):
        self.saved.append(participant)
        return await super().save(participant)


class RecordingLogisticsRepository(InMemoryLogisticsRepository):
    def __init__(self):
        super().__init__()
        self.saved = []

    async def save(self, logistics):
        self.saved.append(logistics)
        return await super().save(logistics)

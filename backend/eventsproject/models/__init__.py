"""ORM Models — SQLAlchemy declarative models for all persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Event owns the link tables; Participant and Logistics know nothing of events

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from eventsproject.models.event import Event  # noqa: F401
from eventsproject.models.participant import Participant  # noqa: F401
from eventsproject.models.logistics import Logistics  # noqa: F401

"""Association Tables — many-to-many links owned by the events table.

Invariants:
    - event_participants: (event_id, participant_id) composite primary key
    - event_logistics: a logistics item belongs to at most one event (unique logistics_id)
    - Deleting an event or an endpoint row removes the link rows

Design Decisions:
    - Plain Table objects, no association model: links carry no attributes
"""

from sqlalchemy import Column, ForeignKey, Table

from eventsproject.db.base import Base

event_participants = Table(
    "event_participants",
    Base.metadata,
    Column(
        "event_id", ForeignKey("events.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "participant_id", ForeignKey("participants.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)

event_logistics = Table(
    "event_logistics",
    Base.metadata,
    Column(
        "event_id", ForeignKey("events.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "logistics_id", ForeignKey("logistics.id", ondelete="CASCADE"),
        primary_key=True, unique=True,
    ),
)

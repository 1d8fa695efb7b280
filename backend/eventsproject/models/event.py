"""Event ORM — persists events with their participant and logistics links.

Invariants:
    - id is an autoincrement integer primary key
    - description is indexed (used as a lookup key, not unique)
    - cost defaults to 0.0 and is overwritten by each recompute

Design Decisions:
    - collection_class=set: mirrors the domain entity's set semantics
    - selectin loading on both collections: no lazy IO on an AsyncSession
    - Links navigated from Event only (no back-populated collections)
"""

from datetime import date

from sqlalchemy import Date, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from eventsproject.db.base import Base
from eventsproject.models.associations import event_logistics, event_participants


class Event(Base):
    """Event row — owns participant and logistics links."""
    __tablename__ = "events"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    description: Mapped[str] = mapped_column(
        String(255), nullable=False, default="", index=True,
    )
    start_date: Mapped[date | None] = mapped_column(Date, nullable=True, index=True)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    cost: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)

    # Relationships
    participants: Mapped[set["Participant"]] = relationship(
        "Participant", secondary=event_participants,
        collection_class=set, lazy="selectin",
    )
    logistics: Mapped[set["Logistics"]] = relationship(
        "Logistics", secondary=event_logistics,
        collection_class=set, lazy="selectin",
    )

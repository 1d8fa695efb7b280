"""Participant ORM — persists participants and their role.

Invariants:
    - role stores Role.value ("organisateur", "intervenant", "visiteur")
    - (last_name, first_name) indexed for organizer lookups
"""

from sqlalchemy import Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from eventsproject.db.base import Base


class Participant(Base):
    """Participant row."""
    __tablename__ = "participants"
    __table_args__ = (
        Index("ix_participants_full_name", "last_name", "first_name"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    first_name: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    role: Mapped[str] = mapped_column(
        String(20), nullable=False, default="visiteur",
    )

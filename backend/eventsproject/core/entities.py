"""Domain Entities — Event, Participant and Logistics as plain dataclasses.

Invariants:
    - Relationship sets start as None (absent) until the first insert
    - ensure_* methods are the only code path that allocates a relationship set
    - Identity equality and hashing (eq=False): two distinct objects are never
      the same set member, even with equal fields

Design Decisions:
    - Dataclasses, not ORM rows: core stays free of SQLAlchemy, adapters map rows
    - None vs empty set kept distinct: link_logistics observes the difference
"""

from dataclasses import dataclass
from datetime import date

from eventsproject.core.domain_types import Role


@dataclass(eq=False)
class Logistics:
    """Logistics item — contributes unit_price * quantity when reserved."""
    id: int | None = None
    description: str = ""
    reserved: bool = False
    unit_price: float = 0.0
    quantity: int = 0


@dataclass(eq=False)
class Participant:
    """Participant; the events set is populated by the engine, not the store."""
    id: int | None = None
    last_name: str = ""
    first_name: str = ""
    role: Role = Role.VISITEUR
    events: set["Event"] | None = None

    def ensure_events(self) -> set["Event"]:
        """Allocate the events set on first insert and return it."""
        if self.events is None:
            self.events = set()
        return self.events


@dataclass(eq=False)
class Event:
    """Event — owns its participant and logistics sets and a total cost."""
    id: int | None = None
    description: str = ""
    start_date: date | None = None
    end_date: date | None = None
    participants: set[Participant] | None = None
    logistics: set[Logistics] | None = None
    cost: float = 0.0

    def ensure_participants(self) -> set[Participant]:
        """Allocate the participants set on first insert and return it."""
        if self.participants is None:
            self.participants = set()
        return self.participants

    def ensure_logistics(self) -> set[Logistics]:
        """Allocate the logistics set on first insert and return it."""
        if self.logistics is None:
            self.logistics = set()
        return self.logistics


@dataclass(frozen=True)
class OrganizerIdentity:
    """Composite lookup key for the participant whose events get costed."""
    last_name: str
    first_name: str
    role: Role = Role.ORGANISATEUR

"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - EventId, ParticipantId, LogisticsId wrap store-assigned ints (None until first save)
    - Cost is a non-negative float (sum of unit_price * quantity)
    - Participant roles encoded as an Enum, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum for Role: persists as plain string column without custom type
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

EventId = NewType("EventId", int)
ParticipantId = NewType("ParticipantId", int)
LogisticsId = NewType("LogisticsId", int)


# ─── Value Types ─────────────────────────────────────────────────

Cost = NewType("Cost", float)


# ─── Enums ───────────────────────────────────────────────────────

class Role(str, Enum):
    """Part a participant plays in an event — maps to DB `role` column."""
    ORGANISATEUR = "organisateur"
    INTERVENANT = "intervenant"
    VISITEUR = "visiteur"

"""Logistics Costing — pure reserved-item filtering and cost aggregation.

Invariants:
    - Only reserved items count, both for filtering and for cost
    - Cost is recomputed from scratch on every call (never incremental)
    - An absent logistics set costs 0.0
    - collect_reserved_logistics returns None as soon as one event has no
      logistics at all, discarding what was collected so far

Design Decisions:
    - Pure functions, not Event methods: entities hold state, rules live here
    - None vs [] kept distinct in collect_reserved_logistics so callers can tell
      "short-circuited" from "nothing reserved"
"""

from collections.abc import Iterable

from eventsproject.core.domain_types import Cost
from eventsproject.core.entities import Event, Logistics


def line_cost(item: Logistics) -> float:
    """Cost contribution of a single item, ignoring its reserved flag."""
    return item.unit_price * item.quantity


def reserved_items(items: Iterable[Logistics] | None) -> list[Logistics]:
    """Keep reserved items only. Absent set yields []."""
    if items is None:
        return []
    return [item for item in items if item.reserved]


def compute_event_cost(event: Event) -> Cost:
    """Sum unit_price * quantity over the event's reserved logistics."""
    return Cost(sum((line_cost(item) for item in reserved_items(event.logistics)), 0.0))


def collect_reserved_logistics(events: Iterable[Event]) -> list[Logistics] | None:
    """Flatten reserved logistics of all events, in event order.

    Returns None if any event has an empty or absent logistics set.
    """
    collected: list[Logistics] = []
    for event in events:
        if not event.logistics:
            return None
        collected.extend(reserved_items(event.logistics))
    return collected

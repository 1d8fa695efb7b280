"""Tests for logistics costing — pure filtering and aggregation, no IO."""

from eventsproject.core.entities import Event, Logistics
from eventsproject.core.logistics_costing import (
    collect_reserved_logistics, compute_event_cost, line_cost, reserved_items,
)


def test_line_cost_is_unit_price_times_quantity():
    assert line_cost(Logistics(unit_price=15.0, quantity=3)) == 45.0


def test_reserved_items_filters_unreserved():
    kept = Logistics(reserved=True)
    dropped = Logistics(reserved=False)
    assert reserved_items({kept, dropped}) == [kept]


def test_reserved_items_of_absent_set_is_empty():
    assert reserved_items(None) == []


def test_event_cost_counts_reserved_only():
    event = Event(logistics={
        Logistics(reserved=True, unit_price=15.0, quantity=3),
        Logistics(reserved=False, unit_price=50.0, quantity=10),
    })
    assert compute_event_cost(event) == 45.0


def test_event_cost_sums_several_reserved_items():
    event = Event(logistics={
        Logistics(reserved=True, unit_price=10.0, quantity=2),
        Logistics(reserved=True, unit_price=0.5, quantity=4),
    })
    assert compute_event_cost(event) == 22.0


def test_event_cost_without_logistics_is_zero():
    assert compute_event_cost(Event()) == 0.0
    assert compute_event_cost(Event(logistics=set())) == 0.0


def test_event_cost_ignores_previous_cost():
    event = Event(cost=100.0, logistics={Logistics(reserved=True, unit_price=1.0, quantity=1)})
    assert compute_event_cost(event) == 1.0


def test_collect_returns_reserved_in_event_order():
    a = Logistics(reserved=True)
    b = Logistics(reserved=True)
    events = [Event(logistics={a, Logistics()}), Event(logistics={b})]
    assert collect_reserved_logistics(events) == [a, b]


def test_collect_returns_none_for_empty_set():
    assert collect_reserved_logistics([Event(logistics=set())]) is None


def test_collect_returns_none_for_absent_set():
    events = [Event(logistics={Logistics(reserved=True)}), Event()]
    assert collect_reserved_logistics(events) is None


def test_collect_without_events_is_empty_list():
    assert collect_reserved_logistics([]) == []


def test_collect_with_nothing_reserved_is_empty_list():
    assert collect_reserved_logistics([Event(logistics={Logistics()})]) == []

import random
from datetime import date, timedelta

import pytest

from apps.api.schedule.layout import (
    CalendarEvent,
    MalformedEventError,
    assign_rows,
    parse_day,
    parse_events,
    sort_key,
)


def ev(event_id, start, end=None, title=""):
    return CalendarEvent.from_item({"id": event_id, "date": start, "endDate": end, "title": title})


def assert_no_collision(events, rows):
    by_day = {}
    for e in events:
        for d in e.days():
            by_day.setdefault(d, []).append(rows[e.id])
    for d, used in by_day.items():
        assert len(used) == len(set(used)), f"row collision on {d}"


def assert_minimal(events, rows):
    # replay the visiting order and check no lower row was free for the whole span
    occupied = set()
    for e in sorted(events, key=sort_key):
        span = list(e.days())
        for lower in range(rows[e.id]):
            assert any((lower, d) in occupied for d in span), f"{e.id} could have used row {lower}"
        occupied.update((rows[e.id], d) for d in span)


def test_overlapping_single_day_goes_below_range():
    events = [ev("A", "2025-03-01", "2025-03-03"), ev("B", "2025-03-02")]
    assert assign_rows(events) == {"A": 0, "B": 1}


def test_disjoint_ranges_share_row_zero():
    events = [ev("A", "2025-03-01", "2025-03-02"), ev("B", "2025-03-03", "2025-03-04")]
    assert assign_rows(events) == {"A": 0, "B": 0}


def test_same_day_events_stack_by_id():
    events = [ev("c3", "2025-03-05"), ev("c1", "2025-03-05"), ev("c2", "2025-03-05")]
    assert assign_rows(events) == {"c1": 0, "c2": 1, "c3": 2}


def test_reversed_range_is_swapped():
    a = ev("A", "2025-03-05", "2025-03-03")
    assert a.first == date(2025, 3, 3)
    assert a.last == date(2025, 3, 5)
    assert a.span_days == 3
    rows = assign_rows([a, ev("B", "2025-03-04")])
    assert rows == {"A": 0, "B": 1}


def test_longer_span_wins_lower_row_on_same_start():
    events = [ev("a", "2025-03-01"), ev("z", "2025-03-01", "2025-03-05")]
    assert assign_rows(events) == {"z": 0, "a": 1}


def test_row_is_reused_after_gap():
    events = [
        ev("long", "2025-03-01", "2025-03-04"),
        ev("mid", "2025-03-02", "2025-03-03"),
        ev("late", "2025-03-05"),
        ev("later", "2025-03-04", "2025-03-06"),
    ]
    rows = assign_rows(events)
    assert rows["long"] == 0
    assert rows["mid"] == 1
    assert rows["later"] == 1
    assert rows["late"] == 0


def test_empty_input():
    assert assign_rows([]) == {}


def test_items_without_date_are_skipped():
    events = parse_events([
        {"id": "1", "title": "no date"},
        {"id": "2", "date": "", "title": "blank"},
        {"id": "3", "date": None},
        {"id": "4", "date": "2025-03-01", "end_date": "2025-03-02"},
    ])
    assert [e.id for e in events] == ["4"]
    assert events[0].last == date(2025, 3, 2)


@pytest.mark.parametrize("bad", ["2025-3-1", "2025-02-30", "2025-03-01T00:00:00", "03/01/2025", "tomorrow"])
def test_unparseable_dates_fail_fast(bad):
    with pytest.raises(MalformedEventError) as info:
        CalendarEvent.from_item({"id": "oops", "date": bad})
    assert info.value.event_id == "oops"


def test_unparseable_end_date_fails_fast():
    with pytest.raises(MalformedEventError) as info:
        CalendarEvent.from_item({"id": "x", "date": "2025-03-01", "endDate": "2025-13-01"})
    assert info.value.event_id == "x"


def test_parse_day_is_a_plain_calendar_date():
    assert parse_day("2024-02-29", "leap") == date(2024, 2, 29)


def test_duplicate_ids_are_rejected():
    with pytest.raises(MalformedEventError):
        assign_rows([ev("A", "2025-03-01"), ev("A", "2025-03-02")])


def test_deterministic_and_independent_of_input_order():
    rng = random.Random(7)
    base = date(2025, 3, 1)
    events = []
    for n in range(25):
        start = base + timedelta(days=rng.randrange(30))
        end = start + timedelta(days=rng.randrange(5))
        events.append(ev(f"e{n:02d}", start.isoformat(), end.isoformat()))

    first = assign_rows(events)
    assert assign_rows(events) == first

    for _ in range(5):
        shuffled = events[:]
        rng.shuffle(shuffled)
        assert assign_rows(shuffled) == first


@pytest.mark.parametrize("seed", range(10))
def test_random_month_has_no_collisions_and_minimal_rows(seed):
    rng = random.Random(seed)
    base = date(2025, 3, 1)
    events = []
    for n in range(10):
        start = base + timedelta(days=rng.randrange(30))
        end = start + timedelta(days=rng.randint(1, 5) - 1)
        events.append(ev(f"r{n}", start.isoformat(), end.isoformat()))

    rows = assign_rows(events)
    assert set(rows) == {e.id for e in events}
    assert all(r >= 0 for r in rows.values())
    assert_no_collision(events, rows)
    assert_minimal(events, rows)

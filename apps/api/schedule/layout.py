# apps/api/schedule/layout.py
"""
Row packing for the month calendar.

Every dated itinerary item becomes a horizontal bar across the days it covers.
Bars that share a day must sit on different rows, and a bar keeps the same row
on every day of its span. Rows are handed out greedily: events are visited in
a fixed order and each one takes the lowest row that is free on all of its
days.

Visiting order is ``(start, longest span first, id)``. The id tie-break makes
the result independent of the order the caller passes events in.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Set, Tuple

logger = logging.getLogger(__name__)

_YMD = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")


class MalformedEventError(ValueError):
    """An event carries a date string that is not a real YYYY-MM-DD day."""

    def __init__(self, event_id: str, value: Any, reason: str = "unparseable date"):
        self.event_id = event_id
        self.value = value
        self.reason = reason
        super().__init__(f"event {event_id!r}: {reason}: {value!r}")


def parse_day(value: str, event_id: str) -> date:
    # year/month/day triple only, no timestamps and no timezone
    m = _YMD.match(value) if isinstance(value, str) else None
    if not m:
        raise MalformedEventError(event_id, value)
    try:
        return date(int(m.group(1)), int(m.group(2)), int(m.group(3)))
    except ValueError:
        raise MalformedEventError(event_id, value) from None


@dataclass(frozen=True)
class CalendarEvent:
    id: str
    start: date
    end: Optional[date] = None
    title: str = ""
    time: str = ""

    @property
    def last(self) -> date:
        """Last active day. A reversed range is read with its ends swapped."""
        if self.end is None:
            return self.start
        return max(self.start, self.end)

    @property
    def first(self) -> date:
        if self.end is None:
            return self.start
        return min(self.start, self.end)

    @property
    def span_days(self) -> int:
        return (self.last - self.first).days + 1

    def days(self) -> Iterator[date]:
        d = self.first
        while d <= self.last:
            yield d
            d += timedelta(days=1)

    def active_on(self, day: date) -> bool:
        return self.first <= day <= self.last

    @classmethod
    def from_item(cls, item: Mapping[str, Any]) -> Optional["CalendarEvent"]:
        """Build from an itinerary record (camelCase or snake_case keys).

        Returns None for records without a date; those are not laid out.
        """
        event_id = str(item.get("id", ""))
        raw_start = item.get("date")
        if not raw_start:
            return None
        raw_end = item.get("endDate", item.get("end_date"))
        start = parse_day(raw_start, event_id)
        end = parse_day(raw_end, event_id) if raw_end else None
        if end is not None and end < start:
            logger.warning("event %s ends before it starts (%s > %s); swapping", event_id, start, end)
        return cls(
            id=event_id,
            start=start,
            end=end,
            title=str(item.get("title") or ""),
            time=str(item.get("time") or ""),
        )


def parse_events(items: Iterable[Mapping[str, Any]]) -> List[CalendarEvent]:
    events = []
    for item in items:
        ev = CalendarEvent.from_item(item)
        if ev is not None:
            events.append(ev)
    return events


def sort_key(ev: CalendarEvent) -> Tuple[date, int, str]:
    return (ev.first, -ev.span_days, ev.id)


def assign_rows(events: Iterable[CalendarEvent]) -> Dict[str, int]:
    """Map each event id to the row it occupies on every day of its span."""
    ordered = sorted(events, key=sort_key)

    seen: Set[str] = set()
    for ev in ordered:
        if ev.id in seen:
            raise MalformedEventError(ev.id, ev.id, "duplicate event id")
        seen.add(ev.id)

    occupied: Set[Tuple[int, date]] = set()
    rows: Dict[str, int] = {}
    for ev in ordered:
        span = list(ev.days())
        row = 0
        while any((row, d) in occupied for d in span):
            row += 1
        rows[ev.id] = row
        occupied.update((row, d) for d in span)
    return rows

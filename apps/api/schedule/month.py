# apps/api/schedule/month.py
"""Month anchor and the per-day slot grid built from a row assignment."""
from __future__ import annotations

import calendar
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Iterable, List, Optional

from .layout import CalendarEvent, assign_rows


@dataclass(frozen=True)
class MonthCursor:
    year: int
    month: int  # 1..12

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise ValueError(f"month out of range: {self.month}")

    @classmethod
    def of(cls, d: date) -> "MonthCursor":
        return cls(d.year, d.month)

    @classmethod
    def initial(cls, events: Iterable[CalendarEvent], today: Optional[date] = None) -> "MonthCursor":
        starts = [ev.first for ev in events]
        if starts:
            return cls.of(min(starts))
        return cls.of(today or date.today())

    def next(self) -> "MonthCursor":
        if self.month == 12:
            return MonthCursor(self.year + 1, 1)
        return MonthCursor(self.year, self.month + 1)

    def previous(self) -> "MonthCursor":
        if self.month == 1:
            return MonthCursor(self.year - 1, 12)
        return MonthCursor(self.year, self.month - 1)

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def days_in_month(self) -> int:
        return calendar.monthrange(self.year, self.month)[1]

    @property
    def label(self) -> str:
        return f"{calendar.month_name[self.month]} {self.year}"


@dataclass
class Slot:
    event: CalendarEvent
    row: int
    show_label: bool


@dataclass
class DayCell:
    day: date
    slots: List[Optional[Slot]] = field(default_factory=list)
    more: int = 0


@dataclass
class MonthGrid:
    cursor: MonthCursor
    leading_blanks: int
    rows: Dict[str, int]
    days: List[DayCell]


def events_on(day: date, events: Iterable[CalendarEvent]) -> List[CalendarEvent]:
    return [ev for ev in events if ev.active_on(day)]


def _starts_week(day: date) -> bool:
    # Sunday-first grid
    return day.weekday() == 6


def _label_day(day: date, ev: CalendarEvent, cursor: MonthCursor) -> bool:
    # start of the bar, start of a week row, or the first row of the month
    return day == ev.first or _starts_week(day) or day == cursor.first_day


def build_month(
    events: List[CalendarEvent],
    cursor: MonthCursor,
    max_slots: Optional[int] = None,
) -> MonthGrid:
    """Lay out one month.

    Rows come from the whole event list, not only the visible month, so a bar
    that enters from the previous month keeps the row it had there.
    Each cell gets ``max(row) + 1`` slots, padded with None. A bar's label is
    shown on its start day, on every Sunday it crosses, and on the 1st when
    it enters from an earlier month. With
    ``max_slots`` the extra slots are dropped and ``more`` counts the hidden
    events.
    """
    rows = assign_rows(events)
    leading = (cursor.first_day.weekday() + 1) % 7

    cells = []
    for n in range(1, cursor.days_in_month + 1):
        day = date(cursor.year, cursor.month, n)
        active = events_on(day, events)
        cell = DayCell(day=day)
        if active:
            depth = max(rows[ev.id] for ev in active) + 1
            slots: List[Optional[Slot]] = [None] * depth
            for ev in active:
                r = rows[ev.id]
                slots[r] = Slot(event=ev, row=r, show_label=_label_day(day, ev, cursor))
            if max_slots is not None and depth > max_slots:
                cell.more = sum(1 for ev in active if rows[ev.id] >= max_slots)
                slots = slots[:max_slots]
            cell.slots = slots
        cells.append(cell)

    return MonthGrid(cursor=cursor, leading_blanks=leading, rows=rows, days=cells)

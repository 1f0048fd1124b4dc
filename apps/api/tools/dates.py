# Trip start/end dates: range picking, duration and countdown.
from datetime import date
from typing import Optional

from ..models.schemas import TripCountdown, TripDates
from ..schedule.layout import MalformedEventError, parse_day
from ..storage.local import LocalStore

DATES_KEY = "trip-dates"


def _day(value: str) -> date:
    try:
        return parse_day(value, DATES_KEY)
    except MalformedEventError:
        raise ValueError(f"invalid trip date: {value!r}") from None


def load(store: LocalStore) -> TripDates:
    raw = store.get(DATES_KEY)
    return TripDates.model_validate(raw) if raw else TripDates()


def save(store: LocalStore, dates: TripDates) -> TripDates:
    # validate before persisting; an empty string means "unset"
    for value in (dates.start_date, dates.end_date):
        if value:
            _day(value)
    store.set(DATES_KEY, dates.model_dump(by_alias=True))
    return dates


def select_day(dates: TripDates, day: str) -> TripDates:
    """Apply one click on the calendar to the current selection."""
    picked = _day(day)
    if not dates.start_date or dates.end_date:
        return TripDates(start_date=day, end_date="")
    if picked < _day(dates.start_date):
        return TripDates(start_date=day, end_date="")
    return TripDates(start_date=dates.start_date, end_date=day)


def duration_days(dates: TripDates) -> int:
    if not dates.start_date or not dates.end_date:
        return 0
    start = _day(dates.start_date)
    end = _day(dates.end_date)
    return abs((end - start).days) + 1


def countdown(dates: TripDates, today: Optional[date] = None) -> TripCountdown:
    if not dates.start_date:
        return TripCountdown(status="none")
    today = today or date.today()
    start = _day(dates.start_date)
    end = _day(dates.end_date) if dates.end_date else None
    until = (start - today).days
    duration = duration_days(dates)
    if until > 0:
        return TripCountdown(status="upcoming", days=until, duration=duration)
    if end is not None and today <= end:
        return TripCountdown(status="ongoing", days=0, duration=duration)
    return TripCountdown(status="past", days=-until, duration=duration)

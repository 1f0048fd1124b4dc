import logging
from typing import Iterable

from ics import Calendar, Event

from ..schedule.layout import CalendarEvent

logger = logging.getLogger(__name__)


def render_ics(events: Iterable[CalendarEvent]) -> str:
    """Build one all-day VEVENT per dated itinerary item and return the document."""
    cal = Calendar()
    for item in events:
        ev = Event()
        ev.uid = f"{item.id}@trip-planner"
        ev.name = item.title or item.id
        ev.begin = item.first.isoformat()
        ev.end = item.last.isoformat()
        # floors both ends to whole days, DTEND becomes last day + 1
        ev.make_all_day()
        if item.time:
            ev.description = item.time
        cal.events.add(ev)

    text = "".join(cal.serialize_iter())
    logger.info("exported %d events", len(cal.events))
    return text

import logging
import os
from datetime import date
from functools import lru_cache
from typing import Dict, List, Optional

from fastapi import Depends, FastAPI, HTTPException, Query, Request, Response
from fastapi.responses import JSONResponse

from . import config
from .graph import ChatUnavailableError
from .models.schemas import (
    CATEGORIES, BudgetConfig, BudgetView, CalendarMonth, ChatMessage, ChatReply, ChatRequest,
    CityWeather, DayOut, DayPick, ItemInput, ItineraryItem, PackingItem, PackingView,
    SlotOut, TextInput, Tip, TripCountdown, TripDates,
)
from .schedule.layout import CalendarEvent, MalformedEventError, parse_events
from .schedule.month import MonthCursor, MonthGrid, build_month
from .storage.itinerary import StorageError, make_repository, new_item
from .storage.local import LocalStore
from .tools import budget, calendar as ics_tool, chat, dates, packing, tips, weather

logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(title="Trip Planner API", version="0.2.0")


@lru_cache
def get_store() -> LocalStore:
    return LocalStore(os.path.join(config.DATA_DIR, config.LOCAL_STORE_FILE))


@lru_cache
def get_repo():
    return make_repository(get_store())


@app.exception_handler(MalformedEventError)
def _malformed(request: Request, exc: MalformedEventError):
    return JSONResponse(status_code=422, content={"detail": str(exc), "event_id": exc.event_id})


@app.exception_handler(StorageError)
def _storage(request: Request, exc: StorageError):
    return JSONResponse(status_code=503, content={"detail": f"storage unavailable: {exc}"})


@app.exception_handler(ChatUnavailableError)
def _chat_unavailable(request: Request, exc: ChatUnavailableError):
    return JSONResponse(status_code=503, content={"detail": str(exc)})


def _category(category: str) -> str:
    if category not in CATEGORIES:
        raise HTTPException(status_code=404, detail=f"Unknown category: {category}")
    return category


def _all_items(repo) -> Dict[str, List[ItineraryItem]]:
    return {c: repo.list(c) for c in CATEGORIES}


def _calendar_events(repo) -> List[CalendarEvent]:
    items = [i.model_dump(by_alias=True) for group in _all_items(repo).values() for i in group]
    return parse_events(items)


@app.get("/health")
def health(repo=Depends(get_repo)):
    return {"ok": True, "storage": repo.name}


# ── itinerary ────────────────────────────────────────────────────────────────

@app.get("/itinerary/{category}", response_model=List[ItineraryItem])
def list_items(category: str, repo=Depends(get_repo)):
    return repo.list(_category(category))


@app.post("/itinerary/{category}", response_model=ItineraryItem, status_code=201)
def create_item(category: str, body: ItemInput, repo=Depends(get_repo)):
    _category(category)
    item = new_item(body)
    # reject bad dates before anything is stored
    CalendarEvent.from_item(item.model_dump(by_alias=True))
    return repo.upsert(category, item)


@app.put("/itinerary/{category}/{item_id}", response_model=ItineraryItem)
def update_item(category: str, item_id: str, body: ItemInput, repo=Depends(get_repo)):
    current = repo.get(_category(category), item_id)
    if current is None:
        raise HTTPException(status_code=404, detail=f"Unknown item: {item_id}")
    updated = ItineraryItem(id=current.id, hidden_gem_id=current.hidden_gem_id, **body.model_dump())
    CalendarEvent.from_item(updated.model_dump(by_alias=True))
    return repo.upsert(category, updated)


@app.delete("/itinerary/{category}/{item_id}", status_code=204)
def delete_item(category: str, item_id: str, repo=Depends(get_repo)):
    repo.delete(_category(category), item_id)
    return Response(status_code=204)


@app.post("/itinerary/{category}/seed", response_model=List[ItineraryItem])
def seed_items(category: str, repo=Depends(get_repo)):
    return repo.seed(_category(category))


# ── calendar ─────────────────────────────────────────────────────────────────

def _month_out(grid: MonthGrid) -> CalendarMonth:
    days = []
    for cell in grid.days:
        slots = [
            None if s is None else SlotOut(
                id=s.event.id, title=s.event.title, time=s.event.time, row=s.row, show_label=s.show_label,
            )
            for s in cell.slots
        ]
        days.append(DayOut(date=cell.day.isoformat(), slots=slots, more=cell.more))
    prev, nxt = grid.cursor.previous(), grid.cursor.next()
    return CalendarMonth(
        year=grid.cursor.year,
        month=grid.cursor.month,
        label=grid.cursor.label,
        leading_blanks=grid.leading_blanks,
        rows=grid.rows,
        days=days,
        previous={"year": prev.year, "month": prev.month},
        next={"year": nxt.year, "month": nxt.month},
    )


@app.get("/calendar", response_model=CalendarMonth)
def calendar_month(
    year: Optional[int] = Query(None, ge=1, le=9999),
    month: Optional[int] = Query(None, ge=1, le=12),
    max_slots: Optional[int] = Query(None, ge=1),
    repo=Depends(get_repo),
):
    events = _calendar_events(repo)
    if year is None or month is None:
        cursor = MonthCursor.initial(events, date.today())
    else:
        cursor = MonthCursor(year, month)
    return _month_out(build_month(events, cursor, max_slots))


@app.get("/calendar/export.ics")
def calendar_export(repo=Depends(get_repo)):
    return Response(
        content=ics_tool.render_ics(_calendar_events(repo)),
        media_type="text/calendar",
        headers={"Content-Disposition": 'attachment; filename="trip.ics"'},
    )


# ── trip dates ───────────────────────────────────────────────────────────────

@app.get("/trip-dates", response_model=TripDates)
def get_dates(store: LocalStore = Depends(get_store)):
    return dates.load(store)


@app.put("/trip-dates", response_model=TripDates)
def put_dates(body: TripDates, store: LocalStore = Depends(get_store)):
    try:
        return dates.save(store, body)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@app.post("/trip-dates/select", response_model=TripDates)
def select_date(body: DayPick, store: LocalStore = Depends(get_store)):
    try:
        return dates.save(store, dates.select_day(dates.load(store), body.day))
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@app.get("/trip-dates/countdown", response_model=TripCountdown)
def trip_countdown(store: LocalStore = Depends(get_store)):
    return dates.countdown(dates.load(store), date.today())


# ── budget ───────────────────────────────────────────────────────────────────

@app.get("/budget", response_model=BudgetView)
def get_budget(live_rate: bool = False, store: LocalStore = Depends(get_store)):
    cfg = budget.load(store)
    return BudgetView(config=cfg, totals=budget.totals(cfg, live_rate))


@app.put("/budget", response_model=BudgetView)
def put_budget(body: BudgetConfig, live_rate: bool = False, store: LocalStore = Depends(get_store)):
    cfg = budget.save(store, body)
    return BudgetView(config=cfg, totals=budget.totals(cfg, live_rate))


@app.post("/budget/reset", response_model=BudgetView)
def reset_budget(store: LocalStore = Depends(get_store)):
    cfg = budget.reset(store)
    return BudgetView(config=cfg, totals=budget.totals(cfg))


# ── packing list ─────────────────────────────────────────────────────────────

@app.get("/packing", response_model=PackingView)
def get_packing(store: LocalStore = Depends(get_store)):
    return packing.view(packing.load(store))


@app.post("/packing", response_model=PackingItem, status_code=201)
def add_packing(body: TextInput, store: LocalStore = Depends(get_store)):
    try:
        return packing.add(store, body.text)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@app.post("/packing/{item_id}/toggle", response_model=PackingItem)
def toggle_packing(item_id: str, store: LocalStore = Depends(get_store)):
    item = packing.toggle(store, item_id)
    if item is None:
        raise HTTPException(status_code=404, detail=f"Unknown packing item: {item_id}")
    return item


@app.delete("/packing/{item_id}", status_code=204)
def delete_packing(item_id: str, store: LocalStore = Depends(get_store)):
    packing.delete(store, item_id)
    return Response(status_code=204)


# ── tips ─────────────────────────────────────────────────────────────────────

@app.get("/tips", response_model=List[Tip])
def get_tips(store: LocalStore = Depends(get_store)):
    return tips.load(store)


@app.post("/tips", response_model=Tip, status_code=201)
def add_tip(body: TextInput, store: LocalStore = Depends(get_store)):
    try:
        return tips.add(store, body.text)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@app.delete("/tips/{tip_id}", status_code=204)
def delete_tip(tip_id: str, store: LocalStore = Depends(get_store)):
    tips.delete(store, tip_id)
    return Response(status_code=204)


# ── assistant ────────────────────────────────────────────────────────────────

@app.get("/chat", response_model=List[ChatMessage])
def get_chat(store: LocalStore = Depends(get_store)):
    return chat.load(store)


@app.delete("/chat", response_model=List[ChatMessage])
def clear_chat(store: LocalStore = Depends(get_store)):
    return chat.clear(store)


@app.post("/chat", response_model=ChatReply)
def post_chat(body: ChatRequest, store: LocalStore = Depends(get_store), repo=Depends(get_repo)):
    try:
        result = chat.send(store, body.message, _all_items(repo))
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return ChatReply(reply=result.reply, failed=result.failed, history=result.history)


# ── weather ──────────────────────────────────────────────────────────────────

@app.get("/weather", response_model=List[Optional[CityWeather]])
def get_weather():
    return weather.trip_weather()

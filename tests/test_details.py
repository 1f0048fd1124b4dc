from concurrent.futures import ThreadPoolExecutor
from datetime import date

import pytest
import requests

from apps.api import config
from apps.api.models.schemas import BudgetConfig, TripDates
from apps.api.schedule.layout import CalendarEvent, MalformedEventError
from apps.api.storage.local import LocalStore
from apps.api.tools import budget, calendar, dates, fx, packing, tips, weather


@pytest.fixture
def store(tmp_path):
    return LocalStore(str(tmp_path / "store.json"))


class FakeResponse:
    def __init__(self, payload, status=200):
        self.payload = payload
        self.status_code = status

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"status {self.status_code}")

    def json(self):
        return self.payload


# ── budget ──────────────────────────────────────────────────────────────────

def test_default_budget_totals():
    t = budget.compute_totals(BudgetConfig(), 152)
    assert t.daily_jpy == 23500
    assert t.trip_jpy == 705000
    assert t.daily_usd == pytest.approx(154.605, abs=0.01)
    assert t.trip_usd == pytest.approx(4638.16, abs=0.01)


def test_budget_persists_and_resets(store):
    budget.save(store, BudgetConfig(days=5, accommodation=10000, food=0, transport=0, misc=0))
    assert budget.load(store).days == 5
    assert budget.totals(budget.load(store)).trip_jpy == 50000
    assert budget.reset(store) == BudgetConfig()
    assert budget.load(store) == BudgetConfig()


def test_negative_budget_rejected():
    with pytest.raises(ValueError):
        BudgetConfig(food=-1)


def test_live_rate_used_when_available(monkeypatch):
    monkeypatch.setattr(fx.requests, "get", lambda *a, **kw: FakeResponse({"rates": {"JPY": 149.5}}))
    assert fx.jpy_per_usd(live=True) == pytest.approx(149.5)


def test_live_rate_falls_back_to_static(monkeypatch):
    def boom(*a, **kw):
        raise requests.ConnectionError("offline")

    monkeypatch.setattr(fx.requests, "get", boom)
    assert fx.jpy_per_usd(live=True) == config.EXCHANGE_RATE_JPY_PER_USD
    assert fx.jpy_per_usd() == config.EXCHANGE_RATE_JPY_PER_USD


def test_same_currency_conversion_is_identity():
    assert fx.convert(10.0, "usd", "USD") == (10.0, 1.0)


# ── packing ─────────────────────────────────────────────────────────────────

def test_packing_defaults_and_progress(store):
    items = packing.load(store)
    assert [i.text for i in items][:2] == ["Passport", "JR Pass Exchange Order"]
    assert packing.progress(items) == 0

    packing.toggle(store, "1")
    packing.toggle(store, "2")
    view = packing.view(packing.load(store))
    assert view.progress == 33
    assert [i.id for i in view.packed] == ["1", "2"]
    assert len(view.to_pack) == 4


def test_packing_add_toggle_delete(store):
    item = packing.add(store, "  Umbrella  ")
    assert item.text == "Umbrella"
    assert packing.toggle(store, item.id).checked is True
    assert packing.toggle(store, item.id).checked is False
    assert packing.toggle(store, "missing") is None
    assert packing.delete(store, item.id) is True
    assert packing.delete(store, item.id) is False


def test_packing_rejects_blank_text(store):
    with pytest.raises(ValueError):
        packing.add(store, "   ")


def test_packing_progress_of_empty_list():
    assert packing.progress([]) == 0


def test_back_to_back_adds_get_distinct_ids(store, monkeypatch):
    monkeypatch.setattr(packing.time, "time", lambda: 1700000000.0)
    a = packing.add(store, "Hat")
    b = packing.add(store, "Scarf")
    assert a.id != b.id


def test_concurrent_adds_are_all_kept(store):
    texts = [f"Item {n}" for n in range(16)]
    with ThreadPoolExecutor(max_workers=8) as pool:
        added = list(pool.map(lambda t: packing.add(store, t), texts))

    stored = packing.load(store)
    assert len(stored) == 6 + len(texts)
    assert {i.text for i in stored} >= set(texts)
    assert len({i.id for i in stored}) == len(stored)
    assert {i.id for i in added} <= {i.id for i in stored}


# ── tips ────────────────────────────────────────────────────────────────────

def test_tips_add_and_delete(store):
    assert len(tips.load(store)) == 3
    tip = tips.add(store, "Carry coins for lockers")
    assert (tip.icon, tip.title) == ("pencil", "Note")
    assert tips.delete(store, "1") is True
    assert [t.id for t in tips.load(store)] == ["2", "3", tip.id]
    with pytest.raises(ValueError):
        tips.add(store, "")


def test_concurrent_tip_adds_are_all_kept(store):
    with ThreadPoolExecutor(max_workers=4) as pool:
        list(pool.map(lambda n: tips.add(store, f"note {n}"), range(10)))
    assert len(tips.load(store)) == 13


# ── trip dates ──────────────────────────────────────────────────────────────

def test_select_day_builds_a_range():
    d = dates.select_day(TripDates(), "2025-03-10")
    assert (d.start_date, d.end_date) == ("2025-03-10", "")
    d = dates.select_day(d, "2025-03-20")
    assert (d.start_date, d.end_date) == ("2025-03-10", "2025-03-20")
    # a full range restarts on the next click
    d = dates.select_day(d, "2025-03-15")
    assert (d.start_date, d.end_date) == ("2025-03-15", "")


def test_select_day_before_start_moves_start():
    d = dates.select_day(TripDates(start_date="2025-03-10"), "2025-03-01")
    assert (d.start_date, d.end_date) == ("2025-03-01", "")


def test_select_day_rejects_bad_day():
    with pytest.raises(ValueError, match="invalid trip date") as exc:
        dates.select_day(TripDates(), "March 1st")
    # a trip date is not an itinerary event
    assert not isinstance(exc.value, MalformedEventError)


def test_save_rejects_bad_date_without_storing(store):
    with pytest.raises(ValueError):
        dates.save(store, TripDates(start_date="2025-03-01", end_date="2025-13-01"))
    assert dates.load(store) == TripDates()


def test_duration_is_inclusive():
    assert dates.duration_days(TripDates(start_date="2025-03-10", end_date="2025-03-12")) == 3
    assert dates.duration_days(TripDates(start_date="2025-03-10")) == 0


@pytest.mark.parametrize(
    "start,end,today,status,days",
    [
        ("", "", date(2025, 3, 1), "none", 0),
        ("2025-03-10", "2025-03-12", date(2025, 3, 1), "upcoming", 9),
        ("2025-03-10", "2025-03-12", date(2025, 3, 10), "ongoing", 0),
        ("2025-03-10", "2025-03-12", date(2025, 3, 12), "ongoing", 0),
        ("2025-03-10", "2025-03-12", date(2025, 3, 15), "past", 5),
        ("2025-03-10", "", date(2025, 3, 10), "past", 0),
    ],
)
def test_countdown(start, end, today, status, days):
    c = dates.countdown(TripDates(start_date=start, end_date=end), today)
    assert (c.status, c.days) == (status, days)


def test_dates_round_trip_through_store(store):
    dates.save(store, TripDates(start_date="2025-03-10", end_date="2025-03-12"))
    assert store.get("trip-dates") == {"startDate": "2025-03-10", "endDate": "2025-03-12"}
    assert dates.load(store).end_date == "2025-03-12"


# ── weather ─────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("code,expected", [(0, "Clear"), (3, "Clear"), (45, "Cloudy"), (61, "Rain"), (None, "Unknown")])
def test_condition_buckets(code, expected):
    assert weather.condition_for(code) == expected


def test_trip_weather_tolerates_a_failed_city(monkeypatch):
    def fake_get(url, params=None, timeout=None):
        if params["latitude"] == 35.0116:
            return FakeResponse({"current_weather": {"temperature": 12.6, "weathercode": 2}})
        return FakeResponse({}, status=500)

    monkeypatch.setattr(weather.requests, "get", fake_get)
    kyoto, fukuoka = weather.trip_weather()
    assert (kyoto.city, kyoto.temp, kyoto.condition) == ("Kyoto", 13, "Clear")
    assert fukuoka is None


# ── calendar export ─────────────────────────────────────────────────────────

def test_render_ics_builds_each_export_in_memory():
    stay = CalendarEvent.from_item({"id": "k", "title": "Kyoto stay", "date": "2025-03-01", "endDate": "2025-03-03"})
    hop = CalendarEvent.from_item({"id": "f", "title": "Day trip", "date": "2025-03-05", "time": "09:00"})

    first = calendar.render_ics([stay])
    second = calendar.render_ics([hop])

    assert first.count("BEGIN:VEVENT") == 1
    assert "SUMMARY:Kyoto stay" in first
    assert "DTSTART;VALUE=DATE:20250301" in first
    assert "Day trip" not in first
    assert "SUMMARY:Day trip" in second
    assert "Kyoto stay" not in second


def test_render_ics_without_events():
    text = calendar.render_ics([])
    assert text.startswith("BEGIN:VCALENDAR")
    assert "BEGIN:VEVENT" not in text

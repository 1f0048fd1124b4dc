# Daily yen budget → daily/trip totals in yen and dollars.
from typing import Optional

from ..models.schemas import BudgetConfig, BudgetTotals
from ..storage.local import LocalStore
from . import fx

BUDGET_KEY = "budget"


def compute_totals(cfg: BudgetConfig, rate: float) -> BudgetTotals:
    daily_jpy = cfg.accommodation + cfg.food + cfg.transport + cfg.misc
    trip_jpy = daily_jpy * cfg.days
    return BudgetTotals(
        daily_jpy=daily_jpy,
        daily_usd=daily_jpy / rate,
        trip_jpy=trip_jpy,
        trip_usd=trip_jpy / rate,
        rate=rate,
    )


def load(store: LocalStore) -> BudgetConfig:
    raw = store.get(BUDGET_KEY)
    return BudgetConfig.model_validate(raw) if raw else BudgetConfig()


def save(store: LocalStore, cfg: BudgetConfig) -> BudgetConfig:
    store.set(BUDGET_KEY, cfg.model_dump())
    return cfg


def reset(store: LocalStore) -> BudgetConfig:
    store.delete(BUDGET_KEY)
    return BudgetConfig()


def totals(cfg: BudgetConfig, live_rate: bool = False, rate: Optional[float] = None) -> BudgetTotals:
    return compute_totals(cfg, rate if rate is not None else fx.jpy_per_usd(live_rate))

# apps/api/storage/itinerary.py
"""
Itinerary persistence.

Two interchangeable repositories share one contract:
    list(category) / get(category, id) / upsert(category, item)
    delete(category, id) / seed(category)

LocalItineraryRepository keeps each category as a list under
``itinerary:<category>`` in the LocalStore. PostgresItineraryRepository
(storage/postgres.py) talks to a hosted database and is picked only when
DATABASE_URL is configured.
"""
from __future__ import annotations

import logging
import time
import uuid
from typing import List, Optional

from .. import config
from ..data.initial_data import INITIAL_ITINERARY
from ..models.schemas import ItemInput, ItineraryItem
from .local import LocalStore

logger = logging.getLogger(__name__)


class StorageError(RuntimeError):
    """The configured backend failed to read or write."""


def new_item(data: ItemInput) -> ItineraryItem:
    return ItineraryItem(
        id=str(uuid.uuid4()),
        hidden_gem_id=f"gem-{int(time.time() * 1000)}",
        **data.model_dump(),
    )


def seed_items(category: str) -> List[ItineraryItem]:
    return [ItineraryItem.model_validate(raw) for raw in INITIAL_ITINERARY.get(category, [])]


def order_items(items: List[ItineraryItem]) -> List[ItineraryItem]:
    # undated items sink to the bottom in their stored order, same-day items go by start time
    return sorted(items, key=lambda i: (i.date, i.time or "") if i.date else ("9999-99-99", ""))


class LocalItineraryRepository:
    name = "local"

    def __init__(self, store: LocalStore):
        self.store = store

    @staticmethod
    def _key(category: str) -> str:
        return f"itinerary:{category}"

    def _items(self, category: str, raw) -> List[ItineraryItem]:
        if raw is None:
            return seed_items(category)
        return [ItineraryItem.model_validate(r) for r in raw]

    @staticmethod
    def _dump(items: List[ItineraryItem]) -> list:
        return [i.model_dump(by_alias=True) for i in items]

    def _load(self, category: str) -> List[ItineraryItem]:
        return self._items(category, self.store.get(self._key(category)))

    def list(self, category: str) -> List[ItineraryItem]:
        return order_items(self._load(category))

    def get(self, category: str, item_id: str) -> Optional[ItineraryItem]:
        return next((i for i in self._load(category) if i.id == item_id), None)

    def upsert(self, category: str, item: ItineraryItem) -> ItineraryItem:
        def _upsert(raw):
            items = self._items(category, raw)
            for idx, cur in enumerate(items):
                if cur.id == item.id:
                    items[idx] = item
                    break
            else:
                items.append(item)
            return self._dump(items), item

        return self.store.update(self._key(category), _upsert)

    def delete(self, category: str, item_id: str) -> bool:
        def _delete(raw):
            items = self._items(category, raw)
            kept = [i for i in items if i.id != item_id]
            if len(kept) == len(items):
                return raw, False
            return self._dump(kept), True

        return self.store.update(self._key(category), _delete)

    def seed(self, category: str) -> List[ItineraryItem]:
        items = seed_items(category)
        self.store.set(self._key(category), self._dump(items))
        return order_items(items)


def make_repository(store: LocalStore):
    """Pick the backend: Postgres when DATABASE_URL is set, local JSON otherwise."""
    if config.DATABASE_URL:
        from .postgres import PostgresItineraryRepository
        logger.info("itinerary storage: postgres")
        return PostgresItineraryRepository(config.DATABASE_URL)
    logger.info("itinerary storage: local file %s", store.path)
    return LocalItineraryRepository(store)

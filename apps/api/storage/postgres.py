# apps/api/storage/postgres.py
"""
Hosted Postgres backend for itinerary items.

Table ``itinerary_items``:
    id, title, date, end_date, day, time, cost, location_name, image_url,
    description, metadata (jsonb: {"category": ..., **details})

Each row is turned into an ItineraryItem exactly once in ``row_to_item``.
Dedicated columns win over anything of the same name inside ``metadata``.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import date
from typing import Any, Dict, Generator, List, Optional

import psycopg2
import psycopg2.pool
from psycopg2.extras import Json, RealDictCursor

from .. import config
from ..models.schemas import ItemDetails, ItineraryItem
from .itinerary import StorageError, order_items, seed_items

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS itinerary_items (
    id            TEXT PRIMARY KEY,
    title         TEXT NOT NULL,
    date          DATE,
    end_date      DATE,
    day           TEXT,
    time          TEXT,
    cost          TEXT,
    location_name TEXT,
    image_url     TEXT,
    description   TEXT,
    metadata      JSONB NOT NULL DEFAULT '{}'::jsonb
)
"""

_UPSERT = """
INSERT INTO itinerary_items (
    id, title, date, end_date, day, time, cost,
    location_name, image_url, description, metadata
) VALUES (
    %(id)s, %(title)s, %(date)s, %(end_date)s, %(day)s, %(time)s, %(cost)s,
    %(location_name)s, %(image_url)s, %(description)s, %(metadata)s
)
ON CONFLICT (id) DO UPDATE SET
    title = EXCLUDED.title, date = EXCLUDED.date, end_date = EXCLUDED.end_date,
    day = EXCLUDED.day, time = EXCLUDED.time, cost = EXCLUDED.cost,
    location_name = EXCLUDED.location_name, image_url = EXCLUDED.image_url,
    description = EXCLUDED.description, metadata = EXCLUDED.metadata
"""

_DETAIL_KEYS = ("overview", "food", "activity", "mustDos")


def _iso(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def row_to_item(row: Dict[str, Any]) -> ItineraryItem:
    meta = dict(row.get("metadata") or {})
    details = {k: meta[k] for k in _DETAIL_KEYS if k in meta}
    return ItineraryItem(
        id=str(row["id"]),
        title=row.get("title") or "",
        date=_iso(row.get("date")),
        end_date=_iso(row.get("end_date")),
        day=row.get("day") or "",
        time=row.get("time") or "",
        cost=row.get("cost") or "",
        map_query=row.get("location_name") or "",
        image=row.get("image_url") or "",
        description=row.get("description") or "",
        hidden_gem_id=meta.get("hiddenGemId", ""),
        details=ItemDetails.model_validate(details) if details else None,
    )


def item_to_row(category: str, item: ItineraryItem) -> Dict[str, Any]:
    meta: Dict[str, Any] = {"category": category, "hiddenGemId": item.hidden_gem_id}
    if item.details is not None:
        meta.update(item.details.model_dump(by_alias=True))
    return {
        "id": item.id,
        "title": item.title,
        "date": item.date,
        "end_date": item.end_date,
        "day": item.day,
        "time": item.time,
        "cost": item.cost,
        "location_name": item.map_query,
        "image_url": item.image,
        "description": item.description,
        "metadata": Json(meta),
    }


class PostgresItineraryRepository:
    name = "postgres"

    def __init__(self, dsn: str, pool: Optional[psycopg2.pool.AbstractConnectionPool] = None):
        self.dsn = dsn
        self._pool = pool
        self._schema_ready = False

    def _get_pool(self):
        if self._pool is None or self._pool.closed:
            self._pool = psycopg2.pool.ThreadedConnectionPool(
                minconn=config.DB_MIN_CONN,
                maxconn=config.DB_MAX_CONN,
                dsn=self.dsn,
            )
        return self._pool

    @contextmanager
    def _conn(self) -> Generator:
        """Borrow a connection; commit on success, roll back and wrap driver errors."""
        try:
            pool = self._get_pool()
            conn = pool.getconn()
        except psycopg2.Error as e:
            raise StorageError(f"cannot connect to database: {e}") from e
        try:
            if not self._schema_ready:
                with conn.cursor() as cur:
                    cur.execute(SCHEMA)
                self._schema_ready = True
            yield conn
            conn.commit()
        except psycopg2.Error as e:
            conn.rollback()
            logger.exception("database error")
            raise StorageError(str(e)) from e
        except Exception:
            conn.rollback()
            raise
        finally:
            pool.putconn(conn)

    def close(self):
        if self._pool is not None and not self._pool.closed:
            self._pool.closeall()
        self._pool = None

    def _fetch(self, conn, category: str) -> List[ItineraryItem]:
        with conn.cursor(cursor_factory=RealDictCursor) as cur:
            cur.execute(
                "SELECT * FROM itinerary_items WHERE metadata->>'category' = %s "
                "ORDER BY date ASC NULLS LAST, time ASC",
                (category,),
            )
            return [row_to_item(r) for r in cur.fetchall()]

    def _insert_many(self, conn, category: str, items: List[ItineraryItem]):
        with conn.cursor() as cur:
            for item in items:
                cur.execute(_UPSERT, item_to_row(category, item))

    def list(self, category: str) -> List[ItineraryItem]:
        with self._conn() as conn:
            items = self._fetch(conn, category)
            if not items:
                seeds = seed_items(category)
                if seeds:
                    logger.info("auto-seeding %d items for %s", len(seeds), category)
                    self._insert_many(conn, category, seeds)
                    items = seeds
        return order_items(items)

    def get(self, category: str, item_id: str) -> Optional[ItineraryItem]:
        with self._conn() as conn:
            with conn.cursor(cursor_factory=RealDictCursor) as cur:
                cur.execute(
                    "SELECT * FROM itinerary_items WHERE id = %s AND metadata->>'category' = %s",
                    (item_id, category),
                )
                row = cur.fetchone()
        return row_to_item(row) if row else None

    def upsert(self, category: str, item: ItineraryItem) -> ItineraryItem:
        with self._conn() as conn:
            self._insert_many(conn, category, [item])
        return item

    def delete(self, category: str, item_id: str) -> bool:
        with self._conn() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    "DELETE FROM itinerary_items WHERE id = %s AND metadata->>'category' = %s",
                    (item_id, category),
                )
                return cur.rowcount > 0

    def seed(self, category: str) -> List[ItineraryItem]:
        items = seed_items(category)
        with self._conn() as conn:
            with conn.cursor() as cur:
                cur.execute("DELETE FROM itinerary_items WHERE metadata->>'category' = %s", (category,))
            self._insert_many(conn, category, items)
        return order_items(items)

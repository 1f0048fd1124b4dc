# Packing checklist kept under "packing-list".
import time
from typing import List, Optional

from ..data.initial_data import DEFAULT_PACKING
from ..models.schemas import PackingItem, PackingView
from ..storage.local import LocalStore

PACKING_KEY = "packing-list"


def _items(raw) -> List[PackingItem]:
    return [PackingItem.model_validate(r) for r in (DEFAULT_PACKING if raw is None else raw)]


def _dump(items: List[PackingItem]) -> list:
    return [i.model_dump() for i in items]


def load(store: LocalStore) -> List[PackingItem]:
    return _items(store.get(PACKING_KEY))


def progress(items: List[PackingItem]) -> int:
    if not items:
        return 0
    return round(sum(1 for i in items if i.checked) / len(items) * 100)


def view(items: List[PackingItem]) -> PackingView:
    return PackingView(
        items=items,
        to_pack=[i for i in items if not i.checked],
        packed=[i for i in items if i.checked],
        progress=progress(items),
    )


def add(store: LocalStore, text: str) -> PackingItem:
    text = text.strip()
    if not text:
        raise ValueError("packing item text is empty")

    def _add(raw):
        items = _items(raw)
        item = PackingItem(id=str(int(time.time() * 1000)), text=text)
        # ms ids can collide on fast repeats
        while any(i.id == item.id for i in items):
            item.id = str(int(item.id) + 1)
        items.append(item)
        return _dump(items), item

    return store.update(PACKING_KEY, _add)


def toggle(store: LocalStore, item_id: str) -> Optional[PackingItem]:
    def _toggle(raw):
        items = _items(raw)
        for item in items:
            if item.id == item_id:
                item.checked = not item.checked
                return _dump(items), item
        return raw, None

    return store.update(PACKING_KEY, _toggle)


def delete(store: LocalStore, item_id: str) -> bool:
    def _delete(raw):
        items = _items(raw)
        kept = [i for i in items if i.id != item_id]
        if len(kept) == len(items):
            return raw, False
        return _dump(kept), True

    return store.update(PACKING_KEY, _delete)

# Travel tips kept under "travel-tips".
import time
from typing import List

from ..data.initial_data import DEFAULT_TIPS
from ..models.schemas import Tip
from ..storage.local import LocalStore

TIPS_KEY = "travel-tips"


def _tips(raw) -> List[Tip]:
    return [Tip.model_validate(r) for r in (DEFAULT_TIPS if raw is None else raw)]


def load(store: LocalStore) -> List[Tip]:
    return _tips(store.get(TIPS_KEY))


def add(store: LocalStore, text: str) -> Tip:
    text = text.strip()
    if not text:
        raise ValueError("tip text is empty")

    def _add(raw):
        tips = _tips(raw)
        tip = Tip(id=str(int(time.time() * 1000)), text=text)
        while any(t.id == tip.id for t in tips):
            tip.id = str(int(tip.id) + 1)
        tips.append(tip)
        return [t.model_dump() for t in tips], tip

    return store.update(TIPS_KEY, _add)


def delete(store: LocalStore, tip_id: str) -> bool:
    def _delete(raw):
        tips = _tips(raw)
        kept = [t for t in tips if t.id != tip_id]
        if len(kept) == len(tips):
            return raw, False
        return [t.model_dump() for t in kept], True

    return store.update(TIPS_KEY, _delete)

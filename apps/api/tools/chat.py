# Assistant transcript kept under "ai-chat-history".
from typing import Dict, List

from ..data.initial_data import GREETING
from ..graph import ChatState, run_chat
from ..models.schemas import ChatMessage, ItineraryItem
from ..storage.local import LocalStore

HISTORY_KEY = "ai-chat-history"


def _greeting() -> List[ChatMessage]:
    return [ChatMessage(role="ai", text=GREETING)]


def load(store: LocalStore) -> List[ChatMessage]:
    raw = store.get(HISTORY_KEY)
    if not raw:
        return _greeting()
    return [ChatMessage.model_validate(m) for m in raw]


def clear(store: LocalStore) -> List[ChatMessage]:
    store.delete(HISTORY_KEY)
    return _greeting()


def send(store: LocalStore, message: str, itinerary: Dict[str, List[ItineraryItem]]) -> ChatState:
    message = message.strip()
    if not message:
        raise ValueError("message is empty")
    history = load(store)
    result = run_chat(message, history, itinerary)
    history += [ChatMessage(role="user", text=message), ChatMessage(role="ai", text=result.reply)]
    store.set(HISTORY_KEY, [m.model_dump() for m in history])
    result.history = history
    return result

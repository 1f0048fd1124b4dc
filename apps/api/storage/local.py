# apps/api/storage/local.py
# Single JSON file holding every key the planner persists locally
# (itineraries, trip dates, budget, packing list, tips, chat transcript).
import json, logging, os, threading
from typing import Any, Callable, Dict, Tuple, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class LocalStore:
    def __init__(self, path: str):
        self.path = path
        self._lock = threading.Lock()

    def _read(self) -> Dict[str, Any]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("local store %s unreadable (%s); starting empty", self.path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: Dict[str, Any]):
        parent = os.path.dirname(self.path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        tmp = self.path + ".tmp"
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        os.replace(tmp, self.path)

    def get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            return self._read().get(key, default)

    def set(self, key: str, value: Any):
        with self._lock:
            data = self._read()
            data[key] = value
            self._write(data)

    def delete(self, key: str):
        with self._lock:
            data = self._read()
            if data.pop(key, None) is not None:
                self._write(data)

    def update(self, key: str, fn: Callable[[Any], Tuple[Any, T]], default: Any = None) -> T:
        """Read-modify-write one key under the lock.

        ``fn`` gets the current value (or ``default``) and returns
        ``(new_value, result)``; ``new_value`` is written back and ``result``
        returned. Return the current value unchanged to skip the write.
        """
        with self._lock:
            data = self._read()
            current = data.get(key, default)
            new_value, result = fn(current)
            if new_value is not current:
                data[key] = new_value
                self._write(data)
            return result

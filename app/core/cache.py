from __future__ import annotations
import threading
import time
from typing import Any, Callable, Dict, Hashable, Optional, Tuple

Clock = Callable[[], float]

class TTLCache:
    """
    Small, process-local TTL cache shared between request threads.

    Expiry is lazy (checked on `get`), measured from insertion. When full,
    the oldest insertion is dropped to make room.
    """
    def __init__(self, ttl_seconds: float = 3600.0, max_items: int = 512, clock: Clock = time.monotonic):
        if max_items < 1:
            raise ValueError("max_items must be >= 1")
        self.ttl = ttl_seconds
        self.max_items = max_items
        self._clock = clock
        self._lock = threading.Lock()
        self._store: Dict[Hashable, Tuple[float, Any]] = {}

    def get(self, key: Hashable) -> Optional[Any]:
        with self._lock:
            item = self._store.get(key)
            if item is None:
                return None
            inserted, val = item
            if self._clock() - inserted >= self.ttl:
                self._store.pop(key, None)
                return None
            return val

    def set(self, key: Hashable, value: Any) -> None:
        with self._lock:
            # overwrite in place; only evict when adding a new key
            if key not in self._store and len(self._store) >= self.max_items:
                oldest = min(self._store.items(), key=lambda p: p[1][0])[0]
                self._store.pop(oldest, None)
            self._store[key] = (self._clock(), value)

    def clear(self) -> None:
        with self._lock:
            self._store.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    def __contains__(self, key: Hashable) -> bool:
        return self.get(key) is not None

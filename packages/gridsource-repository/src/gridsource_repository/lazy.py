from __future__ import annotations

import threading
from typing import Callable, Dict, Generic, Hashable, TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)

_UNSET = object()


class Lazy(Generic[T]):
    """Value computed on first access and kept for the lifetime of the holder."""

    def __init__(self, factory: Callable[[], T]):
        self._factory = factory
        self._value = _UNSET
        self._lock = threading.Lock()

    @property
    def is_computed(self) -> bool:
        return self._value is not _UNSET

    def get(self) -> T:
        if self._value is _UNSET:
            with self._lock:
                if self._value is _UNSET:
                    self._value = self._factory()
        return self._value


class Memo(Generic[K, T]):
    """Write-once-per-key cache. Entries are never replaced or evicted."""

    def __init__(self):
        self._entries: Dict[K, T] = {}
        self._lock = threading.RLock()

    def __contains__(self, key: K) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get_or_compute(self, key: K, compute: Callable[[K], T]) -> T:
        if key not in self._entries:
            with self._lock:
                if key not in self._entries:
                    self._entries[key] = compute(key)
        return self._entries[key]

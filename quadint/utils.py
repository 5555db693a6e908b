import logging
from dataclasses import dataclass, field
from threading import RLock
from typing import Callable, Generic, Hashable, Iterator, Optional, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

_logger = logging.getLogger(__name__)


@dataclass
class _Slot(Generic[V]):
    lock: RLock
    value: Optional[V] = None
    filled: bool = False


@dataclass
class RingCache(Generic[K, V]):
    """
    Read-through memo table for expensive per-ring results (fundamental units, class numbers).

    Entries are never invalidated. A per-key lock makes compute-if-absent run the computation
    at most once per key, even with several threads asking for the same expensive entry, while
    the table lock only guards slot creation.
    """
    name: str = "cache"
    _slots: dict[K, _Slot[V]] = field(default_factory=dict)
    _lock: RLock = field(default_factory=RLock)

    def _slot(self, key: K) -> _Slot[V]:
        with self._lock:
            slot = self._slots.get(key)
            if slot is None:
                slot = _Slot(lock=RLock())
                self._slots[key] = slot
            return slot

    def get(self, key: K) -> Optional[V]:
        """Return the cached value for key, or None."""
        with self._lock:
            slot = self._slots.get(key)
        if slot is None:
            return None
        with slot.lock:
            return slot.value if slot.filled else None

    def put(self, key: K, value: V) -> None:
        slot = self._slot(key)
        with slot.lock:
            slot.value = value
            slot.filled = True
        _logger.debug("%s: stored %s -> %s", self.name, key, value)

    def get_or_compute(self, key: K, compute: Callable[[K], V], store: Callable[[V], bool] = lambda _: True) -> V:
        """
        Return the cached value for key, computing it on a miss.

        Args:
            key: The cache key.
            compute: Called with the key on a miss.
            store: Decides whether a freshly computed value is worth keeping.

        Returns:
            The cached or computed value.
        """
        slot = self._slot(key)
        with slot.lock:
            if slot.filled:
                _logger.debug("%s: hit for %s", self.name, key)
                return slot.value  # type: ignore[return-value]

            value = compute(key)
            if store(value):
                slot.value = value
                slot.filled = True
                _logger.debug("%s: stored %s -> %s", self.name, key, value)
            return value

    def __contains__(self, key: object) -> bool:
        with self._lock:
            slot = self._slots.get(key)  # type: ignore[call-overload]
        return slot is not None and slot.filled

    def __iter__(self) -> Iterator[K]:
        with self._lock:
            keys = [k for k, s in self._slots.items() if s.filled]
        return iter(keys)

    def __len__(self) -> int:
        with self._lock:
            return sum(1 for s in self._slots.values() if s.filled)

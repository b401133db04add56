import threading
from collections.abc import Iterator
from typing import Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class ConcurrentMap(Generic[K, V]):
    """A dict whose single-key operations are each guarded by one lock.

    Every method is atomic on its own; nothing makes a *sequence* of calls
    atomic.  ``contains`` followed by ``set`` leaves a window in which
    another thread may store the same key.  Use ``set_default`` when the
    check and the insert must happen together.
    """

    def __init__(self) -> None:
        self._data: dict[K, V] = {}
        self._lock = threading.Lock()

    def get(self, key: K) -> V | None:
        with self._lock:
            return self._data.get(key)

    def set(self, key: K, value: V) -> None:
        with self._lock:
            self._data[key] = value

    def set_default(self, key: K, value: V) -> tuple[V, bool]:
        """Store ``value`` unless ``key`` is present.

        Returns ``(actual, loaded)`` where ``loaded`` is True if an existing
        value was kept.
        """
        with self._lock:
            if key in self._data:
                return self._data[key], True
            self._data[key] = value
            return value, False

    def contains(self, key: K) -> bool:
        with self._lock:
            return key in self._data

    def items(self) -> list[tuple[K, V]]:
        with self._lock:
            return list(self._data.items())

    def keys(self) -> list[K]:
        with self._lock:
            return list(self._data.keys())

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __iter__(self) -> Iterator[K]:
        return iter(self.keys())

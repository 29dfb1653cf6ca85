from __future__ import annotations

from threading import Lock
from typing import Callable, Dict, Generic, Iterable, Iterator, List, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class Registry(Generic[K, V]):
    """Small thread-safe mapping of keys to values.

    Typical usage:
        AUDITS = Registry[str, AuditEntry]("audits")

        @AUDITS.register("my-audit")
        async def run(...):
            ...

    Registering an existing key raises unless ``replace=True``.
    """

    def __init__(self, name: str = "registry") -> None:
        self._name = name
        self._lock = Lock()
        self._items: Dict[K, V] = {}

    def register(self, key: K, *, replace: bool = False) -> Callable[[V], V]:
        def deco(value: V) -> V:
            self.add(key, value, replace=replace)
            return value

        return deco

    def add(self, key: K, value: V, *, replace: bool = False) -> None:
        with self._lock:
            if key in self._items and not replace:
                raise ValueError(f"{self._name}: key {key!r} is already registered")
            self._items[key] = value

    def remove(self, key: K) -> Optional[V]:
        with self._lock:
            return self._items.pop(key, None)

    def get(self, key: K) -> V:
        with self._lock:
            if key not in self._items:
                raise KeyError(f"{self._name}: unknown key {key!r}")
            return self._items[key]

    def try_get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        with self._lock:
            return self._items.get(key, default)

    def keys(self) -> List[K]:
        with self._lock:
            return list(self._items.keys())

    def items(self) -> Iterable[tuple[K, V]]:
        with self._lock:
            return list(self._items.items())

    def __contains__(self, key: K) -> bool:
        with self._lock:
            return key in self._items

    def __iter__(self) -> Iterator[K]:
        return iter(self.keys())

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

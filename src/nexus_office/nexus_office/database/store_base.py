from __future__ import annotations

from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from .store import LocalStore

T = TypeVar("T")

Record = Dict[str, Any]


class StoreCollection(Generic[T]):
    """One entity list kept under one store key.

    Converts between persisted dict records and model instances. Defaults are
    built lazily, only when the key has to be read.
    """

    def __init__(
        self,
        store: LocalStore,
        key: str,
        *,
        from_dict: Callable[[Record], T],
        to_dict: Callable[[T], Record],
        defaults: Optional[Callable[[], List[Record]]] = None,
    ):
        self._store = store
        self._key = key
        self._from_dict = from_dict
        self._to_dict = to_dict
        self._defaults = defaults or list

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> List[T]:
        rows = self._store.read(self._key, self._defaults())
        return [self._from_dict(r) for r in rows]

    def save(self, items: List[T]) -> None:
        self._store.write(self._key, [self._to_dict(i) for i in items])


def find_index(items: List[T], predicate: Callable[[T], bool]) -> int:
    for idx, item in enumerate(items):
        if predicate(item):
            return idx
    return -1

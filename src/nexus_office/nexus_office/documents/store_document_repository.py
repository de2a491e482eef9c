from __future__ import annotations

from typing import Callable, List, Optional, Sequence

from ..core.constants import DOCUMENTS_KEY
from ..database.store import LocalStore
from ..database.store_base import Record, StoreCollection
from .model import DocumentItem
from .repository import DocumentRepository


class StoreDocumentRepository(DocumentRepository):
    def __init__(self, store: LocalStore, *, defaults: Optional[Callable[[], List[Record]]] = None):
        self._items = StoreCollection(
            store,
            DOCUMENTS_KEY,
            from_dict=DocumentItem.from_dict,
            to_dict=DocumentItem.to_dict,
            defaults=defaults,
        )

    def list_all(self) -> Sequence[DocumentItem]:
        return self._items.load()

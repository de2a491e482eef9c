from __future__ import annotations

import copy
import json
import logging
from typing import Any, Dict, List, Mapping, Optional

from ..core.constants import STORE_NAMESPACE, USERS_KEY
from .backends import StorageBackend
from .notifier import Callback, ChangeNotifier, Detach, ExternalChangeSource

logger = logging.getLogger(__name__)


class LocalStore:
    """Key-addressed JSON blob storage with write-then-notify semantics.

    Logical key `k` is stored at backend key `namespace + k`. There is no
    locking and no schema version: writers sharing a backend simply overwrite
    each other.
    """

    def __init__(
        self,
        backend: StorageBackend,
        *,
        namespace: str = STORE_NAMESPACE,
        merge_keys: Optional[Mapping[str, str]] = None,
        notifier: Optional[ChangeNotifier] = None,
    ):
        self._backend = backend
        self._namespace = namespace
        # logical key -> id field used to merge default records into stored ones
        self._merge_keys: Dict[str, str] = dict({USERS_KEY: "id"} if merge_keys is None else merge_keys)
        self._notifier = notifier or ChangeNotifier()
        self._sources: List[ExternalChangeSource] = []

    @property
    def namespace(self) -> str:
        return self._namespace

    def backend_key(self, key: str) -> str:
        return f"{self._namespace}{key}"

    def read(self, key: str, default: Any) -> Any:
        """Return the value under `key`, persisting `default` if absent.

        Neither the default write nor a merge notifies subscribers.
        """

        full_key = self.backend_key(key)
        stored = self._backend.get_item(full_key)
        if stored is None:
            value = copy.deepcopy(default)
            self._backend.set_item(full_key, json.dumps(value))
            return value

        value = json.loads(stored)
        id_field = self._merge_keys.get(key)
        if id_field and isinstance(value, list) and isinstance(default, list):
            stored_ids = {item.get(id_field) for item in value}
            missing = [copy.deepcopy(item) for item in default if item.get(id_field) not in stored_ids]
            if missing:
                value = value + missing
                self._backend.set_item(full_key, json.dumps(value))
                logger.info("Merged %d default record(s) into %s", len(missing), full_key)
        return value

    def write(self, key: str, value: Any) -> None:
        full_key = self.backend_key(key)
        self._backend.set_item(full_key, json.dumps(value))
        self._notifier.notify()
        for source in list(self._sources):
            source.announce(full_key)

    def subscribe(self, callback: Callback) -> Detach:
        return self._notifier.subscribe(callback)

    def attach_external_source(self, source: ExternalChangeSource) -> Detach:
        """Route writes reported by `source` into the local notification path."""

        def on_external_change(full_key: str) -> None:
            if full_key and full_key.startswith(self._namespace):
                self._notifier.notify()

        detach_listener = source.attach(on_external_change)
        self._sources.append(source)

        def detach() -> None:
            detach_listener()
            self._sources = [s for s in self._sources if s is not source]

        return detach

    def reset(self) -> int:
        """Remove every key under the namespace. Returns how many were removed."""

        removed = 0
        for full_key in list(self._backend.keys()):
            if full_key.startswith(self._namespace):
                self._backend.remove_item(full_key)
                removed += 1
        logger.info("Store reset: removed %d key(s) under %r", removed, self._namespace)
        self._notifier.notify()
        return removed

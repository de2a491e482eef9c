from __future__ import annotations

from dataclasses import replace
from typing import Callable, List, Optional, Sequence

from ..core.constants import TASKS_KEY
from ..core.enums import TaskStatus
from ..database.store import LocalStore
from ..database.store_base import Record, StoreCollection, find_index
from .model import Task
from .repository import TaskRepository


class StoreTaskRepository(TaskRepository):
    def __init__(self, store: LocalStore, *, defaults: Optional[Callable[[], List[Record]]] = None):
        self._tasks = StoreCollection(
            store,
            TASKS_KEY,
            from_dict=Task.from_dict,
            to_dict=Task.to_dict,
            defaults=defaults,
        )

    def list_for_user(self, user_id: str) -> Sequence[Task]:
        return [t for t in self._tasks.load() if t.user_id == user_id]

    def prepend(self, task: Task) -> None:
        items = self._tasks.load()
        items.insert(0, task)
        self._tasks.save(items)

    def set_status(self, task_id: str, status: TaskStatus) -> bool:
        items = self._tasks.load()
        idx = find_index(items, lambda t: t.task_id == task_id)
        if idx == -1:
            return False
        items[idx] = replace(items[idx], status=status)
        self._tasks.save(items)
        return True

    def delete(self, task_id: str) -> bool:
        items = self._tasks.load()
        kept = [t for t in items if t.task_id != task_id]
        self._tasks.save(kept)
        return len(kept) != len(items)

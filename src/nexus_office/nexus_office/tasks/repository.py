from __future__ import annotations

from typing import Protocol, Sequence

from ..core.enums import TaskStatus
from .model import Task


class TaskRepository(Protocol):
    def list_for_user(self, user_id: str) -> Sequence[Task]:
        raise NotImplementedError

    def prepend(self, task: Task) -> None:
        raise NotImplementedError

    def set_status(self, task_id: str, status: TaskStatus) -> bool:
        raise NotImplementedError

    def delete(self, task_id: str) -> bool:
        raise NotImplementedError

from __future__ import annotations

from datetime import date
from typing import Dict, List, Optional

from ..common.ids import new_id
from ..common.latency import SimulatedLatency
from ..common.validators import require_non_empty
from ..core.constants import LATENCY_TASK_CREATE_MS
from ..core.enums import TaskPriority, TaskStatus
from .model import Task
from .repository import TaskRepository


class TaskService:
    """Personal task board."""

    def __init__(self, tasks: TaskRepository, *, latency: Optional[SimulatedLatency] = None):
        self._tasks = tasks
        self._latency = latency or SimulatedLatency()

    def list_tasks(self, user_id: str) -> List[Task]:
        return list(self._tasks.list_for_user(user_id))

    def board(self, user_id: str) -> Dict[TaskStatus, List[Task]]:
        """Tasks grouped by column; TODO sorted by due date, undated last."""

        columns: Dict[TaskStatus, List[Task]] = {s: [] for s in TaskStatus}
        for t in self.list_tasks(user_id):
            columns[t.status].append(t)
        columns[TaskStatus.TODO].sort(key=lambda t: (t.due_date is None, t.due_date or date.max))
        return columns

    def create(
        self,
        *,
        user_id: str,
        title: str,
        priority: TaskPriority = TaskPriority.MEDIUM,
        status: TaskStatus = TaskStatus.TODO,
        description: Optional[str] = None,
        due_date: Optional[date] = None,
    ) -> Task:
        self._latency.pause(LATENCY_TASK_CREATE_MS)
        task = Task(
            task_id=new_id(),
            user_id=user_id,
            title=require_non_empty(title, "Title"),
            status=status,
            priority=priority,
            description=(description or "").strip() or None,
            due_date=due_date,
        )
        self._tasks.prepend(task)
        return task

    def update_status(self, task_id: str, status: TaskStatus) -> bool:
        """Unknown ids are a no-op (False)."""
        return self._tasks.set_status(task_id, status)

    def delete(self, task_id: str) -> bool:
        return self._tasks.delete(task_id)

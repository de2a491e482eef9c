from __future__ import annotations

import random
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from .announcements.service import AnnouncementService
from .announcements.store_announcement_repository import StoreAnnouncementRepository
from .assist.client import DEFAULT_MODEL, AnnouncementDraftClient
from .attendance.factory import AttendanceStrategyFactory
from .attendance.service import AttendanceService
from .attendance.store_attendance_repository import StoreAttendanceRepository
from .common.datetime_utils import now_local
from .common.latency import SimulatedLatency
from .core.constants import STORE_NAMESPACE
from .dashboard.service import StatsService
from .database import seed_data
from .database.backends import JsonFileBackend, MemoryBackend, StorageBackend
from .database.bootstrap import seed_today_attendance
from .database.notifier import RevisionCounter
from .database.store import LocalStore
from .documents.store_document_repository import StoreDocumentRepository
from .leaves.service import LeaveService
from .leaves.store_leave_repository import StoreLeaveRepository
from .notifications.service import NotificationService
from .notifications.store_notification_repository import StoreNotificationRepository
from .payroll.service import PayrollService
from .payroll.store_payroll_repository import StorePayrollRepository
from .tasks.service import TaskService
from .tasks.store_task_repository import StoreTaskRepository
from .users.service import AuthService, UserService
from .users.store_user_repository import StoreUserRepository


@dataclass(frozen=True)
class StoreConfig:
    path: Optional[str] = None
    namespace: str = STORE_NAMESPACE


@dataclass(frozen=True)
class Container:
    store: LocalStore
    revision: RevisionCounter

    users_repo: StoreUserRepository
    attendance_repo: StoreAttendanceRepository
    leaves_repo: StoreLeaveRepository
    announcements_repo: StoreAnnouncementRepository
    documents_repo: StoreDocumentRepository
    tasks_repo: StoreTaskRepository
    payroll_repo: StorePayrollRepository
    notifications_repo: StoreNotificationRepository

    auth_service: AuthService
    user_service: UserService
    attendance_service: AttendanceService
    notification_service: NotificationService
    leave_service: LeaveService
    announcement_service: AnnouncementService
    task_service: TaskService
    payroll_service: PayrollService
    stats_service: StatsService


def _make_backend(config: StoreConfig) -> StorageBackend:
    if config.path:
        return JsonFileBackend(config.path)
    return MemoryBackend()


def build_container(
    *,
    store_config: dict,
    assist_config: Optional[dict] = None,
    simulated_latency: bool = False,
    seed_on_startup: bool = False,
    backend: Optional[StorageBackend] = None,
    clock: Callable[[], datetime] = now_local,
    rng: Optional[random.Random] = None,
) -> Container:
    config = StoreConfig(
        path=store_config.get("path") or None,
        namespace=str(store_config.get("namespace") or STORE_NAMESPACE),
    )
    store = LocalStore(backend or _make_backend(config), namespace=config.namespace)
    revision = RevisionCounter()
    store.subscribe(revision)

    assist_config = assist_config or {}
    assist = AnnouncementDraftClient(
        assist_config.get("api_key"),
        model=str(assist_config.get("model") or DEFAULT_MODEL),
        timeout=float(assist_config.get("timeout", 30)),
    )
    latency = SimulatedLatency(simulated_latency)
    factory = AttendanceStrategyFactory()

    users_repo = StoreUserRepository(store, defaults=seed_data.default_users)
    attendance_repo = StoreAttendanceRepository(store)
    leaves_repo = StoreLeaveRepository(store)
    announcements_repo = StoreAnnouncementRepository(store, defaults=seed_data.default_announcements)
    documents_repo = StoreDocumentRepository(store, defaults=seed_data.default_documents)
    tasks_repo = StoreTaskRepository(store, defaults=seed_data.default_tasks)
    payroll_repo = StorePayrollRepository(store, defaults=seed_data.default_payroll)
    notifications_repo = StoreNotificationRepository(store)

    auth_service = AuthService(users_repo, latency=latency)
    user_service = UserService(users_repo)
    attendance_service = AttendanceService(
        attendance_repo,
        user_service,
        strategy_factory=factory,
        latency=latency,
        clock=clock,
    )
    notification_service = NotificationService(notifications_repo, latency=latency, clock=clock)
    leave_service = LeaveService(leaves_repo, notification_service, latency=latency, clock=clock)
    announcement_service = AnnouncementService(
        announcements_repo,
        notification_service,
        assist=assist,
        latency=latency,
        clock=clock,
    )
    task_service = TaskService(tasks_repo, latency=latency)
    payroll_service = PayrollService(payroll_repo, user_service)
    stats_service = StatsService(users_repo, attendance_repo, leave_service, clock=clock)

    if seed_on_startup:
        seed_today_attendance(attendance_repo, users_repo, now=clock(), rng=rng, strategy_factory=factory)

    return Container(
        store=store,
        revision=revision,
        users_repo=users_repo,
        attendance_repo=attendance_repo,
        leaves_repo=leaves_repo,
        announcements_repo=announcements_repo,
        documents_repo=documents_repo,
        tasks_repo=tasks_repo,
        payroll_repo=payroll_repo,
        notifications_repo=notifications_repo,
        auth_service=auth_service,
        user_service=user_service,
        attendance_service=attendance_service,
        notification_service=notification_service,
        leave_service=leave_service,
        announcement_service=announcement_service,
        task_service=task_service,
        payroll_service=payroll_service,
        stats_service=stats_service,
    )

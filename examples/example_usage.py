"""Example: drive the service layer directly (no Flask).

Two stores share one in-memory backend and a change channel, the way two
browser tabs share local storage. A write in one wakes the other.
"""

import importlib
from datetime import date, timedelta

from config import get_settings_module

from src.nexus_office.nexus_office.container import build_container
from src.nexus_office.nexus_office.core.enums import LeaveType, RequestStatus, Role
from src.nexus_office.nexus_office.database.backends import MemoryBackend
from src.nexus_office.nexus_office.database.notifier import LocalChangeChannel


def main():
    settings = importlib.import_module(get_settings_module())
    backend = MemoryBackend()
    channel = LocalChangeChannel()

    employee_tab = build_container(store_config=settings.STORE_CONFIG, backend=backend)
    admin_tab = build_container(store_config=settings.STORE_CONFIG, backend=backend)
    employee_tab.store.attach_external_source(channel.endpoint())
    admin_tab.store.attach_external_source(channel.endpoint())

    record = employee_tab.attendance_service.check_in("u2")
    print("check-in:", record.to_dict())
    print("admin tab revision after employee write:", admin_tab.revision.revision)

    start = date.today() + timedelta(days=7)
    leave = employee_tab.leave_service.create(
        user_id="u2",
        user_name="John Doe",
        start_date=start,
        end_date=start + timedelta(days=2),
        reason="Family trip",
        leave_type=LeaveType.VACATION,
    )
    for n in admin_tab.notification_service.list_for("u1", Role.ADMIN):
        print("admin sees:", n.message)

    admin_tab.leave_service.update_status(leave.request_id, RequestStatus.APPROVED, current_role=Role.ADMIN)
    for n in employee_tab.notification_service.list_for("u2", Role.EMPLOYEE):
        print("employee sees:", n.message)

    print("today:", admin_tab.stats_service.today_stats().to_dict())


if __name__ == "__main__":
    main()

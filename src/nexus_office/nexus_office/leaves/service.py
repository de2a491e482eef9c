from __future__ import annotations

from datetime import date, datetime
from typing import Callable, List, Optional

from ..common.datetime_utils import now_local
from ..common.ids import new_id
from ..common.latency import SimulatedLatency
from ..common.validators import require_non_empty
from ..core.constants import LATENCY_LEAVE_CREATE_MS, LATENCY_LEAVE_DECIDE_MS
from ..core.enums import LeaveType, NotificationTarget, NotificationType, RequestStatus, Role
from ..core.exceptions import AuthorizationError, ValidationError
from ..notifications.service import NotificationService
from .model import LeaveRequest
from .repository import LeaveRepository


class LeaveService:
    """Leave workflow: employees file requests, admins approve or reject them."""

    def __init__(
        self,
        leaves: LeaveRepository,
        notifications: NotificationService,
        *,
        latency: Optional[SimulatedLatency] = None,
        clock: Callable[[], datetime] = now_local,
    ):
        self._leaves = leaves
        self._notifications = notifications
        self._latency = latency or SimulatedLatency()
        self._clock = clock

    def list_requests(self, *, user_id: Optional[str] = None) -> List[LeaveRequest]:
        items = list(self._leaves.list_all())
        if user_id:
            items = [r for r in items if r.user_id == user_id]
        items.sort(key=lambda r: r.created_at, reverse=True)
        return items

    def active_on(self, day: date) -> List[LeaveRequest]:
        """Approved requests whose date range covers `day`."""

        return [r for r in self._leaves.list_all() if r.status == RequestStatus.APPROVED and r.covers(day)]

    def create(
        self,
        *,
        user_id: str,
        user_name: str,
        start_date: date,
        end_date: date,
        reason: str,
        leave_type: LeaveType,
    ) -> LeaveRequest:
        self._latency.pause(LATENCY_LEAVE_CREATE_MS)

        if end_date < start_date:
            raise ValidationError("End date must be on or after the start date")
        reason = require_non_empty(reason, "Reason")

        request = LeaveRequest(
            request_id=new_id(),
            user_id=user_id,
            user_name=user_name,
            start_date=start_date,
            end_date=end_date,
            reason=reason,
            leave_type=leave_type,
            status=RequestStatus.PENDING,
            created_at=self._clock(),
        )
        self._leaves.prepend(request)

        self._notifications.notify(
            target_role=NotificationTarget.ADMIN,
            message=f"{user_name} requested {leave_type.value} leave",
            notification_type=NotificationType.ALERT,
        )
        return request

    def update_status(self, request_id: str, status: RequestStatus, *, current_role: Role) -> Optional[LeaveRequest]:
        """Approve or reject a pending request.

        Unknown ids are a no-op (returns None). Decided requests are final.
        """

        self._latency.pause(LATENCY_LEAVE_DECIDE_MS)

        if current_role != Role.ADMIN:
            raise AuthorizationError("Only admins can decide leave requests")

        if status not in (RequestStatus.APPROVED, RequestStatus.REJECTED):
            raise ValidationError("A leave request can only be approved or rejected")

        current = self._leaves.get(request_id)
        if not current:
            return None
        if current.status != RequestStatus.PENDING:
            raise ValidationError("This leave request has already been processed")

        updated = self._leaves.set_status(request_id, status)
        if not updated:
            return None

        self._notifications.notify(
            target_role=NotificationTarget.EMPLOYEE,
            target_user_id=updated.user_id,
            message=f"Your leave request was {status.value.lower()}",
            notification_type=NotificationType.SUCCESS if status == RequestStatus.APPROVED else NotificationType.ALERT,
        )
        return updated

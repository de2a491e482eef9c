from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for dashboards and route gating."""

    ADMIN = "ADMIN"
    EMPLOYEE = "EMPLOYEE"


class AttendanceStatus(str, Enum):
    PRESENT = "PRESENT"
    LATE = "LATE"
    HALF_DAY = "HALF_DAY"
    ABSENT = "ABSENT"
    PENDING = "PENDING"
    WORK_FROM_HOME = "WORK_FROM_HOME"


class RequestStatus(str, Enum):
    """Approval state of a leave request."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class LeaveType(str, Enum):
    SICK = "SICK"
    VACATION = "VACATION"
    PERSONAL = "PERSONAL"


class DocumentType(str, Enum):
    PDF = "PDF"
    DOC = "DOC"
    IMG = "IMG"


class DocumentCategory(str, Enum):
    CONTRACT = "CONTRACT"
    POLICY = "POLICY"
    TAX = "TAX"


class TaskStatus(str, Enum):
    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"


class TaskPriority(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class PayrollStatus(str, Enum):
    PAID = "PAID"
    PROCESSING = "PROCESSING"


class NotificationTarget(str, Enum):
    ADMIN = "ADMIN"
    EMPLOYEE = "EMPLOYEE"
    ALL = "ALL"


class NotificationType(str, Enum):
    INFO = "INFO"
    ALERT = "ALERT"
    SUCCESS = "SUCCESS"

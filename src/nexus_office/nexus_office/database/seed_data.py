"""Default datasets written on first read of each collection."""

from __future__ import annotations

from functools import lru_cache
from typing import List

from werkzeug.security import generate_password_hash

from ..common.datetime_utils import now_local
from ..core.constants import DEFAULT_CREDENTIAL
from .store_base import Record

_USERS = [
    ("u1", "Admin User", "admin@company.com", "ADMIN", "Director of Operations", None),
    ("u2", "John Doe", "john@company.com", "EMPLOYEE", "Software Engineer", "Engineering"),
    ("u3", "Jane Smith", "jane@company.com", "EMPLOYEE", "Product Designer", "Design"),
    ("u4", "Mike Johnson", "mike@company.com", "EMPLOYEE", "Sales Executive", "Sales"),
    ("u5", "Sarah Williams", "sarah@company.com", "EMPLOYEE", "HR Specialist", "Human Resources"),
    ("u6", "David Chen", "david@company.com", "EMPLOYEE", "Frontend Developer", "Engineering"),
    ("u7", "Emily Davis", "emily@company.com", "EMPLOYEE", "Marketing Manager", "Marketing"),
]


@lru_cache(maxsize=1)
def _default_user_rows() -> tuple:
    # One hash per process, shared by every seed user.
    hashed = generate_password_hash(DEFAULT_CREDENTIAL)
    return tuple(
        {
            "id": user_id,
            "name": name,
            "email": email,
            "role": role,
            "password_hash": hashed,
            "department": department,
            "job_title": job_title,
        }
        for user_id, name, email, role, job_title, department in _USERS
    )


def default_users() -> List[Record]:
    return [dict(row) for row in _default_user_rows()]


def default_announcements() -> List[Record]:
    return [
        {
            "id": "a1",
            "title": "Welcome to Nexus OS 2.0",
            "content": "We have upgraded the system. Check out the new Task Manager and Directory features!",
            "author_id": "u1",
            "created_at": now_local().isoformat(),
            "is_ai_generated": False,
        }
    ]


def default_documents() -> List[Record]:
    return [
        {"id": "d1", "title": "Employment Contract", "type": "PDF", "date": "2024-01-15", "category": "CONTRACT"},
        {"id": "d2", "title": "Company Handbook 2024", "type": "PDF", "date": "2024-01-01", "category": "POLICY"},
        {"id": "d3", "title": "Tax Form W-2", "type": "PDF", "date": "2024-02-20", "category": "TAX"},
    ]


def default_tasks() -> List[Record]:
    return [
        {"id": "t1", "user_id": "u2", "title": "Review PR #420", "status": "TODO", "priority": "HIGH"},
        {"id": "t2", "user_id": "u2", "title": "Update documentation", "status": "IN_PROGRESS", "priority": "MEDIUM"},
        {"id": "t3", "user_id": "u2", "title": "Team Sync", "status": "DONE", "priority": "LOW"},
    ]


def default_payroll() -> List[Record]:
    return [
        {"id": "p1", "user_id": "u2", "month": "October 2024", "amount": 5400, "status": "PAID", "date_paid": "2024-10-28"},
        {"id": "p2", "user_id": "u2", "month": "November 2024", "amount": 5400, "status": "PAID", "date_paid": "2024-11-28"},
        {"id": "p3", "user_id": "u2", "month": "December 2024", "amount": 5600, "status": "PROCESSING"},
        {"id": "p4", "user_id": "u3", "month": "December 2024", "amount": 6200, "status": "PROCESSING"},
        {"id": "p5", "user_id": "u4", "month": "December 2024", "amount": 4800, "status": "PROCESSING"},
        {"id": "p6", "user_id": "u5", "month": "December 2024", "amount": 5100, "status": "PROCESSING"},
    ]

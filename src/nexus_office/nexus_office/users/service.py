from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple, TypeVar

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.ids import new_id
from ..common.latency import SimulatedLatency
from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_CREDENTIAL, LATENCY_LOGIN_MS
from ..core.enums import Role
from ..core.exceptions import AuthenticationError
from .model import User
from .repository import UserRepository

T = TypeVar("T")


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, users: UserRepository, *, latency: Optional[SimulatedLatency] = None):
        self._users = users
        self._latency = latency or SimulatedLatency()

    def authenticate(self, email: str, password: str) -> User:
        self._latency.pause(LATENCY_LOGIN_MS)

        user = self._users.get_by_email((email or "").strip())
        if not user:
            raise AuthenticationError("Invalid email or password")

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except ValueError:
            # e.g. an empty or hand-edited hash in storage
            ok = False

        if not ok:
            raise AuthenticationError("Invalid email or password")
        return user


class UserService:
    """Use case: employee directory and workforce management (admin)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def list_users(self, *, role: Optional[Role] = None) -> List[User]:
        users = list(self._users.list_all())
        if role is not None:
            users = [u for u in users if u.role == role]
        return users

    def get_user(self, user_id: str) -> Optional[User]:
        return self._users.get_by_id(user_id)

    def add_employee(
        self,
        *,
        name: str,
        email: str,
        job_title: Optional[str] = None,
        department: Optional[str] = None,
        password: Optional[str] = None,
        role: Role = Role.EMPLOYEE,
    ) -> User:
        """Add a user. Email uniqueness is expected but not enforced."""

        user = User(
            user_id=new_id(),
            name=require_non_empty(name, "Name"),
            email=require_non_empty(email, "Email"),
            role=role,
            password_hash=generate_password_hash(password or DEFAULT_CREDENTIAL),
            department=(department or "").strip() or None,
            job_title=(job_title or "").strip() or None,
        )
        self._users.add(user)
        return user

    def attach_users(self, records: Iterable[T], *, attr: str = "user_id") -> List[Tuple[T, Optional[User]]]:
        """Pair each record with the user its `attr` points at.

        Reads the user list once and indexes it per call: O(n + m), no caching.
        """

        by_id: Dict[str, User] = {u.user_id: u for u in self._users.list_all()}
        return [(r, by_id.get(getattr(r, attr))) for r in records]

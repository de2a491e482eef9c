from __future__ import annotations

from typing import Callable, List, Optional, Sequence

from ..core.constants import USERS_KEY
from ..database.store import LocalStore
from ..database.store_base import Record, StoreCollection
from .model import User
from .repository import UserRepository


class StoreUserRepository(UserRepository):
    def __init__(self, store: LocalStore, *, defaults: Optional[Callable[[], List[Record]]] = None):
        self._users = StoreCollection(
            store,
            USERS_KEY,
            from_dict=User.from_dict,
            to_dict=User.to_dict,
            defaults=defaults,
        )

    def list_all(self) -> Sequence[User]:
        return self._users.load()

    def get_by_id(self, user_id: str) -> Optional[User]:
        """Linear scan over the whole user list, O(n) per call.

        Callers resolving many ids should use UserService.attach_users instead.
        """

        for user in self._users.load():
            if user.user_id == user_id:
                return user
        return None

    def get_by_email(self, email: str) -> Optional[User]:
        for user in self._users.load():
            if user.email == email:
                return user
        return None

    def add(self, user: User) -> None:
        users = self._users.load()
        users.append(user)
        self._users.save(users)

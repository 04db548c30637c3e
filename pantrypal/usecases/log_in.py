from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from ..adapters.db_errors import PersistenceError
from ..domain.errors import NullArgumentError
from ..domain.ports import UserStore
from ..domain.session import Session
from .error_mapping import map_error


@dataclass
class LogIn:
    """Register the user on first use and mark the session as logged in."""

    session: Session
    users: Optional[UserStore] = None

    def __call__(self, user_name: str) -> str:
        name = (user_name or "").strip()
        if not name:
            raise NullArgumentError("User name cannot be empty.")
        if self.users is not None:
            try:
                if not self.users.exists(name):
                    self.users.insert(name)
            except PersistenceError as e:
                raise map_error(e)
        self.session.log_in(name)
        return name


@dataclass
class LogOut:
    session: Session

    def __call__(self) -> None:
        self.session.log_out()

"""Authentication state consulted before every persistence call."""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from .errors import NullArgumentError

SessionListener = Callable[["Session"], None]


class Session:
    """Current user of the application.

    Without a user the app runs in guest mode: registers are memory-only and
    controllers issue no persistence calls. Listeners are called after every
    log-in/log-out so controllers can reload their registers.
    """

    def __init__(self, user_name: Optional[str] = None) -> None:
        self._log = logging.getLogger(__name__)
        self._user_name: Optional[str] = None
        self._listeners: List[SessionListener] = []
        if user_name:
            self._user_name = self._normalize(user_name)

    @property
    def user_name(self) -> Optional[str]:
        return self._user_name

    @property
    def is_logged_in(self) -> bool:
        return self._user_name is not None

    def log_in(self, user_name: str) -> None:
        self._user_name = self._normalize(user_name)
        self._log.info("Logged in as %s", self._user_name)
        self._emit()

    def log_out(self) -> None:
        if self._user_name is None:
            return
        self._log.info("Logged out %s", self._user_name)
        self._user_name = None
        self._emit()

    def subscribe(self, listener: SessionListener) -> None:
        if listener is None:
            raise NullArgumentError("Session listener cannot be None.")
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: SessionListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _emit(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    @staticmethod
    def _normalize(user_name: Optional[str]) -> str:
        if user_name is None or not str(user_name).strip():
            raise NullArgumentError("User name cannot be empty.")
        return str(user_name).strip()


__all__ = ["Session", "SessionListener"]

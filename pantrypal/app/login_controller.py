"""Login controller: session entry/exit and navigation around it."""

from __future__ import annotations

from typing import Optional

from ..domain.errors import NullArgumentError
from ..domain.ports import StoragePort, UserStore
from ..domain.session import Session
from ..usecases.log_in import LogIn, LogOut
from ..usecases.user_settings import SaveUserSettings
from ..viewmodels.settings_vm import SettingsVM
from .controller import Controller, View
from .observer import Action
from .view_manager import Route, ViewManager


class LoginController(Controller):
    def __init__(
        self,
        view: Optional[View],
        view_manager: ViewManager,
        session: Session,
        *,
        users: Optional[UserStore] = None,
        settings_vm: Optional[SettingsVM] = None,
        storage: Optional[StoragePort] = None,
    ) -> None:
        self.settings_vm = settings_vm
        self.uc_log_in = LogIn(session, users)
        self.uc_log_out = LogOut(session)
        self.uc_save_settings = SaveUserSettings(storage) if storage is not None else None
        super().__init__(view, view_manager, session)
        self.render()

    def read_model(self) -> str:
        if self.settings_vm is not None and self.settings_vm.remember_user:
            return self.settings_vm.last_user
        return ""

    def log_in(self, user_name: str) -> str:
        """Log in as ``user_name`` (created on first use) and open the pantry."""
        if user_name is None or not str(user_name).strip():
            raise NullArgumentError("User name cannot be empty.")
        name = self.uc_log_in(user_name)
        if self.settings_vm is not None and self.settings_vm.remember(name):
            self._save_settings()
        self.view_manager.set_view(Route.PANTRY)
        return name

    def continue_as_guest(self) -> None:
        self.uc_log_out()
        self.view_manager.set_view(Route.PANTRY)

    def log_out(self) -> None:
        self.uc_log_out()
        if self.settings_vm is not None and self.settings_vm.last_user:
            self.settings_vm.forget_user()
            self._save_settings()
        self.render()
        self.view_manager.set_view(Route.LOGIN)

    def _save_settings(self) -> None:
        if self.uc_save_settings is None or self.settings_vm is None:
            return
        self.uc_save_settings(self.settings_vm.to_dict())

    def _on_session_changed(self, session: Session) -> None:
        self._log.debug("Session user is now %s", session.user_name or "guest")

    # ------------------------------------------------------------------
    # Observer
    # ------------------------------------------------------------------
    def update(self, action: Action, payload: object) -> None:
        if action is not Action.LOG_IN or not isinstance(payload, str):
            self._unsupported(action, payload)
        self._dispatch(action, self.log_in, payload)

    def signal(self, action: Action) -> None:
        if action is Action.LOG_OUT:
            self._dispatch(action, self.log_out)
        elif action is Action.GUEST:
            self._dispatch(action, self.continue_as_guest)
        else:
            self._unsupported(action)


__all__ = ["LoginController"]

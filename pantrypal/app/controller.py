"""Base class shared by the pantry, shopping-list, cookbook and login controllers.

A controller owns one view and one register. It subscribes to the view's
actions, re-renders the view after every mutation, and reloads its register
whenever the session changes user.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Protocol

from ..adapters.db_errors import PersistenceError
from ..domain.errors import RegisterError, UnsupportedActionError
from ..domain.ports import UseCaseError
from ..domain.session import Session
from ..usecases.error_mapping import map_error
from .observer import Action, Observer
from .view_manager import ViewManager

# Failures an observer dispatch logs and drops instead of raising.
DISPATCH_ERRORS = (RegisterError, ValueError, PersistenceError, UseCaseError)


class View(Protocol):
    def subscribe(self, observer: Observer) -> None: ...

    def render(self, model: Any) -> None: ...


class Controller:
    """Common wiring for controllers.

    Call chain:
        ``pantrypal.app.main.App`` builds one instance per view. Views notify
        ``update``/``signal``; the App binds non-action view callbacks (add
        shelf, search, ...) straight to the public methods.
    """

    def __init__(
        self,
        view: Optional[View],
        view_manager: ViewManager,
        session: Session,
    ) -> None:
        self._log = logging.getLogger(type(self).__module__)
        self.view = view
        self.view_manager = view_manager
        self.session = session
        self.on_error: Optional[Callable[[UseCaseError], None]] = None
        if view is not None:
            view.subscribe(self)
        session.subscribe(self._on_session_changed)

    # ------------------------------------------------------------------
    @property
    def user_name(self) -> Optional[str]:
        return self.session.user_name

    def reload(self) -> None:
        self.render()

    def read_model(self) -> Any:
        return None

    def render(self) -> None:
        if self.view is not None:
            self.view.render(self.read_model())

    # ------------------------------------------------------------------
    # Observer defaults
    # ------------------------------------------------------------------
    def update(self, action: Action, payload: Any) -> None:
        self._unsupported(action, payload)

    def signal(self, action: Action) -> None:
        self._unsupported(action)

    def _unsupported(self, action: Action, *payload: Any) -> None:
        kind = type(payload[0]).__name__ if payload else "signal"
        raise UnsupportedActionError(f"{type(self).__name__} does not support {action} with {kind}.")

    def _dispatch(self, action: Action, handler: Callable[..., Any], *args: Any) -> Any:
        """Run ``handler`` for an observed action, logging and dropping failures."""
        try:
            return handler(*args)
        except DISPATCH_ERRORS as exc:
            self._log.warning("%s failed: %s", action.name, exc)
            if self.on_error is not None:
                self.on_error(map_error(exc))
            return None

    def _on_session_changed(self, session: Session) -> None:
        self.reload()


__all__ = ["Controller", "DISPATCH_ERRORS", "View"]

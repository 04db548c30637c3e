"""Observer contract between views (publishers) and controllers (subscribers).

Views publish user intents as ``Action`` values, with or without a payload;
controllers implement ``Observer`` and decide which combinations they accept.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, List, Protocol

from ..domain.errors import NullArgumentError


class Action(Enum):
    """User intents a view can publish."""

    ADD = "add"
    REMOVE = "remove"
    ADD_TO_PANTRY = "add_to_pantry"
    OPEN_RECIPE = "open_recipe"
    FAVORITE = "favorite"
    ADD_TO_SHOPPING_LIST = "add_to_shopping_list"
    LOG_IN = "log_in"
    LOG_OUT = "log_out"
    GUEST = "guest"


class Observer(Protocol):
    def update(self, action: Action, payload: Any) -> None: ...

    def signal(self, action: Action) -> None: ...


class Observable:
    """Per-instance observer list.

    Notification iterates over a snapshot, so observers may unsubscribe
    themselves (or others) while being notified.
    """

    def __init__(self) -> None:
        self._observers: List[Observer] = []

    def subscribe(self, observer: Observer) -> None:
        if observer is None:
            raise NullArgumentError("Observer cannot be None.")
        if observer not in self._observers:
            self._observers.append(observer)

    def unsubscribe(self, observer: Observer) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def observers(self) -> List[Observer]:
        return list(self._observers)

    def notify(self, action: Action, payload: Any) -> None:
        for observer in list(self._observers):
            observer.update(action, payload)

    def notify_signal(self, action: Action) -> None:
        for observer in list(self._observers):
            observer.signal(action)

    def clear_observers(self) -> None:
        self._observers.clear()


__all__ = ["Action", "Observable", "Observer"]

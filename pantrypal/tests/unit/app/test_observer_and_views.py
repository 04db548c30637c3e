from __future__ import annotations

from typing import Any, List, Tuple

import pytest

from pantrypal.app.observer import Action, Observable
from pantrypal.app.view_manager import Route, ViewManager
from pantrypal.domain.errors import NotFoundError, NullArgumentError


class RecordingObserver:
    def __init__(self) -> None:
        self.updates: List[Tuple[Action, Any]] = []
        self.signals: List[Action] = []

    def update(self, action: Action, payload: Any) -> None:
        self.updates.append((action, payload))

    def signal(self, action: Action) -> None:
        self.signals.append(action)


class SelfRemovingObserver(RecordingObserver):
    def __init__(self, subject: Observable) -> None:
        super().__init__()
        self.subject = subject

    def update(self, action: Action, payload: Any) -> None:
        super().update(action, payload)
        self.subject.unsubscribe(self)


def test_notify_reaches_every_observer() -> None:
    subject = Observable()
    first, second = RecordingObserver(), RecordingObserver()
    subject.subscribe(first)
    subject.subscribe(second)

    subject.notify(Action.ADD, "milk")
    subject.notify_signal(Action.ADD_TO_PANTRY)

    assert first.updates == second.updates == [(Action.ADD, "milk")]
    assert first.signals == second.signals == [Action.ADD_TO_PANTRY]


def test_subscribe_is_idempotent() -> None:
    subject = Observable()
    observer = RecordingObserver()

    subject.subscribe(observer)
    subject.subscribe(observer)
    subject.notify(Action.REMOVE, 1)

    assert observer.updates == [(Action.REMOVE, 1)]


def test_subscribe_none_raises() -> None:
    with pytest.raises(NullArgumentError):
        Observable().subscribe(None)  # type: ignore[arg-type]


def test_observer_lists_are_per_instance() -> None:
    one, two = Observable(), Observable()
    observer = RecordingObserver()
    one.subscribe(observer)

    two.notify(Action.ADD, "x")

    assert observer.updates == []
    assert two.observers() == []


def test_unsubscribe_during_notification() -> None:
    subject = Observable()
    leaving = SelfRemovingObserver(subject)
    staying = RecordingObserver()
    subject.subscribe(leaving)
    subject.subscribe(staying)

    subject.notify(Action.ADD, "a")
    subject.notify(Action.ADD, "b")

    assert leaving.updates == [(Action.ADD, "a")]
    assert staying.updates == [(Action.ADD, "a"), (Action.ADD, "b")]


def test_clear_observers() -> None:
    subject = Observable()
    observer = RecordingObserver()
    subject.subscribe(observer)

    subject.clear_observers()
    subject.notify_signal(Action.GUEST)

    assert observer.signals == []


def test_view_manager_switches_and_reports() -> None:
    shown: List[Tuple[Route, Any]] = []
    manager = ViewManager(on_show=lambda route, view: shown.append((route, view)))
    login, pantry = object(), object()
    manager.add_view(Route.LOGIN, login)
    manager.add_view(Route.PANTRY, pantry)

    manager.set_view(Route.LOGIN)
    manager.set_view(Route.PANTRY)

    assert manager.current_route is Route.PANTRY
    assert shown == [(Route.LOGIN, login), (Route.PANTRY, pantry)]


def test_view_manager_unknown_route() -> None:
    manager = ViewManager()

    with pytest.raises(NotFoundError):
        manager.set_view(Route.COOKBOOK)

    assert manager.current_route is None

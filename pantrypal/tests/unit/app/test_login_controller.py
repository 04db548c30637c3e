from __future__ import annotations

import json

import pytest

from pantrypal.adapters.sql_repositories import UserSql
from pantrypal.adapters.sqlite_db import open_database
from pantrypal.adapters.storage_local import StorageLocal
from pantrypal.app.login_controller import LoginController
from pantrypal.app.observer import Action
from pantrypal.app.view_manager import Route
from pantrypal.domain.errors import NullArgumentError, UnsupportedActionError
from pantrypal.domain.session import Session
from pantrypal.tests.unit.app.helpers import ViewStub, make_view_manager
from pantrypal.viewmodels.settings_vm import SettingsVM


def _controller(tmp_path, settings_vm=None):
    db = open_database(":memory:")
    session = Session()
    view = ViewStub()
    manager = make_view_manager()
    controller = LoginController(
        view,
        manager,
        session,
        users=UserSql(db),
        settings_vm=settings_vm or SettingsVM(),
        storage=StorageLocal(root_dir=str(tmp_path)),
    )
    return controller, view, manager, session, db


def test_log_in_creates_user_and_opens_pantry(tmp_path) -> None:
    controller, _, manager, session, db = _controller(tmp_path)

    controller.log_in("  alice ")

    assert session.user_name == "alice"
    assert manager.current_route is Route.PANTRY
    assert db.query("SELECT name FROM user") == [{"name": "alice"}]

    controller.log_in("alice")
    assert db.query("SELECT name FROM user") == [{"name": "alice"}]


def test_log_in_remembers_user_in_settings(tmp_path) -> None:
    vm = SettingsVM()
    controller, _, _, _, _ = _controller(tmp_path, vm)

    controller.log_in("alice")

    assert vm.last_user == "alice"
    with (tmp_path / "user_settings.json").open("r", encoding="utf-8") as fh:
        assert json.load(fh)["last_user"] == "alice"


def test_remember_disabled_keeps_settings_untouched(tmp_path) -> None:
    vm = SettingsVM()
    vm.remember_user = False
    controller, _, _, _, _ = _controller(tmp_path, vm)

    controller.log_in("alice")

    assert vm.last_user == ""
    assert not (tmp_path / "user_settings.json").exists()


def test_blank_user_name_rejected(tmp_path) -> None:
    controller, _, manager, session, _ = _controller(tmp_path)

    with pytest.raises(NullArgumentError):
        controller.log_in("   ")

    assert session.is_logged_in is False
    assert manager.current_route is None


def test_guest_and_log_out_navigation(tmp_path) -> None:
    vm = SettingsVM()
    controller, view, manager, session, _ = _controller(tmp_path, vm)

    controller.continue_as_guest()
    assert manager.current_route is Route.PANTRY
    assert session.is_logged_in is False

    controller.log_in("alice")
    controller.log_out()

    assert manager.current_route is Route.LOGIN
    assert session.is_logged_in is False
    assert vm.last_user == ""
    assert view.last == ""


def test_render_prefills_remembered_user(tmp_path) -> None:
    vm = SettingsVM()
    vm.last_user = "bob"

    _, view, _, _, _ = _controller(tmp_path, vm)

    assert view.renders == ["bob"]


def test_observer_dispatch(tmp_path) -> None:
    controller, _, manager, session, _ = _controller(tmp_path)
    errors = []
    controller.on_error = errors.append

    controller.update(Action.LOG_IN, "")
    assert [err.code for err in errors] == ["MISSING_VALUE"]

    controller.update(Action.LOG_IN, "carol")
    assert session.user_name == "carol"

    controller.signal(Action.LOG_OUT)
    assert manager.current_route is Route.LOGIN

    controller.signal(Action.GUEST)
    assert manager.current_route is Route.PANTRY

    with pytest.raises(UnsupportedActionError):
        controller.update(Action.LOG_IN, 42)
    with pytest.raises(UnsupportedActionError):
        controller.signal(Action.ADD)

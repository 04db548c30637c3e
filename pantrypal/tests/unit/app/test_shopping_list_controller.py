from __future__ import annotations

import logging

import pytest

from pantrypal.adapters.sql_repositories import CatalogSql, PantrySql, ShoppingListSql
from pantrypal.app.observer import Action
from pantrypal.app.pantry_controller import PantryController
from pantrypal.app.shopping_list_controller import ShoppingListController
from pantrypal.domain.entities import Grocery
from pantrypal.domain.errors import NotFoundError, NullArgumentError, UnsupportedActionError
from pantrypal.domain.session import Session
from pantrypal.tests.unit.app.helpers import (
    PantryPortStub,
    ViewStub,
    logged_in_session,
    make_view_manager,
)


def _guest_list(pantry=None) -> tuple[ShoppingListController, ViewStub]:
    view = ViewStub()
    controller = ShoppingListController(
        view, make_view_manager(), Session(), pantry=pantry or PantryPortStub()
    )
    return controller, view


def test_checked_groceries_move_to_their_shelf() -> None:
    session = Session()
    pantry = PantryController(ViewStub(), make_view_manager(), session)
    fridge = pantry.add_shelf("Fridge")
    shopping = ShoppingListController(ViewStub(), make_view_manager(), session, pantry=pantry)
    shopping.add_grocery(Grocery("egg", 6, "pcs", shelf="Fridge", checked=True))
    shopping.add_grocery(Grocery("flour", 1000, "g", shelf="Pantry"))

    moved = shopping.add_groceries_to_pantry()

    assert [g.name for g in moved] == ["egg"]
    assert [(g.name, g.quantity) for g in pantry.groceries(fridge)] == [("egg", 6)]
    assert [g.name for g in shopping.groceries()] == ["flour"]
    assert [s.name for s in pantry.shelves()] == ["Fridge"]


def test_grocery_without_shelf_goes_to_unsorted() -> None:
    pantry = PantryPortStub()
    shopping, _ = _guest_list(pantry)
    shopping.add_grocery(Grocery("tea", 20, "pcs", checked=True))

    shopping.add_groceries_to_pantry()

    assert pantry.calls == [("Unsorted", "tea", 20, "pcs")]
    assert shopping.groceries() == []


def test_add_same_name_merges() -> None:
    shopping, view = _guest_list()

    shopping.add_grocery(Grocery("milk", 1, "l"))
    shopping.add_grocery(Grocery("milk", 2, "l"))

    assert [(g.name, g.quantity) for g in view.last] == [("milk", 3)]


def test_none_arguments_rejected() -> None:
    shopping, _ = _guest_list()

    with pytest.raises(NullArgumentError):
        shopping.add_grocery(None)  # type: ignore[arg-type]
    with pytest.raises(NullArgumentError):
        shopping.remove_grocery(None)  # type: ignore[arg-type]


def test_remove_absent_raises_not_found() -> None:
    shopping, _ = _guest_list()

    with pytest.raises(NotFoundError):
        shopping.remove_grocery(Grocery("milk"))


def test_set_checked_and_quantity() -> None:
    shopping, _ = _guest_list()
    shopping.add_grocery(Grocery("milk", 1, "l"))

    shopping.set_checked(Grocery("milk"), True)
    shopping.set_quantity(Grocery("milk"), 4)

    [milk] = shopping.groceries()
    assert milk.checked is True
    assert milk.quantity == 4
    with pytest.raises(ValueError):
        shopping.set_quantity(milk, -2)


def test_failed_move_propagates_and_keeps_list(caplog) -> None:
    pantry = PantryPortStub(fail_on="flour")
    shopping, _ = _guest_list(pantry)
    shopping.add_grocery(Grocery("egg", 6, "pcs", checked=True))
    shopping.add_grocery(Grocery("flour", 500, "g", checked=True))

    with caplog.at_level(logging.WARNING):
        with pytest.raises(ValueError):
            shopping.add_groceries_to_pantry()

    assert "Moving flour to the pantry failed" in caplog.text
    assert pantry.calls == [("Unsorted", "egg", 6, "pcs")]
    assert [g.name for g in shopping.groceries()] == ["egg", "flour"]


def test_signal_add_to_pantry_swallows_failures() -> None:
    pantry = PantryPortStub(fail_on="flour")
    shopping, _ = _guest_list(pantry)
    shopping.add_grocery(Grocery("flour", 500, "g", checked=True))
    errors = []
    shopping.on_error = errors.append

    shopping.signal(Action.ADD_TO_PANTRY)

    assert [err.code for err in errors] == ["INVALID_VALUE"]
    assert len(shopping.groceries()) == 1


def test_observer_add_and_remove() -> None:
    shopping, _ = _guest_list()

    shopping.update(Action.ADD, Grocery("bread", 1, "pcs"))
    shopping.update(Action.REMOVE, Grocery("bread"))
    shopping.update(Action.REMOVE, Grocery("bread"))

    assert shopping.groceries() == []
    with pytest.raises(UnsupportedActionError):
        shopping.update(Action.OPEN_RECIPE, Grocery("bread"))
    with pytest.raises(UnsupportedActionError):
        shopping.signal(Action.GUEST)


# ---------------------------------------------------------------------------
# Logged in
# ---------------------------------------------------------------------------
def _persisting_list(db, session, pantry=None) -> ShoppingListController:
    return ShoppingListController(
        ViewStub(),
        make_view_manager(),
        session,
        pantry=pantry or PantryPortStub(),
        shopping_store=ShoppingListSql(db),
        catalog=CatalogSql(db),
    )


def test_rows_are_persisted_per_user() -> None:
    db, session = logged_in_session()
    shopping = _persisting_list(db, session)

    shopping.add_grocery(Grocery("milk", 1, "l", shelf="Fridge"))
    shopping.add_grocery(Grocery("milk", 2, "l"))
    shopping.set_checked(Grocery("milk"), True)

    assert db.query("SELECT grocery_name, user_name, quantity, is_bought, shelf_name FROM shopping_list_grocery") == [
        {"grocery_name": "milk", "user_name": "alice", "quantity": 3, "is_bought": 1, "shelf_name": "Fridge"}
    ]

    [milk] = _persisting_list(db, session).groceries()
    assert (milk.quantity, milk.unit, milk.shelf, milk.checked) == (3, "l", "Fridge", True)


def test_stale_row_gets_quantity_added() -> None:
    db, session = logged_in_session()
    shopping = _persisting_list(db, session)
    # row written behind the controller's back, after it loaded
    CatalogSql(db).insert("rice", "g")
    ShoppingListSql(db).insert("alice", Grocery("rice", 100))

    shopping.add_grocery(Grocery("rice", 50))

    assert db.query("SELECT quantity FROM shopping_list_grocery") == [{"quantity": 150}]
    assert [g.quantity for g in shopping.groceries()] == [50]


def test_move_to_pantry_persists_both_sides() -> None:
    db, session = logged_in_session()
    pantry = PantryController(
        ViewStub(), make_view_manager(), session, pantry_store=PantrySql(db), catalog=CatalogSql(db)
    )
    shopping = _persisting_list(db, session, pantry)
    shopping.add_grocery(Grocery("egg", 6, "pcs", shelf="Fridge", checked=True))
    shopping.add_grocery(Grocery("flour", 1000, "g"))

    shopping.add_groceries_to_pantry()

    assert db.query("SELECT grocery_name FROM shopping_list_grocery") == [{"grocery_name": "flour"}]
    assert db.query("SELECT grocery_name, quantity FROM pantry_shelf_grocery") == [
        {"grocery_name": "egg", "quantity": 6}
    ]

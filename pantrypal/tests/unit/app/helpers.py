from __future__ import annotations

from typing import Any, List, Tuple

from pantrypal.adapters.db_errors import PersistenceError
from pantrypal.adapters.sql_repositories import UserSql
from pantrypal.adapters.sqlite_db import SqliteDatabase, open_database
from pantrypal.app.view_manager import Route, ViewManager
from pantrypal.domain.entities import Grocery
from pantrypal.domain.session import Session


class ViewStub:
    """Records subscriptions and every rendered read model."""

    def __init__(self) -> None:
        self.observers: List[Any] = []
        self.renders: List[Any] = []

    def subscribe(self, observer: Any) -> None:
        self.observers.append(observer)

    def render(self, model: Any) -> None:
        self.renders.append(model)

    @property
    def last(self) -> Any:
        return self.renders[-1]


class PantryPortStub:
    """Collects ``add_grocery_to_shelf`` calls instead of touching a pantry."""

    def __init__(self, fail_on: str = "") -> None:
        self.calls: List[Tuple[str, str, int, str]] = []
        self.fail_on = fail_on

    def add_grocery_to_shelf(self, shelf_name: str, name: str, amount: int, unit: str) -> None:
        if name == self.fail_on:
            raise ValueError(f"cannot store {name}")
        self.calls.append((shelf_name, name, amount, unit))


class ShoppingListPortStub:
    def __init__(self) -> None:
        self.groceries: List[Grocery] = []

    def add_grocery(self, grocery: Grocery) -> None:
        self.groceries.append(grocery)


class FailingPantryStore:
    """Pantry store whose deletes and renames fail after the in-memory change."""

    def __init__(self) -> None:
        self._next_id = 0

    def load_shelves(self, user_name: str) -> List[Any]:
        return []

    def insert_shelf(self, name: str, user_name: str) -> int:
        self._next_id += 1
        return self._next_id

    def insert_grocery(self, shelf_key: str, name: str, quantity: int) -> None:
        return None

    def update_quantity(self, shelf_key: str, name: str, quantity: int) -> None:
        return None

    def rename_shelf(self, shelf_key: str, name: str) -> None:
        raise PersistenceError("disk I/O error", context="execute")

    def delete_shelf(self, shelf_key: str) -> None:
        raise PersistenceError("disk I/O error", context="execute")

    def delete_grocery(self, shelf_key: str, name: str) -> None:
        raise PersistenceError("disk I/O error", context="execute")


def make_view_manager() -> ViewManager:
    manager = ViewManager()
    for route in Route:
        manager.add_view(route, object())
    return manager


def logged_in_session(user_name: str = "alice") -> Tuple[SqliteDatabase, Session]:
    db = open_database(":memory:")
    UserSql(db).insert(user_name)
    return db, Session(user_name)


__all__ = [
    "FailingPantryStore",
    "PantryPortStub",
    "ShoppingListPortStub",
    "ViewStub",
    "logged_in_session",
    "make_view_manager",
]

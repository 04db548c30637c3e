from __future__ import annotations
from typing import Any, Dict, List, Mapping, Optional, Protocol

from .aggregates import Recipe, Shelf
from .entities import Grocery

Row = Dict[str, Any]
UserName = str


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


# ---- Ports (Hexagonal boundaries) ----
class PersistencePort(Protocol):
    """Parameterized SQL execution against the relational store."""

    def query(self, sql: str, *params: Any) -> List[Row]: ...  # rows as column -> value
    def execute(self, sql: str, *params: Any) -> int: ...  # affected row count
    def insert(self, sql: str, *params: Any) -> int: ...  # generated primary key


class CatalogStore(Protocol):
    """Global grocery catalog shared by shelves, shopping lists and recipes."""

    def contains(self, name: str) -> bool: ...
    def insert(self, name: str, unit: str) -> None: ...


class PantryStore(Protocol):
    """Shelves and the per-shelf grocery quantities of one user."""

    def load_shelves(self, user_name: UserName) -> List[Shelf]: ...
    def insert_shelf(self, name: str, user_name: UserName) -> int: ...
    def rename_shelf(self, shelf_key: str, name: str) -> None: ...
    def delete_shelf(self, shelf_key: str) -> None: ...
    def insert_grocery(self, shelf_key: str, name: str, quantity: int) -> None: ...
    def update_quantity(self, shelf_key: str, name: str, quantity: int) -> None: ...
    def delete_grocery(self, shelf_key: str, name: str) -> None: ...


class ShoppingListStore(Protocol):
    """Shopping-list rows keyed by user and grocery name."""

    def load(self, user_name: UserName) -> List[Grocery]: ...
    def contains(self, user_name: UserName, name: str) -> bool: ...
    def insert(self, user_name: UserName, grocery: Grocery) -> None: ...
    def add_quantity(self, user_name: UserName, name: str, amount: int) -> None: ...
    def set_quantity(self, user_name: UserName, name: str, quantity: int) -> None: ...
    def set_bought(self, user_name: UserName, name: str, bought: bool) -> None: ...
    def delete(self, user_name: UserName, name: str) -> None: ...


class CookbookStore(Protocol):
    """Recipes with their ingredients and ordered steps."""

    def load_recipes(self, user_name: UserName) -> List[Recipe]: ...
    def insert_recipe(self, user_name: UserName, recipe: Recipe) -> int: ...
    def update_recipe(self, recipe: Recipe) -> None: ...
    def set_favorite(self, recipe_id: int, favorite: bool) -> None: ...
    def delete_recipe(self, recipe_id: int) -> None: ...


class UserStore(Protocol):
    """Known user names."""

    def exists(self, user_name: UserName) -> bool: ...
    def insert(self, user_name: UserName) -> None: ...


class StoragePort(Protocol):
    """Persistence for local user settings."""

    def save_user_settings(self, payload: Mapping[str, Any]) -> None: ...
    def load_user_settings(self) -> Optional[Dict[str, Any]]: ...


# ---- Cross-controller capabilities ----
class PantryPort(Protocol):
    """Commit a grocery to a pantry shelf identified by name."""

    def add_grocery_to_shelf(self, shelf_name: str, name: str, amount: int, unit: str) -> None: ...


class ShoppingListPort(Protocol):
    """Put a grocery on the shopping list (merging by name)."""

    def add_grocery(self, grocery: Grocery) -> None: ...

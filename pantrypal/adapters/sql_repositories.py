"""SQL repositories translating domain entities to table rows.

All SQL text of the application lives here; controllers only see the store
protocols from ``pantrypal.domain.ports``.
"""

from __future__ import annotations

from typing import Dict, List

from pantrypal.domain.aggregates import Recipe, Shelf
from pantrypal.domain.entities import Grocery
from pantrypal.domain.ports import (
    CatalogStore,
    CookbookStore,
    PantryStore,
    PersistencePort,
    ShoppingListStore,
    UserStore,
)
from pantrypal.domain.registers import GroceryRegister, StepRegister


class UserSql(UserStore):
    def __init__(self, db: PersistencePort) -> None:
        self.db = db

    def exists(self, user_name: str) -> bool:
        return bool(self.db.query("SELECT name FROM user WHERE name = ?", user_name))

    def insert(self, user_name: str) -> None:
        self.db.execute("INSERT INTO user (name) VALUES (?)", user_name)


class CatalogSql(CatalogStore):
    def __init__(self, db: PersistencePort) -> None:
        self.db = db

    def contains(self, name: str) -> bool:
        return bool(self.db.query("SELECT name FROM grocery WHERE name = ?", name))

    def insert(self, name: str, unit: str) -> None:
        self.db.execute("INSERT INTO grocery (name, unit) VALUES (?, ?)", name, unit)


class PantrySql(PantryStore):
    """Shelves are keyed by their row id rendered as a string."""

    def __init__(self, db: PersistencePort) -> None:
        self.db = db

    def load_shelves(self, user_name: str) -> List[Shelf]:
        rows = self.db.query(
            "SELECT id, name FROM pantry_shelf WHERE user_name = ? ORDER BY id",
            user_name,
        )
        shelves: Dict[int, Shelf] = {}
        for row in rows:
            shelf = Shelf(row["name"], key=str(row["id"]))
            shelf.id = int(row["id"])
            shelves[shelf.id] = shelf

        groceries = self.db.query(
            "SELECT psg.pantry_shelf_id, psg.grocery_name, psg.quantity, g.unit "
            "FROM pantry_shelf_grocery AS psg "
            "JOIN pantry_shelf AS ps ON ps.id = psg.pantry_shelf_id "
            "JOIN grocery AS g ON g.name = psg.grocery_name "
            "WHERE ps.user_name = ? ORDER BY psg.rowid",
            user_name,
        )
        for row in groceries:
            shelf = shelves.get(int(row["pantry_shelf_id"]))
            if shelf is None:
                continue
            shelf.add_grocery(
                Grocery(
                    row["grocery_name"],
                    int(row["quantity"]),
                    row["unit"],
                    shelf=shelf.name,
                )
            )
        return list(shelves.values())

    def insert_shelf(self, name: str, user_name: str) -> int:
        return self.db.insert(
            "INSERT INTO pantry_shelf (name, user_name) VALUES (?, ?)", name, user_name
        )

    def rename_shelf(self, shelf_key: str, name: str) -> None:
        self.db.execute("UPDATE pantry_shelf SET name = ? WHERE id = ?", name, int(shelf_key))

    def delete_shelf(self, shelf_key: str) -> None:
        self.db.execute("DELETE FROM pantry_shelf WHERE id = ?", int(shelf_key))

    def insert_grocery(self, shelf_key: str, name: str, quantity: int) -> None:
        self.db.execute(
            "INSERT INTO pantry_shelf_grocery (pantry_shelf_id, grocery_name, quantity) "
            "VALUES (?, ?, ?)",
            int(shelf_key),
            name,
            quantity,
        )

    def update_quantity(self, shelf_key: str, name: str, quantity: int) -> None:
        self.db.execute(
            "UPDATE pantry_shelf_grocery SET quantity = ? "
            "WHERE pantry_shelf_id = ? AND grocery_name = ?",
            quantity,
            int(shelf_key),
            name,
        )

    def delete_grocery(self, shelf_key: str, name: str) -> None:
        self.db.execute(
            "DELETE FROM pantry_shelf_grocery WHERE pantry_shelf_id = ? AND grocery_name = ?",
            int(shelf_key),
            name,
        )


class ShoppingListSql(ShoppingListStore):
    def __init__(self, db: PersistencePort) -> None:
        self.db = db

    def load(self, user_name: str) -> List[Grocery]:
        rows = self.db.query(
            "SELECT slg.grocery_name, slg.quantity, slg.is_bought, slg.shelf_name, g.unit "
            "FROM shopping_list_grocery AS slg "
            "JOIN grocery AS g ON g.name = slg.grocery_name "
            "WHERE slg.user_name = ? ORDER BY slg.rowid",
            user_name,
        )
        return [
            Grocery(
                row["grocery_name"],
                int(row["quantity"]),
                row["unit"],
                shelf=row["shelf_name"],
                checked=bool(row["is_bought"]),
            )
            for row in rows
        ]

    def contains(self, user_name: str, name: str) -> bool:
        rows = self.db.query(
            "SELECT grocery_name FROM shopping_list_grocery WHERE user_name = ? AND grocery_name = ?",
            user_name,
            name,
        )
        return bool(rows)

    def insert(self, user_name: str, grocery: Grocery) -> None:
        self.db.execute(
            "INSERT INTO shopping_list_grocery "
            "(grocery_name, user_name, quantity, is_bought, shelf_name) VALUES (?, ?, ?, ?, ?)",
            grocery.name,
            user_name,
            grocery.quantity,
            int(grocery.checked),
            grocery.shelf,
        )

    def add_quantity(self, user_name: str, name: str, amount: int) -> None:
        self.db.execute(
            "UPDATE shopping_list_grocery SET quantity = quantity + ? "
            "WHERE user_name = ? AND grocery_name = ?",
            amount,
            user_name,
            name,
        )

    def set_quantity(self, user_name: str, name: str, quantity: int) -> None:
        self.db.execute(
            "UPDATE shopping_list_grocery SET quantity = ? WHERE user_name = ? AND grocery_name = ?",
            quantity,
            user_name,
            name,
        )

    def set_bought(self, user_name: str, name: str, bought: bool) -> None:
        self.db.execute(
            "UPDATE shopping_list_grocery SET is_bought = ? WHERE user_name = ? AND grocery_name = ?",
            int(bool(bought)),
            user_name,
            name,
        )

    def delete(self, user_name: str, name: str) -> None:
        self.db.execute(
            "DELETE FROM shopping_list_grocery WHERE user_name = ? AND grocery_name = ?",
            user_name,
            name,
        )


class CookbookSql(CookbookStore):
    """Recipes plus their ingredient and step rows.

    Ingredients missing from the grocery catalog are added to it on write.
    """

    def __init__(self, db: PersistencePort) -> None:
        self.db = db

    def load_recipes(self, user_name: str) -> List[Recipe]:
        recipes: List[Recipe] = []
        rows = self.db.query(
            "SELECT id, name, is_favorite FROM recipe WHERE user_name = ? ORDER BY id",
            user_name,
        )
        for row in rows:
            recipe_id = int(row["id"])
            ingredients = GroceryRegister(
                Grocery(item["grocery_name"], int(item["quantity"]), item["unit"])
                for item in self.db.query(
                    "SELECT rg.grocery_name, rg.quantity, g.unit FROM recipe_grocery AS rg "
                    "JOIN grocery AS g ON g.name = rg.grocery_name "
                    "WHERE rg.recipe_id = ? ORDER BY rg.rowid",
                    recipe_id,
                )
            )
            steps = StepRegister(
                step["text"]
                for step in self.db.query(
                    "SELECT text FROM recipe_step WHERE recipe_id = ? ORDER BY step_index",
                    recipe_id,
                )
            )
            recipe = Recipe(row["name"], ingredients, steps, is_favorite=bool(row["is_favorite"]))
            recipe.id = recipe_id
            recipes.append(recipe)
        return recipes

    def insert_recipe(self, user_name: str, recipe: Recipe) -> int:
        recipe_id = self.db.insert(
            "INSERT INTO recipe (name, user_name, is_favorite) VALUES (?, ?, ?)",
            recipe.name,
            user_name,
            int(recipe.is_favorite),
        )
        self._write_children(recipe_id, recipe)
        return recipe_id

    def update_recipe(self, recipe: Recipe) -> None:
        if recipe.id is None:
            raise ValueError(f"Recipe {recipe.name!r} has no persistence id.")
        self.db.execute(
            "UPDATE recipe SET is_favorite = ? WHERE id = ?", int(recipe.is_favorite), recipe.id
        )
        self.db.execute("DELETE FROM recipe_grocery WHERE recipe_id = ?", recipe.id)
        self.db.execute("DELETE FROM recipe_step WHERE recipe_id = ?", recipe.id)
        self._write_children(recipe.id, recipe)

    def set_favorite(self, recipe_id: int, favorite: bool) -> None:
        self.db.execute("UPDATE recipe SET is_favorite = ? WHERE id = ?", int(bool(favorite)), recipe_id)

    def delete_recipe(self, recipe_id: int) -> None:
        self.db.execute("DELETE FROM recipe WHERE id = ?", recipe_id)

    def _write_children(self, recipe_id: int, recipe: Recipe) -> None:
        for grocery in recipe.groceries():
            self.db.execute(
                "INSERT OR IGNORE INTO grocery (name, unit) VALUES (?, ?)", grocery.name, grocery.unit
            )
            self.db.execute(
                "INSERT INTO recipe_grocery (recipe_id, grocery_name, quantity) VALUES (?, ?, ?)",
                recipe_id,
                grocery.name,
                grocery.quantity,
            )
        for index, text in enumerate(recipe.step_register.texts(), start=1):
            self.db.execute(
                "INSERT INTO recipe_step (recipe_id, step_index, text) VALUES (?, ?, ?)",
                recipe_id,
                index,
                text,
            )


__all__ = ["CatalogSql", "CookbookSql", "PantrySql", "ShoppingListSql", "UserSql"]

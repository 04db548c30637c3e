from __future__ import annotations

import pytest

from pantrypal.adapters.db_errors import PersistenceError
from pantrypal.adapters.sql_repositories import CatalogSql, CookbookSql, PantrySql, ShoppingListSql, UserSql
from pantrypal.adapters.sqlite_db import SqliteDatabase, open_database
from pantrypal.domain.aggregates import Recipe
from pantrypal.domain.entities import Grocery
from pantrypal.domain.registers import GroceryRegister, StepRegister


@pytest.fixture
def db() -> SqliteDatabase:
    database = open_database(":memory:")
    UserSql(database).insert("alice")
    yield database
    database.close()


def test_schema_bootstrap_is_repeatable(db: SqliteDatabase) -> None:
    db.bootstrap_schema()

    tables = {row["name"] for row in db.query("SELECT name FROM sqlite_master WHERE type = 'table'")}
    assert {
        "user",
        "grocery",
        "pantry_shelf",
        "pantry_shelf_grocery",
        "shopping_list_grocery",
        "recipe",
        "recipe_grocery",
        "recipe_step",
    } <= tables


def test_insert_returns_generated_id_and_execute_counts_rows(db: SqliteDatabase) -> None:
    first = db.insert("INSERT INTO pantry_shelf (name, user_name) VALUES (?, ?)", "A", "alice")
    second = db.insert("INSERT INTO pantry_shelf (name, user_name) VALUES (?, ?)", "B", "alice")

    assert second == first + 1
    assert db.execute("UPDATE pantry_shelf SET name = ?", "C") == 2


def test_sql_errors_become_persistence_errors(db: SqliteDatabase) -> None:
    with pytest.raises(PersistenceError) as excinfo:
        db.query("SELECT * FROM nowhere")

    assert excinfo.value.statement == "SELECT * FROM nowhere"
    assert excinfo.value.context == "query"


def test_foreign_keys_are_enforced(db: SqliteDatabase) -> None:
    with pytest.raises(PersistenceError):
        PantrySql(db).insert_shelf("Fridge", "nobody")


def test_file_database_survives_reopen(tmp_path) -> None:
    path = str(tmp_path / "nested" / "pantry.db")
    first = open_database(path)
    UserSql(first).insert("alice")
    first.close()
    first.close()

    second = open_database(path)
    assert UserSql(second).exists("alice")
    second.close()


def test_user_and_catalog(db: SqliteDatabase) -> None:
    users, catalog = UserSql(db), CatalogSql(db)

    assert users.exists("alice")
    assert not users.exists("bob")
    assert not catalog.contains("milk")
    catalog.insert("milk", "l")
    assert catalog.contains("milk")
    with pytest.raises(PersistenceError):
        catalog.insert("milk", "ml")


def test_pantry_rows_round_trip(db: SqliteDatabase) -> None:
    pantry = PantrySql(db)
    CatalogSql(db).insert("milk", "l")
    shelf_id = pantry.insert_shelf("Fridge", "alice")
    pantry.insert_grocery(str(shelf_id), "milk", 1)
    pantry.update_quantity(str(shelf_id), "milk", 4)

    [shelf] = pantry.load_shelves("alice")

    assert (shelf.key, shelf.id, shelf.name) == (str(shelf_id), shelf_id, "Fridge")
    [milk] = shelf.groceries()
    assert (milk.name, milk.quantity, milk.unit, milk.shelf) == ("milk", 4, "l", "Fridge")
    assert pantry.load_shelves("bob") == []

    pantry.delete_shelf(str(shelf_id))
    assert db.query("SELECT * FROM pantry_shelf_grocery") == []


def test_shopping_rows(db: SqliteDatabase) -> None:
    rows = ShoppingListSql(db)
    CatalogSql(db).insert("egg", "pcs")
    rows.insert("alice", Grocery("egg", 6, "pcs", shelf="Fridge"))
    rows.add_quantity("alice", "egg", 6)
    rows.set_bought("alice", "egg", True)

    [egg] = rows.load("alice")
    assert (egg.quantity, egg.checked, egg.shelf) == (12, True, "Fridge")
    assert rows.contains("alice", "egg")

    rows.set_quantity("alice", "egg", 2)
    assert rows.load("alice")[0].quantity == 2
    rows.delete("alice", "egg")
    assert not rows.contains("alice", "egg")


def test_cookbook_rows(db: SqliteDatabase) -> None:
    cookbook = CookbookSql(db)
    recipe = Recipe(
        "Pancakes",
        GroceryRegister([Grocery("flour", 200), Grocery("milk", 300, "ml")]),
        StepRegister(["Whisk", "Fry"]),
        is_favorite=True,
    )

    recipe.id = cookbook.insert_recipe("alice", recipe)
    [loaded] = cookbook.load_recipes("alice")

    assert loaded.id == recipe.id
    assert loaded.is_favorite is True
    assert [(g.name, g.quantity, g.unit) for g in loaded.groceries()] == [("flour", 200, "g"), ("milk", 300, "ml")]
    assert loaded.step_register.texts() == ["Whisk", "Fry"]

    cookbook.set_favorite(recipe.id, False)
    cookbook.delete_recipe(recipe.id)
    assert cookbook.load_recipes("alice") == []
    assert db.query("SELECT * FROM recipe_step") == []


def test_update_recipe_needs_id(db: SqliteDatabase) -> None:
    with pytest.raises(ValueError):
        CookbookSql(db).update_recipe(Recipe("Soup"))

from __future__ import annotations

import pytest

from pantrypal.domain.aggregates import Recipe
from pantrypal.domain.entities import Grocery
from pantrypal.domain.errors import DuplicateKeyError, NotFoundError
from pantrypal.domain.registers import GroceryRegister, RecipeRegister, StepRegister


def _pancakes() -> Recipe:
    return Recipe(
        "Pancakes",
        GroceryRegister([Grocery("flour", 200), Grocery("milk", 300, "ml"), Grocery("egg", 2, "pcs")]),
        StepRegister(["Whisk", "Fry"]),
    )


def _register_with_pancakes() -> RecipeRegister:
    register = RecipeRegister()
    register.add_recipe(_pancakes())
    return register


def test_add_recipe() -> None:
    register = _register_with_pancakes()

    assert register.contains_recipe("Pancakes")
    assert len(register) == 1


def test_add_existing_recipe_raises() -> None:
    register = _register_with_pancakes()

    with pytest.raises(DuplicateKeyError) as excinfo:
        register.add_recipe(_pancakes())

    assert excinfo.value.message == "Recipe already exists in register"


def test_create_recipe_builds_and_adds() -> None:
    register = RecipeRegister()

    recipe = register.create_recipe("Omelette", GroceryRegister([Grocery("egg", 3, "pcs")]), StepRegister(["Beat"]))

    assert register.get_recipe_by_name("Omelette") is recipe
    assert recipe.grocery_register.contains_grocery("egg")
    with pytest.raises(DuplicateKeyError):
        register.create_recipe("Omelette")


def test_remove_recipe() -> None:
    register = _register_with_pancakes()

    register.remove_recipe("Pancakes")

    assert len(register) == 0
    with pytest.raises(NotFoundError) as excinfo:
        register.remove_recipe("Pancakes")
    assert excinfo.value.message == "Recipe does not exist in register"


def test_get_recipe_by_name_absent() -> None:
    with pytest.raises(NotFoundError):
        RecipeRegister().get_recipe_by_name("Soup")


def test_update_recipe_absent_raises_not_found() -> None:
    register = _register_with_pancakes()

    with pytest.raises(NotFoundError):
        register.update_recipe(Recipe("Soup"))

    assert len(register) == 1


def test_update_recipe_replaces_in_place() -> None:
    register = _register_with_pancakes()
    register.add_recipe(Recipe("Waffles"))
    replacement = Recipe("Pancakes", GroceryRegister([Grocery("oat milk", 250, "ml")]), StepRegister(["Mix"]))

    register.update_recipe(replacement)

    assert len(register) == 2
    assert register.keys() == ["Pancakes", "Waffles"]
    assert register.get_recipe_by_name("Pancakes") is replacement
    assert register.get_recipe_by_name("Pancakes").step_register.texts() == ["Mix"]


def test_update_recipe_fields_keeps_favorite_and_id() -> None:
    register = _register_with_pancakes()
    current = register.get_recipe_by_name("Pancakes")
    current.set_favorite(True)
    current.id = 7

    updated = register.update_recipe_fields("Pancakes", GroceryRegister([Grocery("flour", 100)]), StepRegister())

    assert updated.is_favorite is True
    assert updated.id == 7
    assert register.get_recipe_by_name("Pancakes").grocery_register.get_grocery("flour").quantity == 100


def test_search_recipes() -> None:
    register = RecipeRegister()
    for name in ("Pancakes", "Pasta", "Soup"):
        register.add_recipe(Recipe(name))

    assert [r.name for r in register.search_recipes("pa")] == ["Pancakes", "Pasta"]
    assert list(register.search_recipes("zzz")) == []


def test_toggle_favorite() -> None:
    recipe = _pancakes()

    assert recipe.toggle_favorite() is True
    assert recipe.toggle_favorite() is False

"""Entities that exclusively own registers: pantry shelves and recipes."""

from __future__ import annotations

from typing import List, Optional

from .entities import Grocery, Model, Step
from .registers import GroceryRegister, StepRegister

DEFAULT_SHELF_NAME = "Unsorted"


class Shelf(Model):
    """A named grouping of groceries within the pantry.

    The shelf owns its ``GroceryRegister``; other code changes shelf contents
    only through ``add_grocery``/``remove_grocery``.
    """

    def __init__(self, name: str, key: Optional[str] = None) -> None:
        super().__init__(key)
        self.name = name
        self._groceries = GroceryRegister()

    @property
    def grocery_register(self) -> GroceryRegister:
        return self._groceries

    def groceries(self) -> List[Grocery]:
        return self._groceries.values()

    def set_name(self, name: str) -> None:
        self.name = name

    def add_grocery(self, grocery: Grocery) -> None:
        self._groceries.add_grocery(grocery)

    def remove_grocery(self, grocery: Grocery) -> None:
        self._groceries.remove_grocery(grocery)

    def __repr__(self) -> str:
        return f"Shelf(key={self.key!r}, name={self.name!r}, groceries={self._groceries.keys()!r})"


class Recipe(Model):
    """A named recipe with ingredients, ordered steps, and a favourite flag."""

    def __init__(
        self,
        name: str,
        groceries: Optional[GroceryRegister] = None,
        steps: Optional[StepRegister] = None,
        *,
        is_favorite: bool = False,
    ) -> None:
        if not isinstance(name, str) or not name.strip():
            raise ValueError("Recipe name must be a non-empty string.")
        super().__init__(name)
        self.name = name
        self._groceries = groceries if groceries is not None else GroceryRegister()
        self._steps = steps if steps is not None else StepRegister()
        self.is_favorite = bool(is_favorite)

    @property
    def grocery_register(self) -> GroceryRegister:
        return self._groceries

    @property
    def step_register(self) -> StepRegister:
        return self._steps

    def groceries(self) -> List[Grocery]:
        return self._groceries.values()

    def steps(self) -> List[Step]:
        return self._steps.values()

    def set_favorite(self, favorite: bool) -> None:
        self.is_favorite = bool(favorite)

    def toggle_favorite(self) -> bool:
        self.is_favorite = not self.is_favorite
        return self.is_favorite

    def __repr__(self) -> str:
        return (
            f"Recipe(name={self.name!r}, groceries={self._groceries.keys()!r}, "
            f"steps={len(self._steps)}, is_favorite={self.is_favorite!r})"
        )


__all__ = ["DEFAULT_SHELF_NAME", "Recipe", "Shelf"]

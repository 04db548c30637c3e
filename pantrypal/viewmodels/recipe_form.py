"""Recipe editor state: free-text ingredient and step lines <-> ``Recipe``.

Ingredient lines use ``name;quantity;unit`` (quantity and unit optional).
Step lines are taken verbatim, one instruction per non-blank line.
"""

from __future__ import annotations

from typing import List, Optional

from ..domain.aggregates import Recipe
from ..domain.entities import Grocery, coerce_quantity
from ..domain.registers import GroceryRegister, StepRegister

DEFAULT_UNIT = "g"


def parse_ingredient_line(line: str) -> Grocery:
    parts = [part.strip() for part in line.split(";")]
    name = parts[0]
    if not name:
        raise ValueError(f"Ingredient line {line!r} has no name.")
    raw_quantity = parts[1] if len(parts) > 1 else ""
    unit = parts[2] if len(parts) > 2 and parts[2] else DEFAULT_UNIT
    if raw_quantity:
        try:
            quantity = coerce_quantity(int(raw_quantity))
        except ValueError as exc:
            raise ValueError(f"Invalid quantity {raw_quantity!r} for {name}.") from exc
    else:
        quantity = 0
    return Grocery(name, quantity, unit)


def parse_ingredients(text: str) -> GroceryRegister:
    """Parse one ingredient per line; repeated names add up their quantities."""
    register = GroceryRegister()
    for line in (text or "").splitlines():
        if not line.strip():
            continue
        grocery = parse_ingredient_line(line)
        if register.contains_grocery(grocery.name):
            existing = register.get_grocery(grocery.name)
            existing.set_quantity(existing.quantity + grocery.quantity)
        else:
            register.add_grocery(grocery)
    return register


def parse_steps(text: str) -> StepRegister:
    return StepRegister(line.strip() for line in (text or "").splitlines() if line.strip())


def format_ingredient(grocery: Grocery) -> str:
    return f"{grocery.name};{grocery.quantity};{grocery.unit}"


class RecipeFormVM:
    """Editable recipe fields; ``build`` produces a fresh ``Recipe``."""

    def __init__(self) -> None:
        self.name: str = ""
        self.ingredients_text: str = ""
        self.steps_text: str = ""
        self.editing: Optional[str] = None

    def load(self, recipe: Optional[Recipe]) -> None:
        if recipe is None:
            self.clear()
            return
        self.name = recipe.name
        self.ingredients_text = "\n".join(format_ingredient(g) for g in recipe.groceries())
        self.steps_text = "\n".join(recipe.step_register.texts())
        self.editing = recipe.name

    def clear(self) -> None:
        self.name = ""
        self.ingredients_text = ""
        self.steps_text = ""
        self.editing = None

    @property
    def is_edit(self) -> bool:
        """True when the form holds an existing recipe under its original name."""
        return self.editing is not None and self.editing == self.name.strip()

    def build(self) -> Recipe:
        name = self.name.strip()
        if not name:
            raise ValueError("Recipe name is required.")
        return Recipe(name, parse_ingredients(self.ingredients_text), parse_steps(self.steps_text))

    def step_lines(self) -> List[str]:
        return parse_steps(self.steps_text).texts()


__all__ = [
    "RecipeFormVM",
    "format_ingredient",
    "parse_ingredient_line",
    "parse_ingredients",
    "parse_steps",
]

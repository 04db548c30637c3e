"""Insertion-ordered keyed collections of domain entities.

``Register`` is generic over the stored model type. The error kinds it raises
are injected at construction (``not_found`` / ``duplicate`` factories), so
concrete registers only choose the label used in their messages and add
name-based helpers on top.

Registers never touch persistence; controllers decide what to store.
"""

from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Callable,
    Dict,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    TypeVar,
)

from .entities import Grocery, Model, Step
from .errors import DuplicateKeyError, NotFoundError, NullArgumentError

if TYPE_CHECKING:  # pragma: no cover - type checking helper
    from .aggregates import Recipe, Shelf

T = TypeVar("T", bound=Model)
ErrorFactory = Callable[[str], Exception]


def register_errors(label: str) -> Dict[str, ErrorFactory]:
    """Build the ``not_found``/``duplicate`` factories for a register label."""

    def not_found(key: str) -> Exception:
        return NotFoundError(f"{label} does not exist in register", key=key)

    def duplicate(key: str) -> Exception:
        return DuplicateKeyError(f"{label} already exists in register", key=key)

    return {"not_found": not_found, "duplicate": duplicate}


class Register(Generic[T]):
    """Ordered mapping ``key -> entity`` with strict add/remove semantics."""

    def __init__(
        self,
        *,
        not_found: Optional[ErrorFactory] = None,
        duplicate: Optional[ErrorFactory] = None,
        items: Iterable[T] = (),
    ) -> None:
        defaults = register_errors("Item")
        self._not_found = not_found or defaults["not_found"]
        self._duplicate = duplicate or defaults["duplicate"]
        self._items: Dict[str, T] = {}
        for item in items:
            self.add(item)

    # ------------------------------------------------------------------
    # Core contract
    # ------------------------------------------------------------------
    def get(self, key: str) -> T:
        if key not in self._items:
            raise self._not_found(key)
        return self._items[key]

    def contains(self, key: str) -> bool:
        return key in self._items

    def add(self, entity: T) -> None:
        if entity is None:
            raise NullArgumentError("Cannot add None to a register.")
        if entity.key in self._items:
            raise self._duplicate(entity.key)
        self._items[entity.key] = entity

    def remove(self, entity: T) -> None:
        if entity is None:
            raise NullArgumentError("Cannot remove None from a register.")
        if entity.key not in self._items:
            raise self._not_found(entity.key)
        del self._items[entity.key]

    def replace(self, entity: T) -> None:
        """Swap the entity stored under ``entity.key`` keeping its position."""
        if entity is None:
            raise NullArgumentError("Cannot store None in a register.")
        if entity.key not in self._items:
            raise self._not_found(entity.key)
        self._items[entity.key] = entity

    def search(self, text: str) -> Iterator[T]:
        """Yield entities whose key contains ``text`` (case-insensitive).

        The result is a one-shot generator over a snapshot taken at call
        time; an empty string matches everything.
        """
        if text is None:
            raise NullArgumentError("Search text cannot be None.")
        needle = text.lower()
        snapshot = list(self._items.items())
        return (item for key, item in snapshot if needle in key.lower())

    # ------------------------------------------------------------------
    # Collection helpers
    # ------------------------------------------------------------------
    def keys(self) -> List[str]:
        return list(self._items.keys())

    def values(self) -> List[T]:
        return list(self._items.values())

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items.values()))

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.keys()!r})"


class GroceryRegister(Register[Grocery]):
    """Groceries keyed by name (shelf contents, ingredients, shopping list)."""

    def __init__(self, items: Iterable[Grocery] = ()) -> None:
        super().__init__(items=items, **register_errors("Grocery"))

    def get_grocery(self, name: str) -> Grocery:
        return self.get(name)

    def contains_grocery(self, name: str) -> bool:
        return self.contains(name)

    def add_grocery(self, grocery: Grocery) -> None:
        self.add(grocery)

    def remove_grocery(self, grocery: Grocery) -> None:
        self.remove(grocery)

    def search_groceries(self, text: str) -> Iterator[Grocery]:
        return self.search(text)


class StepRegister(Register[Step]):
    """Ordered recipe instructions; insertion order is the step order."""

    def __init__(self, texts: Iterable[str] = ()) -> None:
        super().__init__(**register_errors("Step"))
        self._next_key = 1
        for text in texts:
            self.add_step(text)

    def add_step(self, text: str) -> Step:
        if text is None:
            raise NullArgumentError("Step text cannot be None.")
        step = Step(text, key=str(self._next_key))
        self._next_key += 1
        self.add(step)
        return step

    def remove_step(self, step: Step) -> None:
        self.remove(step)

    def get_step(self, index: int) -> Step:
        """Return the step at 1-based ``index``."""
        steps = self.values()
        if not 1 <= index <= len(steps):
            raise self._not_found(str(index))
        return steps[index - 1]

    def texts(self) -> List[str]:
        return [step.text for step in self._items.values()]


class ShelfRegister(Register["Shelf"]):
    """Pantry shelves keyed by persistence id or local key."""

    def __init__(self) -> None:
        super().__init__(**register_errors("Shelf"))

    def add_shelf(self, shelf: "Shelf") -> None:
        self.add(shelf)

    def remove_shelf(self, shelf: "Shelf") -> None:
        self.remove(shelf)

    def get_shelf(self, key: str) -> "Shelf":
        return self.get(key)

    def get_shelf_by_name(self, name: str) -> "Shelf":
        for shelf in self._items.values():
            if shelf.name == name:
                return shelf
        raise self._not_found(name)

    def contains_shelf_name(self, name: str) -> bool:
        return any(shelf.name == name for shelf in self._items.values())

    def check_name_available(self, name: str, *, ignore: Optional["Shelf"] = None) -> None:
        """Raise the duplicate error if a shelf other than ``ignore`` is called ``name``.

        Shelf names must stay unique so that ``get_shelf_by_name`` has one answer.
        """
        for shelf in self._items.values():
            if shelf.name == name and (ignore is None or shelf.key != ignore.key):
                raise self._duplicate(name)


class RecipeRegister(Register["Recipe"]):
    """Cookbook recipes keyed by recipe name."""

    def __init__(self) -> None:
        super().__init__(**register_errors("Recipe"))

    def add_recipe(self, recipe: "Recipe") -> None:
        self.add(recipe)

    def create_recipe(
        self,
        name: str,
        groceries: Optional[GroceryRegister] = None,
        steps: Optional[StepRegister] = None,
    ) -> "Recipe":
        from .aggregates import Recipe

        if self.contains(name):
            raise self._duplicate(name)
        recipe = Recipe(name, groceries, steps)
        self.add(recipe)
        return recipe

    def remove_recipe(self, name: str) -> None:
        self.remove(self.get(name))

    def get_recipe_by_name(self, name: str) -> "Recipe":
        return self.get(name)

    def contains_recipe(self, name: str) -> bool:
        return self.contains(name)

    def update_recipe(self, recipe: "Recipe") -> None:
        self.replace(recipe)

    def update_recipe_fields(
        self,
        name: str,
        groceries: Optional[GroceryRegister] = None,
        steps: Optional[StepRegister] = None,
    ) -> "Recipe":
        from .aggregates import Recipe

        current = self.get(name)
        recipe = Recipe(name, groceries, steps, is_favorite=current.is_favorite)
        recipe.id = current.id
        self.replace(recipe)
        return recipe

    def search_recipes(self, text: str) -> Iterator["Recipe"]:
        return self.search(text)


__all__ = [
    "ErrorFactory",
    "GroceryRegister",
    "RecipeRegister",
    "Register",
    "ShelfRegister",
    "StepRegister",
    "register_errors",
]

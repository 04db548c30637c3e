"""Leaf domain entities stored in registers."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Any, Optional

_LOCAL_KEYS = itertools.count(1)


def next_local_key() -> str:
    """Return a process-unique key for entities created without persistence."""
    return f"local-{next(_LOCAL_KEYS)}"


def coerce_quantity(value: Any) -> int:
    """Validate a grocery quantity: a non-negative ``int`` (``bool`` rejected)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError("Quantity must be an integer.")
    if value < 0:
        raise ValueError("Quantity must be non-negative.")
    return value


class Model:
    """Base entity identified by an immutable register key.

    Two models are the same entity iff they share a type and their keys are
    equal. ``id`` holds the persistence-generated identifier once stored.
    """

    def __init__(self, key: Optional[str] = None) -> None:
        if key is not None and not str(key).strip():
            raise ValueError("Model key must be a non-empty string.")
        self._key = str(key) if key is not None else next_local_key()
        self.id: Optional[int] = None

    @property
    def key(self) -> str:
        return self._key

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Model) or type(self) is not type(other):
            return NotImplemented
        return self._key == other._key

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._key))


@dataclass(eq=False)
class Grocery(Model):
    """A named, quantified item on a shelf, in a recipe, or on the shopping list.

    ``name`` is the natural key and must not be changed after construction.
    ``shelf`` names the owning shelf (pantry) or the shelf the item should go
    to once bought (shopping list). ``checked`` is only meaningful on the
    shopping list.
    """

    name: str
    quantity: int = 0
    unit: str = "g"
    shelf: Optional[str] = None
    checked: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("Grocery name must be a non-empty string.")
        Model.__init__(self, self.name)
        self.quantity = coerce_quantity(self.quantity)
        self.checked = bool(self.checked)

    def set_quantity(self, quantity: int) -> None:
        self.quantity = coerce_quantity(quantity)

    def set_checked(self, checked: bool) -> None:
        self.checked = bool(checked)

    def set_shelf(self, shelf: Optional[str]) -> None:
        self.shelf = shelf

    def label(self) -> str:
        return f"{self.name} {self.quantity} {self.unit}".strip()


class Step(Model):
    """One recipe instruction; its position in the ``StepRegister`` is its index."""

    def __init__(self, text: str, key: Optional[str] = None) -> None:
        if text is None:
            raise ValueError("Step text is required.")
        super().__init__(key)
        self.text = str(text)

    def __repr__(self) -> str:
        return f"Step(key={self.key!r}, text={self.text!r})"


__all__ = ["Grocery", "Model", "Step", "coerce_quantity", "next_local_key"]

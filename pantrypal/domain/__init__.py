"""Domain package exports for entities, registers, and errors."""

from .aggregates import Recipe, Shelf
from .entities import Grocery, Model, Step
from .errors import (
    DuplicateKeyError,
    NotFoundError,
    NullArgumentError,
    RegisterError,
    UnsupportedActionError,
)
from .registers import (
    GroceryRegister,
    RecipeRegister,
    Register,
    ShelfRegister,
    StepRegister,
    register_errors,
)
from .session import Session

__all__ = [
    "DuplicateKeyError",
    "Grocery",
    "GroceryRegister",
    "Model",
    "NotFoundError",
    "NullArgumentError",
    "Recipe",
    "RecipeRegister",
    "Register",
    "RegisterError",
    "Session",
    "Shelf",
    "ShelfRegister",
    "Step",
    "StepRegister",
    "UnsupportedActionError",
    "register_errors",
]

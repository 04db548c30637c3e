"""Cookbook controller: recipe register, search, favourites and detail selection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from ..domain.aggregates import Recipe
from ..domain.entities import Grocery
from ..domain.errors import NullArgumentError
from ..domain.ports import CookbookStore, ShoppingListPort
from ..domain.registers import RecipeRegister
from ..domain.session import Session
from .controller import Controller, View
from .observer import Action
from .view_manager import ViewManager


@dataclass
class CookbookPage:
    """What the cookbook view draws: the ordered search hits and the open recipe."""

    recipes: List[Recipe] = field(default_factory=list)
    selected: Optional[Recipe] = None
    search_text: str = ""


class CookbookController(Controller):
    """Own the user's recipes and the cookbook page state.

    Recipe names are unique. Ingredients reach the shopping list only
    through the ``ShoppingListPort`` capability.
    """

    def __init__(
        self,
        view: Optional[View],
        view_manager: ViewManager,
        session: Session,
        *,
        shopping_list: ShoppingListPort,
        cookbook_store: Optional[CookbookStore] = None,
    ) -> None:
        self._recipes = RecipeRegister()
        self._search_text = ""
        self._current: List[Recipe] = []
        self.selected: Optional[Recipe] = None
        self.shopping_list = shopping_list
        self.cookbook_store = cookbook_store
        self._handlers: Dict[Action, Callable[[Recipe], object]] = {
            Action.ADD: self.add_recipe,
            Action.REMOVE: self.delete_recipe,
            Action.FAVORITE: self.toggle_favorite,
            Action.OPEN_RECIPE: self.open_recipe,
            Action.ADD_TO_SHOPPING_LIST: self.add_ingredients_to_shopping_list,
        }
        super().__init__(view, view_manager, session)
        self.reload()

    @property
    def _persisting(self) -> bool:
        return self.session.is_logged_in and self.cookbook_store is not None

    @property
    def recipe_register(self) -> RecipeRegister:
        return self._recipes

    # ------------------------------------------------------------------
    # Read models
    # ------------------------------------------------------------------
    def search_recipes(self, text: str) -> List[Recipe]:
        """Filter the page by ``text``, a case-insensitive name substring.

        Args:
            text: Search text; an empty string lists every recipe.

        Returns:
            The hits in display order.
        """
        if text is None:
            raise NullArgumentError("Search text cannot be None.")
        self._search_text = text
        self._current = list(self._recipes.search_recipes(text))
        self.render()
        return self.recipes()

    def recipes(self) -> List[Recipe]:
        """Current search hits, favourites first, otherwise in register order."""
        return sorted(self._current, key=lambda recipe: not recipe.is_favorite)

    def read_model(self) -> CookbookPage:
        return CookbookPage(self.recipes(), self.selected, self._search_text)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def add_recipe(self, recipe: Recipe) -> None:
        """Register ``recipe`` and, when logged in, store it with its ingredients.

        Raises:
            DuplicateKeyError: a recipe with the same name exists.
        """
        if recipe is None:
            raise NullArgumentError("Recipe cannot be None.")
        self._recipes.add_recipe(recipe)
        if self._persisting:
            recipe.id = self.cookbook_store.insert_recipe(self.user_name, recipe)
        self._refresh()

    def update_recipe(self, recipe: Recipe) -> None:
        """Replace the recipe with the same name, keeping its position and id."""
        if recipe is None:
            raise NullArgumentError("Recipe cannot be None.")
        previous = self._recipes.get_recipe_by_name(recipe.name)
        if recipe.id is None:
            recipe.id = previous.id
        self._recipes.update_recipe(recipe)
        if self.selected is not None and self.selected.key == recipe.key:
            self.selected = recipe
        if self._persisting and recipe.id is not None:
            self.cookbook_store.update_recipe(recipe)
        self._refresh()

    def delete_recipe(self, recipe: Recipe) -> None:
        """Remove the recipe called like ``recipe``; closes it if it was open."""
        if recipe is None:
            raise NullArgumentError("Recipe cannot be None.")
        registered = self._recipes.get_recipe_by_name(recipe.name)
        self._recipes.remove_recipe(recipe.name)
        if self.selected is not None and self.selected.key == registered.key:
            self.selected = None
        if self._persisting and registered.id is not None:
            self.cookbook_store.delete_recipe(registered.id)
        self._refresh()

    def toggle_favorite(self, recipe: Recipe) -> bool:
        """Flip the favourite flag.

        Returns:
            The new flag.
        """
        if recipe is None:
            raise NullArgumentError("Recipe cannot be None.")
        registered = self._recipes.get_recipe_by_name(recipe.name)
        favorite = registered.toggle_favorite()
        if self._persisting and registered.id is not None:
            self.cookbook_store.set_favorite(registered.id, favorite)
        self._refresh()
        return favorite

    def open_recipe(self, recipe: Recipe) -> Recipe:
        """Select the registered recipe for the detail pane and return it."""
        if recipe is None:
            raise NullArgumentError("Recipe cannot be None.")
        self.selected = self._recipes.get_recipe_by_name(recipe.name)
        self.render()
        return self.selected

    def add_ingredients_to_shopping_list(self, recipe: Recipe) -> int:
        """Put a copy of every ingredient on the shopping list; returns the count."""
        if recipe is None:
            raise NullArgumentError("Recipe cannot be None.")
        registered = self._recipes.get_recipe_by_name(recipe.name)
        ingredients = registered.groceries()
        for ingredient in ingredients:
            self.shopping_list.add_grocery(Grocery(ingredient.name, ingredient.quantity, ingredient.unit))
        self._log.info("Added %d ingredients of %s to the shopping list", len(ingredients), registered.name)
        return len(ingredients)

    def reload(self) -> None:
        """Load the logged-in user's recipes and drop the selection."""
        self._recipes.clear()
        self.selected = None
        if self._persisting:
            for recipe in self.cookbook_store.load_recipes(self.user_name):
                self._recipes.add_recipe(recipe)
        self._refresh()

    def _refresh(self) -> None:
        self._current = list(self._recipes.search_recipes(self._search_text))
        self.render()

    # ------------------------------------------------------------------
    # Observer
    # ------------------------------------------------------------------
    def update(self, action: Action, payload: object) -> None:
        handler = self._handlers.get(action)
        if handler is None or not isinstance(payload, Recipe):
            self._unsupported(action, payload)
        self._dispatch(action, handler, payload)


__all__ = ["CookbookController", "CookbookPage"]

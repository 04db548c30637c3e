"""Shopping-list controller: a flat grocery register plus the move to the pantry."""

from __future__ import annotations

from typing import List, Optional

from ..adapters.db_errors import PersistenceError
from ..domain.aggregates import DEFAULT_SHELF_NAME
from ..domain.entities import Grocery, coerce_quantity
from ..domain.errors import NullArgumentError
from ..domain.ports import CatalogStore, PantryPort, ShoppingListStore
from ..domain.registers import GroceryRegister
from ..domain.session import Session
from .controller import Controller, View
from .observer import Action
from .view_manager import ViewManager


class ShoppingListController(Controller):
    """Own the shopping list and hand bought groceries over to the pantry.

    Persisted rows are keyed by user and grocery name. The pantry is reached
    only through the narrow ``PantryPort`` capability.
    """

    def __init__(
        self,
        view: Optional[View],
        view_manager: ViewManager,
        session: Session,
        *,
        pantry: PantryPort,
        shopping_store: Optional[ShoppingListStore] = None,
        catalog: Optional[CatalogStore] = None,
    ) -> None:
        self._groceries = GroceryRegister()
        self.pantry = pantry
        self.shopping_store = shopping_store
        self.catalog = catalog
        super().__init__(view, view_manager, session)
        self.reload()

    @property
    def _persisting(self) -> bool:
        return self.session.is_logged_in and self.shopping_store is not None

    @property
    def grocery_register(self) -> GroceryRegister:
        return self._groceries

    def groceries(self) -> List[Grocery]:
        """Groceries on the list, in the order they were added."""
        return self._groceries.values()

    def read_model(self) -> List[Grocery]:
        return self.groceries()

    # ------------------------------------------------------------------
    def add_grocery(self, grocery: Grocery) -> None:
        """Put ``grocery`` on the list.

        Args:
            grocery: The grocery to add. An entry with the same name absorbs
                its quantity instead of being duplicated.

        Side Effects:
            When logged in, an unknown name is added to the catalog and the
            stored row is inserted or its quantity raised.
        """
        if grocery is None:
            raise NullArgumentError("Grocery cannot be None.")
        if self._groceries.contains_grocery(grocery.name):
            existing = self._groceries.get_grocery(grocery.name)
            if self._persisting:
                self.shopping_store.add_quantity(self.user_name, grocery.name, grocery.quantity)
            existing.set_quantity(existing.quantity + grocery.quantity)
        else:
            if self._persisting:
                if self.catalog is not None and not self.catalog.contains(grocery.name):
                    self.catalog.insert(grocery.name, grocery.unit)
                if self.shopping_store.contains(self.user_name, grocery.name):
                    self.shopping_store.add_quantity(self.user_name, grocery.name, grocery.quantity)
                else:
                    self.shopping_store.insert(self.user_name, grocery)
            self._groceries.add_grocery(grocery)
        self.render()

    def remove_grocery(self, grocery: Grocery) -> None:
        """Take ``grocery`` off the list; memory first, then the database."""
        if grocery is None:
            raise NullArgumentError("Grocery cannot be None.")
        self._groceries.remove_grocery(grocery)
        self.render()
        if self._persisting:
            self.shopping_store.delete(self.user_name, grocery.name)

    def set_checked(self, grocery: Grocery, checked: bool) -> None:
        """Mark ``grocery`` as bought or not and persist the flag."""
        registered = self._registered(grocery)
        registered.set_checked(checked)
        if self._persisting:
            self.shopping_store.set_bought(self.user_name, registered.name, registered.checked)
        self.render()

    def set_quantity(self, grocery: Grocery, quantity: int) -> None:
        """Replace the quantity of ``grocery``.

        Raises:
            ValueError: ``quantity`` is not a non-negative integer.
        """
        registered = self._registered(grocery)
        registered.set_quantity(coerce_quantity(quantity))
        if self._persisting:
            self.shopping_store.set_quantity(self.user_name, registered.name, registered.quantity)
        self.render()

    def add_groceries_to_pantry(self) -> List[Grocery]:
        """Move every checked grocery to its pantry shelf.

        All checked entries are forwarded first, then all are removed from
        the list. This is not atomic: a failure part-way leaves earlier
        groceries in the pantry and every grocery still on the list.

        Returns:
            The groceries that were moved.
        """
        checked = [grocery for grocery in self._groceries if grocery.checked]
        for grocery in checked:
            try:
                self.pantry.add_grocery_to_shelf(
                    grocery.shelf or DEFAULT_SHELF_NAME,
                    grocery.name,
                    grocery.quantity,
                    grocery.unit,
                )
            except (ValueError, PersistenceError):
                self._log.warning("Moving %s to the pantry failed", grocery.name)
                raise
        for grocery in checked:
            self.remove_grocery(grocery)
        self._log.info("Moved %d groceries to the pantry", len(checked))
        return checked

    def reload(self) -> None:
        """Load the logged-in user's list, or start empty for a guest."""
        self._groceries.clear()
        if self._persisting:
            for grocery in self.shopping_store.load(self.user_name):
                self._groceries.add_grocery(grocery)
        self.render()

    # ------------------------------------------------------------------
    # Observer
    # ------------------------------------------------------------------
    def update(self, action: Action, payload: object) -> None:
        if not isinstance(payload, Grocery) or action not in (Action.ADD, Action.REMOVE):
            self._unsupported(action, payload)
        if action is Action.ADD:
            self._dispatch(action, self.add_grocery, payload)
        else:
            self._dispatch(action, self.remove_grocery, payload)

    def signal(self, action: Action) -> None:
        if action is not Action.ADD_TO_PANTRY:
            self._unsupported(action)
        self._dispatch(action, self.add_groceries_to_pantry)
        self.render()

    def _registered(self, grocery: Grocery) -> Grocery:
        if grocery is None:
            raise NullArgumentError("Grocery cannot be None.")
        return self._groceries.get_grocery(grocery.name)


__all__ = ["ShoppingListController"]

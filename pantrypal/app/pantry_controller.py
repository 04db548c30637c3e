"""Pantry controller: shelves and the groceries stored on them."""

from __future__ import annotations

from typing import List, Optional

from ..domain.aggregates import DEFAULT_SHELF_NAME, Shelf
from ..domain.entities import Grocery, coerce_quantity
from ..domain.errors import NullArgumentError
from ..domain.ports import CatalogStore, PantryStore
from ..domain.registers import ShelfRegister
from ..domain.session import Session
from .controller import Controller, View
from .observer import Action
from .view_manager import ViewManager


class PantryController(Controller):
    """Keep the shelf register, the pantry view and the database in step.

    In guest mode only the register changes. When logged in, inserts get
    their keys from the database first; deletes and renames change memory
    first and are written afterwards, without rollback if the write fails.
    Shelf names are unique per pantry.
    """

    NEW_SHELF_PREFIX = "New Shelf"

    def __init__(
        self,
        view: Optional[View],
        view_manager: ViewManager,
        session: Session,
        *,
        pantry_store: Optional[PantryStore] = None,
        catalog: Optional[CatalogStore] = None,
    ) -> None:
        self._shelves = ShelfRegister()
        self._new_shelf_counter = 0
        self.pantry_store = pantry_store
        self.catalog = catalog
        super().__init__(view, view_manager, session)
        self.reload()

    @property
    def _persisting(self) -> bool:
        return self.session.is_logged_in and self.pantry_store is not None

    # ------------------------------------------------------------------
    # Read models
    # ------------------------------------------------------------------
    @property
    def shelf_register(self) -> ShelfRegister:
        return self._shelves

    def shelves(self) -> List[Shelf]:
        """Return the shelves in the order they were added or loaded."""
        return self._shelves.values()

    def groceries(self, shelf: Shelf) -> List[Grocery]:
        return self._registered(shelf).groceries()

    def read_model(self) -> List[Shelf]:
        return self.shelves()

    # ------------------------------------------------------------------
    # Shelves
    # ------------------------------------------------------------------
    def add_shelf(self, name: Optional[str] = None) -> Shelf:
        """Create a shelf and show it.

        Args:
            name: Shelf name. ``None`` picks the next free "New Shelf N".

        Returns:
            The registered shelf, keyed by its database id when logged in.

        Raises:
            NullArgumentError: ``name`` is blank.
            DuplicateKeyError: another shelf already has ``name``.
        """
        if name is None:
            name = self._next_shelf_name()
        elif not name.strip():
            raise NullArgumentError("Shelf name cannot be empty.")
        self._shelves.check_name_available(name)
        if self._persisting:
            shelf_id = self.pantry_store.insert_shelf(name, self.user_name)
            shelf = Shelf(name, key=str(shelf_id))
            shelf.id = shelf_id
        else:
            shelf = Shelf(name)
        self._shelves.add_shelf(shelf)
        self._log.debug("Added shelf %s (%s)", shelf.name, shelf.key)
        self.render()
        return shelf

    def delete_shelf(self, shelf: Shelf) -> None:
        """Remove ``shelf`` with its groceries.

        Side Effects:
            The register and view change first; a failing database delete
            propagates afterwards and is not rolled back.
        """
        if shelf is None:
            raise NullArgumentError("Shelf cannot be None.")
        self._shelves.remove_shelf(shelf)
        self.render()
        if self._persisting and shelf.id is not None:
            self.pantry_store.delete_shelf(shelf.key)

    def edit_shelf_name(self, shelf: Shelf, name: str) -> None:
        """Rename ``shelf`` and the shelf reference of every grocery on it.

        Raises:
            NullArgumentError: ``name`` is blank.
            DuplicateKeyError: a different shelf already has ``name``.
        """
        if name is None or not name.strip():
            raise NullArgumentError("Shelf name cannot be empty.")
        registered = self._registered(shelf)
        self._shelves.check_name_available(name, ignore=registered)
        registered.set_name(name)
        for grocery in registered.groceries():
            grocery.set_shelf(name)
        self.render()
        if self._persisting and registered.id is not None:
            self.pantry_store.rename_shelf(registered.key, name)

    # ------------------------------------------------------------------
    # Groceries
    # ------------------------------------------------------------------
    def add_grocery(self, shelf: Shelf, name: str, amount: int, unit: str) -> Grocery:
        """Add ``amount`` of ``name`` to ``shelf``, merging with an existing entry.

        A grocery already on the shelf keeps its unit and gains ``amount``.
        A new one is added to the catalog first if the catalog lacks it.

        Returns:
            The grocery now held by the shelf.
        """
        registered = self._registered(shelf)
        if name is None:
            raise NullArgumentError("Grocery name cannot be None.")
        amount = coerce_quantity(amount)
        groceries = registered.grocery_register
        if groceries.contains_grocery(name):
            grocery = groceries.get_grocery(name)
            quantity = grocery.quantity + amount
            if self._persisting:
                self.pantry_store.update_quantity(registered.key, name, quantity)
            grocery.set_quantity(quantity)
        else:
            grocery = Grocery(name, amount, unit or "g", shelf=registered.name)
            if self._persisting:
                if self.catalog is not None and not self.catalog.contains(name):
                    self.catalog.insert(name, grocery.unit)
                self.pantry_store.insert_grocery(registered.key, name, amount)
            registered.add_grocery(grocery)
        self.render()
        return grocery

    def add_grocery_to_shelf(self, shelf_name: str, name: str, amount: int, unit: str) -> Grocery:
        """Add to the shelf called ``shelf_name``, creating the shelf if needed.

        A blank ``shelf_name`` means the "Unsorted" shelf.
        """
        if shelf_name is None:
            raise NullArgumentError("Shelf name cannot be None.")
        shelf_name = shelf_name if shelf_name.strip() else DEFAULT_SHELF_NAME
        if self._shelves.contains_shelf_name(shelf_name):
            shelf = self._shelves.get_shelf_by_name(shelf_name)
        else:
            shelf = self.add_shelf(shelf_name)
        return self.add_grocery(shelf, name, amount, unit)

    def delete_grocery(self, shelf: Shelf, grocery: Grocery) -> None:
        """Take ``grocery`` off ``shelf``; memory first, then the database."""
        if grocery is None:
            raise NullArgumentError("Grocery cannot be None.")
        registered = self._registered(shelf)
        registered.remove_grocery(grocery)
        self.render()
        if self._persisting and registered.id is not None:
            self.pantry_store.delete_grocery(registered.key, grocery.name)

    # ------------------------------------------------------------------
    def reload(self) -> None:
        """Replace the register with the logged-in user's shelves, or empty it for a guest."""
        self._shelves.clear()
        if self._persisting:
            for shelf in self.pantry_store.load_shelves(self.user_name):
                self._shelves.add_shelf(shelf)
            self._log.info("Loaded %d shelves for %s", len(self._shelves), self.user_name)
        self.render()

    # ------------------------------------------------------------------
    # Observer
    # ------------------------------------------------------------------
    def update(self, action: Action, payload: object) -> None:
        if not isinstance(payload, Grocery) or action not in (Action.ADD, Action.REMOVE):
            self._unsupported(action, payload)
        if action is Action.ADD:
            self._dispatch(
                action,
                self.add_grocery_to_shelf,
                payload.shelf or DEFAULT_SHELF_NAME,
                payload.name,
                payload.quantity,
                payload.unit,
            )
        else:
            self._dispatch(action, self._remove_from_its_shelf, payload)

    def signal(self, action: Action) -> None:
        if action is not Action.ADD_TO_PANTRY:
            self._unsupported(action)
        self.render()

    def _remove_from_its_shelf(self, grocery: Grocery) -> None:
        if grocery.shelf is None:
            raise NullArgumentError(f"{grocery.name} is not on a shelf.")
        self.delete_grocery(self._shelves.get_shelf_by_name(grocery.shelf), grocery)

    def _next_shelf_name(self) -> str:
        while True:
            self._new_shelf_counter += 1
            name = f"{self.NEW_SHELF_PREFIX} {self._new_shelf_counter}"
            if not self._shelves.contains_shelf_name(name):
                return name

    def _registered(self, shelf: Shelf) -> Shelf:
        if shelf is None:
            raise NullArgumentError("Shelf cannot be None.")
        return self._shelves.get_shelf(shelf.key)


__all__ = ["PantryController"]

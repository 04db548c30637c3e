"""One shopping-list row: bought checkbox, name, quantity spinner, delete button.

Each row is its own ``Observable``; the delete button publishes
``Action.REMOVE`` with the row's grocery to that row's observers only.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from ...domain.entities import Grocery
from ..observer import Action, Observable

MAX_SPINNER_QUANTITY = 100


class GroceryListElement(ttk.Frame, Observable):
    def __init__(self, parent, grocery: Grocery, **kwargs):
        ttk.Frame.__init__(self, parent, **kwargs)
        Observable.__init__(self)
        self.grocery = grocery

        self.on_checked: Optional[Callable[[Grocery, bool], None]] = None
        self.on_quantity: Optional[Callable[[Grocery, str], None]] = None

        self.checked_var = tk.BooleanVar(value=grocery.checked)
        self.quantity_var = tk.StringVar(value=str(grocery.quantity))

        ttk.Checkbutton(self, variable=self.checked_var, command=self._on_check_click).pack(side=tk.LEFT)
        ttk.Label(self, text=grocery.name, width=24).pack(side=tk.LEFT, padx=(4, 8))
        spinner = ttk.Spinbox(
            self,
            from_=0,
            to=MAX_SPINNER_QUANTITY,
            width=6,
            textvariable=self.quantity_var,
            command=self._on_quantity_changed,
        )
        spinner.pack(side=tk.LEFT)
        spinner.bind("<FocusOut>", lambda _e: self._on_quantity_changed())
        spinner.bind("<Return>", lambda _e: self._on_quantity_changed())
        ttk.Label(self, text=grocery.unit, width=6).pack(side=tk.LEFT, padx=(4, 8))
        ttk.Label(self, text=grocery.shelf or "-", width=16).pack(side=tk.LEFT)
        ttk.Button(self, text="Delete", command=self._on_delete_click).pack(side=tk.RIGHT)

    # ------------------------------------------------------------------
    def _on_check_click(self) -> None:
        if self.on_checked:
            self.on_checked(self.grocery, bool(self.checked_var.get()))

    def _on_quantity_changed(self) -> None:
        if self.quantity_var.get().strip() == str(self.grocery.quantity):
            return
        if self.on_quantity:
            self.on_quantity(self.grocery, self.quantity_var.get())

    def _on_delete_click(self) -> None:
        self.notify(Action.REMOVE, self.grocery)

    def destroy(self) -> None:
        self.clear_observers()
        super().destroy()


__all__ = ["GroceryListElement"]

"""Shopping-list view: rows of groceries plus an add form and the pantry hand-over.

The view renders the list it is given and reports intents; it never touches
registers or persistence.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, List, Optional, Sequence

from ...domain.entities import Grocery
from ..observer import Action, Observable
from .grocery_list_element import GroceryListElement


class ShoppingListView(ttk.Frame, Observable):
    """Rows are rebuilt on every ``render``; each row forwards to this view's observers."""

    def __init__(self, parent, **kwargs):
        ttk.Frame.__init__(self, parent, **kwargs)
        Observable.__init__(self)

        self.on_add_grocery: Optional[Callable[[str, str, str, str], None]] = None
        self.on_checked: Optional[Callable[[Grocery, bool], None]] = None
        self.on_quantity: Optional[Callable[[Grocery, str], None]] = None

        form = ttk.Frame(self)
        form.pack(side=tk.TOP, fill=tk.X, padx=8, pady=8)
        self.name_var = tk.StringVar()
        self.quantity_var = tk.StringVar(value="1")
        self.unit_var = tk.StringVar(value="g")
        self.shelf_var = tk.StringVar()
        for label, var, width in (
            ("Grocery", self.name_var, 20),
            ("Qty", self.quantity_var, 6),
            ("Unit", self.unit_var, 6),
            ("Shelf", self.shelf_var, 14),
        ):
            ttk.Label(form, text=label).pack(side=tk.LEFT, padx=(0, 4))
            ttk.Entry(form, textvariable=var, width=width).pack(side=tk.LEFT, padx=(0, 8))
        ttk.Button(form, text="Add", command=self._on_add_click).pack(side=tk.LEFT)

        self.rows_host = ttk.Frame(self)
        self.rows_host.pack(side=tk.TOP, fill=tk.BOTH, expand=True, padx=8)
        self._rows: List[GroceryListElement] = []

        footer = ttk.Frame(self)
        footer.pack(side=tk.BOTTOM, fill=tk.X, padx=8, pady=8)
        self.lbl_summary = ttk.Label(footer, text="")
        self.lbl_summary.pack(side=tk.LEFT)
        ttk.Button(footer, text="Add checked to pantry", command=self._on_to_pantry_click).pack(side=tk.RIGHT)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def render(self, groceries: Sequence[Grocery]) -> None:
        for row in self._rows:
            row.destroy()
        self._rows = []
        for grocery in groceries:
            row = GroceryListElement(self.rows_host, grocery)
            row.on_checked = self.on_checked
            row.on_quantity = self.on_quantity
            for observer in self.observers():
                row.subscribe(observer)
            row.pack(side=tk.TOP, fill=tk.X, pady=2)
            self._rows.append(row)
        checked = sum(1 for grocery in groceries if grocery.checked)
        self.lbl_summary.configure(text=f"{len(groceries)} items, {checked} checked")

    def clear_form(self) -> None:
        self.name_var.set("")
        self.quantity_var.set("1")

    # ------------------------------------------------------------------
    def _on_add_click(self) -> None:
        if self.on_add_grocery:
            self.on_add_grocery(
                self.name_var.get(), self.quantity_var.get(), self.unit_var.get(), self.shelf_var.get()
            )

    def _on_to_pantry_click(self) -> None:
        self.notify_signal(Action.ADD_TO_PANTRY)


__all__ = ["ShoppingListView"]

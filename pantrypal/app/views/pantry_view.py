"""Pantry view: one box per shelf with its groceries and an add-grocery row."""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, List, Optional, Sequence

from ...domain.aggregates import Shelf
from ..observer import Action, Observable


class PantryView(ttk.Frame, Observable):
    """UI-only; shelf edits go through ``on_*`` callbacks, grocery removal through ``notify``."""

    def __init__(self, parent, **kwargs):
        ttk.Frame.__init__(self, parent, **kwargs)
        Observable.__init__(self)

        self.on_add_shelf: Optional[Callable[[Optional[str]], None]] = None
        self.on_delete_shelf: Optional[Callable[[Shelf], None]] = None
        self.on_rename_shelf: Optional[Callable[[Shelf, str], None]] = None
        self.on_add_grocery: Optional[Callable[[Shelf, str, str, str], None]] = None

        toolbar = ttk.Frame(self)
        toolbar.pack(side=tk.TOP, fill=tk.X, padx=8, pady=8)
        self.new_shelf_var = tk.StringVar()
        ttk.Entry(toolbar, textvariable=self.new_shelf_var, width=24).pack(side=tk.LEFT, padx=(0, 6))
        ttk.Button(toolbar, text="Add Shelf", command=self._on_add_shelf_click).pack(side=tk.LEFT)

        self.shelves_host = ttk.Frame(self)
        self.shelves_host.pack(side=tk.TOP, fill=tk.BOTH, expand=True, padx=8)
        self._boxes: List[ttk.Labelframe] = []

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def render(self, shelves: Sequence[Shelf]) -> None:
        for box in self._boxes:
            box.destroy()
        self._boxes = [self._build_shelf(shelf) for shelf in shelves]
        for index, box in enumerate(self._boxes):
            box.grid(row=index // 3, column=index % 3, sticky="nsew", padx=4, pady=4)

    # ------------------------------------------------------------------
    # Shelf box
    # ------------------------------------------------------------------
    def _build_shelf(self, shelf: Shelf) -> ttk.Labelframe:
        box = ttk.Labelframe(self.shelves_host, text=shelf.name)

        header = ttk.Frame(box)
        header.pack(side=tk.TOP, fill=tk.X, pady=(0, 4))
        name_var = tk.StringVar(value=shelf.name)
        ttk.Entry(header, textvariable=name_var, width=16).pack(side=tk.LEFT)
        ttk.Button(
            header, text="Rename", command=lambda: self.on_rename_shelf and self.on_rename_shelf(shelf, name_var.get())
        ).pack(side=tk.LEFT, padx=4)
        ttk.Button(
            header, text="Delete", command=lambda: self.on_delete_shelf and self.on_delete_shelf(shelf)
        ).pack(side=tk.RIGHT)

        for grocery in shelf.groceries():
            row = ttk.Frame(box)
            row.pack(side=tk.TOP, fill=tk.X)
            ttk.Label(row, text=grocery.label()).pack(side=tk.LEFT)
            ttk.Button(
                row, text="x", width=2, command=lambda g=grocery: self.notify(Action.REMOVE, g)
            ).pack(side=tk.RIGHT)

        form = ttk.Frame(box)
        form.pack(side=tk.TOP, fill=tk.X, pady=(4, 0))
        grocery_var = tk.StringVar()
        amount_var = tk.StringVar(value="1")
        unit_var = tk.StringVar(value="g")
        ttk.Entry(form, textvariable=grocery_var, width=12).pack(side=tk.LEFT)
        ttk.Entry(form, textvariable=amount_var, width=5).pack(side=tk.LEFT, padx=2)
        ttk.Entry(form, textvariable=unit_var, width=4).pack(side=tk.LEFT, padx=2)
        ttk.Button(
            form,
            text="Add",
            command=lambda: self.on_add_grocery
            and self.on_add_grocery(shelf, grocery_var.get(), amount_var.get(), unit_var.get()),
        ).pack(side=tk.LEFT, padx=2)
        return box

    def _on_add_shelf_click(self) -> None:
        name = self.new_shelf_var.get().strip() or None
        self.new_shelf_var.set("")
        if self.on_add_shelf:
            self.on_add_shelf(name)


__all__ = ["PantryView"]

"""Cookbook view: searchable recipe list, recipe details and the recipe editor.

Actions on the selected recipe (open, favourite, delete, shop ingredients)
are published through ``Observable``; search and the editor use callbacks.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, List, Optional

from ...domain.aggregates import Recipe
from ..cookbook_controller import CookbookPage
from ..observer import Action, Observable

FAVORITE_MARK = "★"


class CookbookView(ttk.Frame, Observable):
    def __init__(self, parent, **kwargs):
        ttk.Frame.__init__(self, parent, **kwargs)
        Observable.__init__(self)

        self.on_search: Optional[Callable[[str], None]] = None
        self.on_save_recipe: Optional[Callable[[str, str, str], None]] = None
        self.on_edit_recipe: Optional[Callable[[Recipe], None]] = None
        self.on_new_recipe: Optional[Callable[[], None]] = None

        self._recipes: List[Recipe] = []
        self._selected: Optional[Recipe] = None

        self.columnconfigure(0, weight=1)
        self.columnconfigure(1, weight=2)
        self.rowconfigure(1, weight=1)

        # ---- Search + list ----
        self.search_var = tk.StringVar()
        search = ttk.Entry(self, textvariable=self.search_var)
        search.grid(row=0, column=0, sticky="ew", padx=8, pady=8)
        search.bind("<KeyRelease>", lambda _e: self.on_search and self.on_search(self.search_var.get()))

        left = ttk.Frame(self)
        left.grid(row=1, column=0, sticky="nsew", padx=8)
        self.listbox = tk.Listbox(left, exportselection=False, height=18)
        self.listbox.pack(side=tk.TOP, fill=tk.BOTH, expand=True)
        self.listbox.bind("<<ListboxSelect>>", lambda _e: self._publish(Action.OPEN_RECIPE))

        actions = ttk.Frame(left)
        actions.pack(side=tk.TOP, fill=tk.X, pady=4)
        ttk.Button(actions, text="Favorite", command=lambda: self._publish(Action.FAVORITE)).pack(side=tk.LEFT)
        ttk.Button(actions, text="Delete", command=lambda: self._publish(Action.REMOVE)).pack(side=tk.LEFT, padx=4)
        ttk.Button(
            actions, text="To shopping list", command=lambda: self._publish(Action.ADD_TO_SHOPPING_LIST)
        ).pack(side=tk.LEFT)
        ttk.Button(actions, text="Edit", command=self._on_edit_click).pack(side=tk.LEFT, padx=4)

        # ---- Details + editor ----
        right = ttk.Notebook(self)
        right.grid(row=0, column=1, rowspan=2, sticky="nsew", padx=8, pady=8)

        self.details = tk.Text(right, wrap="word", state="disabled", height=20)
        right.add(self.details, text="Recipe")

        editor = ttk.Frame(right)
        right.add(editor, text="Editor")
        self.name_var = tk.StringVar()
        ttk.Label(editor, text="Name").pack(anchor="w")
        ttk.Entry(editor, textvariable=self.name_var).pack(fill=tk.X)
        ttk.Label(editor, text="Ingredients (name;quantity;unit per line)").pack(anchor="w", pady=(6, 0))
        self.ingredients_text = tk.Text(editor, height=8)
        self.ingredients_text.pack(fill=tk.BOTH, expand=True)
        ttk.Label(editor, text="Steps (one per line)").pack(anchor="w", pady=(6, 0))
        self.steps_text = tk.Text(editor, height=8)
        self.steps_text.pack(fill=tk.BOTH, expand=True)
        buttons = ttk.Frame(editor)
        buttons.pack(fill=tk.X, pady=6)
        ttk.Button(buttons, text="New", command=lambda: self.on_new_recipe and self.on_new_recipe()).pack(
            side=tk.LEFT
        )
        ttk.Button(buttons, text="Save recipe", command=self._on_save_click).pack(side=tk.RIGHT)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def render(self, page: CookbookPage) -> None:
        self._recipes = list(page.recipes)
        self._selected = page.selected
        self.listbox.delete(0, tk.END)
        for index, recipe in enumerate(self._recipes):
            mark = f"{FAVORITE_MARK} " if recipe.is_favorite else "  "
            self.listbox.insert(tk.END, f"{mark}{recipe.name}")
            if page.selected is not None and recipe.key == page.selected.key:
                self.listbox.selection_set(index)
        self._show_details(page.selected)

    def set_form(self, name: str, ingredients: str, steps: str) -> None:
        self.name_var.set(name)
        self.ingredients_text.delete("1.0", tk.END)
        self.ingredients_text.insert("1.0", ingredients)
        self.steps_text.delete("1.0", tk.END)
        self.steps_text.insert("1.0", steps)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _current(self) -> Optional[Recipe]:
        selection = self.listbox.curselection()
        if not selection or selection[0] >= len(self._recipes):
            return None
        return self._recipes[selection[0]]

    def _publish(self, action: Action) -> None:
        recipe = self._current()
        if recipe is not None:
            self.notify(action, recipe)

    def _on_edit_click(self) -> None:
        recipe = self._current()
        if recipe is not None and self.on_edit_recipe:
            self.on_edit_recipe(recipe)

    def _on_save_click(self) -> None:
        if self.on_save_recipe:
            self.on_save_recipe(
                self.name_var.get(),
                self.ingredients_text.get("1.0", tk.END),
                self.steps_text.get("1.0", tk.END),
            )

    def _show_details(self, recipe: Optional[Recipe]) -> None:
        self.details.configure(state="normal")
        self.details.delete("1.0", tk.END)
        if recipe is not None:
            lines = [recipe.name, "", "Ingredients:"]
            lines += [f"  - {grocery.label()}" for grocery in recipe.groceries()]
            lines += ["", "Steps:"]
            lines += [f"  {index}. {step.text}" for index, step in enumerate(recipe.steps(), start=1)]
            self.details.insert("1.0", "\n".join(lines))
        self.details.configure(state="disabled")


__all__ = ["CookbookView"]

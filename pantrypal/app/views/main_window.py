"""
MainWindowView
---------------
Tkinter main window for PantryPal.
This file contains **only View code**: no SQL, no domain logic. It exposes
callback hooks that the App connects to controllers.

- The window provides:
  * Navigation toolbar (Pantry, Shopping list, Cookbook, Log out, Debug log)
  * A content host where the routed views are stacked and raised
  * StatusBar at the bottom
"""
from __future__ import annotations
import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

_TOAST_FOREGROUND = {"error": "#b00020", "warning": "#8a5a00"}


class MainWindowView(tk.Tk):
    """Top-level application window.

    Child views are created with ``parent=self.content_host`` and mounted via
    ``mount_view``; ``show_view`` raises one of them.
    """

    # ---- Callback type aliases ----
    OnVoid = Optional[Callable[[], None]]
    OnToggle = Optional[Callable[[bool], None]]

    def __init__(
        self,
        *,
        on_open_pantry: OnVoid = None,
        on_open_shopping_list: OnVoid = None,
        on_open_cookbook: OnVoid = None,
        on_log_out: OnVoid = None,
        on_toggle_debug: OnToggle = None,
    ) -> None:
        super().__init__()

        self.title("PantryPal")
        self.geometry("1100x720")
        self.minsize(800, 560)

        self._on_open_pantry = on_open_pantry
        self._on_open_shopping_list = on_open_shopping_list
        self._on_open_cookbook = on_open_cookbook
        self._on_log_out = on_log_out
        self._on_toggle_debug = on_toggle_debug

        # ---- High-level layout: 3 rows (Toolbar, Main, Status) ----
        self.rowconfigure(1, weight=1)
        self.columnconfigure(0, weight=1)

        self._build_toolbar(self)
        self._build_main_area(self)
        self._build_statusbar(self)

    # ------------------------------------------------------------------
    # Toolbar
    # ------------------------------------------------------------------
    def _build_toolbar(self, parent: tk.Widget) -> None:
        self.toolbar = ttk.Frame(parent)
        self.toolbar.grid(row=0, column=0, sticky="ew", padx=8, pady=(8, 4))

        ttk.Button(self.toolbar, text="Pantry", command=self._on_open_pantry).grid(row=0, column=0, padx=(0, 6))
        ttk.Button(self.toolbar, text="Shopping list", command=self._on_open_shopping_list).grid(
            row=0, column=1, padx=6
        )
        ttk.Button(self.toolbar, text="Cookbook", command=self._on_open_cookbook).grid(row=0, column=2, padx=6)
        ttk.Button(self.toolbar, text="Log out", command=self._on_log_out).grid(row=0, column=3, padx=(24, 6))

        self.debug_var = tk.BooleanVar(value=False)
        ttk.Checkbutton(
            self.toolbar, text="Debug log", variable=self.debug_var, command=self._on_debug_click
        ).grid(row=0, column=4, padx=6)

    # ------------------------------------------------------------------
    # Main Area
    # ------------------------------------------------------------------
    def _build_main_area(self, parent: tk.Widget) -> None:
        self.content_host = ttk.Frame(parent)
        self.content_host.grid(row=1, column=0, sticky="nsew", padx=8, pady=4)
        self.content_host.rowconfigure(0, weight=1)
        self.content_host.columnconfigure(0, weight=1)

    # ------------------------------------------------------------------
    # StatusBar
    # ------------------------------------------------------------------
    def _build_statusbar(self, parent: tk.Widget) -> None:
        status = ttk.Frame(parent)
        status.grid(row=2, column=0, sticky="ew", padx=8, pady=(4, 8))
        status.columnconfigure(1, weight=1)

        ttk.Label(status, text="User:").grid(row=0, column=0, sticky="w")
        self.lbl_user = ttk.Label(status, text="guest")
        self.lbl_user.grid(row=0, column=1, sticky="w")

        self.status_message_var = tk.StringVar(value="Ready.")
        self.lbl_status = ttk.Label(status, textvariable=self.status_message_var)
        self.lbl_status.grid(row=0, column=2, sticky="e")

    # ------------------------------------------------------------------
    # Public API (called by the App)
    # ------------------------------------------------------------------
    def mount_view(self, view: tk.Widget) -> None:
        view.grid(row=0, column=0, sticky="nsew")

    def show_view(self, view: tk.Widget, *, show_toolbar: bool = True) -> None:
        """Raise ``view`` above the other mounted views."""
        view.tkraise()
        if show_toolbar:
            self.toolbar.grid()
        else:
            self.toolbar.grid_remove()

    def set_user(self, user_name: Optional[str]) -> None:
        self.lbl_user.configure(text=user_name or "guest")

    def set_status_message(self, text: str) -> None:
        """Update the short status message shown in the status bar."""
        self.status_message_var.set(text)
        self.lbl_status.configure(foreground="")

    def set_debug_logging(self, enabled: bool) -> None:
        self.debug_var.set(bool(enabled))

    def show_toast(self, message: str, level: str = "info") -> None:
        """Show ``message`` in the status bar, coloured for "error" and "warning"."""
        self.status_message_var.set(message)
        self.lbl_status.configure(foreground=_TOAST_FOREGROUND.get(level, ""))

    def _on_debug_click(self) -> None:
        if self._on_toggle_debug:
            self._on_toggle_debug(bool(self.debug_var.get()))


__all__ = ["MainWindowView"]

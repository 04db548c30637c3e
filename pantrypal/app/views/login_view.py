"""Login view: user name field, login button and the guest shortcut."""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk

from ..observer import Action, Observable


class LoginView(ttk.Frame, Observable):
    def __init__(self, parent, **kwargs):
        ttk.Frame.__init__(self, parent, **kwargs)
        Observable.__init__(self)

        box = ttk.Labelframe(self, text="Login")
        box.place(relx=0.5, rely=0.4, anchor="center")

        self.user_var = tk.StringVar()
        entry = ttk.Entry(box, textvariable=self.user_var, width=28)
        entry.grid(row=0, column=0, columnspan=2, padx=10, pady=(10, 6))
        entry.bind("<Return>", lambda _e: self._on_login_click())
        ttk.Button(box, text="Login", command=self._on_login_click).grid(
            row=1, column=0, sticky="ew", padx=(10, 4), pady=(0, 10)
        )
        ttk.Button(box, text="Continue as guest", command=self._on_guest_click).grid(
            row=1, column=1, sticky="ew", padx=(4, 10), pady=(0, 10)
        )

    def render(self, last_user: str) -> None:
        """Prefill the remembered user name (empty when none)."""
        self.user_var.set(last_user or "")

    def _on_login_click(self) -> None:
        self.notify(Action.LOG_IN, self.user_var.get())

    def _on_guest_click(self) -> None:
        self.notify_signal(Action.GUEST)


__all__ = ["LoginView"]

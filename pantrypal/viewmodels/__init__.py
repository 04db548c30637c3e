"""ViewModel package for UI state and command surfaces.

Call context:
    ``pantrypal/app/main.py`` and the views import concrete viewmodels from
    this package to keep editable state (settings, recipe form) out of widgets.

Dependencies:
    Modules in this package depend on domain types and lightweight parsing
    helpers only. I/O adapters and use-case orchestration remain outside.
"""

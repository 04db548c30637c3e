"""Adapter package for external I/O implementations.

Purpose:
    Collect concrete implementations for domain ports: the SQLite database,
    the SQL repositories for pantry, shopping list, cookbook, users and the
    grocery catalog, and the local JSON settings storage.

Dependencies:
    Individual submodules depend on ``sqlite3``, filesystem APIs, and domain
    protocol definitions.

Call context:
    Imported by app composition modules (for runtime wiring) and by tests
    (against in-memory databases and temporary directories).
"""

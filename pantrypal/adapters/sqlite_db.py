"""SQLite implementation of the persistence port."""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import Any, List

from pantrypal.domain.ports import PersistencePort, Row

from .db_errors import PersistenceError

SCHEMA = """
CREATE TABLE IF NOT EXISTS user (
    name TEXT PRIMARY KEY
);

CREATE TABLE IF NOT EXISTS grocery (
    name TEXT PRIMARY KEY,
    unit TEXT NOT NULL DEFAULT 'g'
);

CREATE TABLE IF NOT EXISTS pantry_shelf (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    user_name TEXT NOT NULL,
    FOREIGN KEY(user_name) REFERENCES user(name) ON DELETE CASCADE
);

CREATE TABLE IF NOT EXISTS pantry_shelf_grocery (
    pantry_shelf_id INTEGER NOT NULL,
    grocery_name TEXT NOT NULL,
    quantity INTEGER NOT NULL DEFAULT 0,
    PRIMARY KEY (pantry_shelf_id, grocery_name),
    FOREIGN KEY(pantry_shelf_id) REFERENCES pantry_shelf(id) ON DELETE CASCADE,
    FOREIGN KEY(grocery_name) REFERENCES grocery(name)
);

CREATE TABLE IF NOT EXISTS shopping_list_grocery (
    grocery_name TEXT NOT NULL,
    user_name TEXT NOT NULL,
    quantity INTEGER NOT NULL DEFAULT 0,
    is_bought INTEGER NOT NULL DEFAULT 0,
    shelf_name TEXT,
    PRIMARY KEY (grocery_name, user_name),
    FOREIGN KEY(grocery_name) REFERENCES grocery(name),
    FOREIGN KEY(user_name) REFERENCES user(name) ON DELETE CASCADE
);

CREATE TABLE IF NOT EXISTS recipe (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    user_name TEXT NOT NULL,
    is_favorite INTEGER NOT NULL DEFAULT 0,
    UNIQUE (name, user_name),
    FOREIGN KEY(user_name) REFERENCES user(name) ON DELETE CASCADE
);

CREATE TABLE IF NOT EXISTS recipe_grocery (
    recipe_id INTEGER NOT NULL,
    grocery_name TEXT NOT NULL,
    quantity INTEGER NOT NULL DEFAULT 0,
    PRIMARY KEY (recipe_id, grocery_name),
    FOREIGN KEY(recipe_id) REFERENCES recipe(id) ON DELETE CASCADE,
    FOREIGN KEY(grocery_name) REFERENCES grocery(name)
);

CREATE TABLE IF NOT EXISTS recipe_step (
    recipe_id INTEGER NOT NULL,
    step_index INTEGER NOT NULL,
    text TEXT NOT NULL,
    PRIMARY KEY (recipe_id, step_index),
    FOREIGN KEY(recipe_id) REFERENCES recipe(id) ON DELETE CASCADE
);
"""


class SqliteDatabase(PersistencePort):
    """Single-connection SQLite store; every statement commits immediately.

    ``path`` may be ``":memory:"`` for throwaway databases.
    """

    def __init__(self, path: str = ":memory:") -> None:
        self._log = logging.getLogger(__name__)
        self.path = path
        if path != ":memory:":
            Path(path).expanduser().parent.mkdir(parents=True, exist_ok=True)
        try:
            self._conn = sqlite3.connect(str(Path(path).expanduser()) if path != ":memory:" else path)
        except sqlite3.Error as exc:
            raise PersistenceError(f"Cannot open database {path}: {exc}", context="connect") from exc
        self._conn.row_factory = sqlite3.Row
        self._conn.execute("PRAGMA foreign_keys = ON")
        self._closed = False

    def bootstrap_schema(self) -> None:
        """Create the schema if it does not already exist."""
        try:
            with self._conn:
                self._conn.executescript(SCHEMA)
        except sqlite3.Error as exc:
            raise PersistenceError(f"Schema bootstrap failed: {exc}", context="bootstrap") from exc
        self._log.debug("Schema ready at %s", self.path)

    # ------------------------------------------------------------------
    def query(self, sql: str, *params: Any) -> List[Row]:
        try:
            cursor = self._conn.execute(sql, params)
            return [dict(row) for row in cursor.fetchall()]
        except sqlite3.Error as exc:
            raise PersistenceError(str(exc), statement=sql, context="query") from exc

    def execute(self, sql: str, *params: Any) -> int:
        self._log.debug("SQL %s %r", sql, params)
        try:
            with self._conn:
                cursor = self._conn.execute(sql, params)
            return cursor.rowcount
        except sqlite3.Error as exc:
            raise PersistenceError(str(exc), statement=sql, context="execute") from exc

    def insert(self, sql: str, *params: Any) -> int:
        self._log.debug("SQL %s %r", sql, params)
        try:
            with self._conn:
                cursor = self._conn.execute(sql, params)
            return int(cursor.lastrowid or 0)
        except sqlite3.Error as exc:
            raise PersistenceError(str(exc), statement=sql, context="insert") from exc

    def close(self) -> None:
        if self._closed:
            return
        self._conn.close()
        self._closed = True


def open_database(path: str) -> SqliteDatabase:
    """Open ``path`` and make sure the schema exists."""
    database = SqliteDatabase(path)
    database.bootstrap_schema()
    return database


__all__ = ["SCHEMA", "SqliteDatabase", "open_database"]

from __future__ import annotations

from typing import Optional


class PersistenceError(RuntimeError):
    """Base class for database adapter failures."""

    def __init__(
        self,
        message: str,
        *,
        statement: Optional[str] = None,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.statement = statement
        self.context = context


__all__ = ["PersistenceError"]

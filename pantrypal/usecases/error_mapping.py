"""Translate domain and adapter errors into user-facing UseCaseError instances."""

from __future__ import annotations

from typing import Optional

from pantrypal.adapters.db_errors import PersistenceError
from pantrypal.domain.errors import (
    DuplicateKeyError,
    NotFoundError,
    NullArgumentError,
    UnsupportedActionError,
)
from pantrypal.domain.ports import UseCaseError


def map_error(
    exc: Exception,
    *,
    default_code: str = "UNEXPECTED",
    default_message: Optional[str] = None,
) -> UseCaseError:
    """Map domain/adapter exceptions to stable UseCaseError codes.

    Register errors keep their own message ("Grocery already exists in
    register"); the offending key, when known, is appended.
    """
    if isinstance(exc, UseCaseError):
        return exc
    if isinstance(exc, NotFoundError):
        return UseCaseError("NOT_FOUND", _compose_error_message(exc.message, exc.key))
    if isinstance(exc, DuplicateKeyError):
        return UseCaseError("DUPLICATE", _compose_error_message(exc.message, exc.key))
    if isinstance(exc, NullArgumentError):
        return UseCaseError("MISSING_VALUE", str(exc) or "A required value is missing.")
    if isinstance(exc, UnsupportedActionError):
        return UseCaseError("UNSUPPORTED_ACTION", str(exc) or "Action not supported.")
    if isinstance(exc, PersistenceError):
        return UseCaseError("DATABASE_ERROR", _compose_error_message("Database error", str(exc)))
    if isinstance(exc, ValueError):
        return UseCaseError("INVALID_VALUE", str(exc) or "Invalid value.")

    message = default_message or str(exc) or "Unexpected error."
    return UseCaseError(default_code, message)


def _compose_error_message(base: str, hint: Optional[str]) -> str:
    hint_text = (hint or "").strip()
    if hint_text:
        return f"{base}: {hint_text}"
    if base.endswith("."):
        return base
    return f"{base}."


__all__ = ["map_error"]

"""Domain-level error types shared by registers, controllers, and use cases.

All errors here are ``ValueError`` subclasses: they signal an invalid
argument for the requested operation and are raised synchronously to the
immediate caller. The observer dispatch boundary in ``pantrypal.app`` is the
only place that swallows them.
"""

from __future__ import annotations


class RegisterError(ValueError):
    """Base class for failures raised by in-memory registers."""

    def __init__(self, message: str, *, key: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.key = key


class DuplicateKeyError(RegisterError):
    """An entity with the same key is already present in the register."""


class NotFoundError(RegisterError):
    """No entity with the requested key exists in the register."""


class NullArgumentError(ValueError):
    """A required value was ``None`` (or blank where a name is expected)."""


class UnsupportedActionError(ValueError):
    """An observer received an action/payload combination it does not handle."""


__all__ = [
    "DuplicateKeyError",
    "NotFoundError",
    "NullArgumentError",
    "RegisterError",
    "UnsupportedActionError",
]

from __future__ import annotations

import os
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Mapping, Optional

DB_PATH_ENV = "PANTRYPAL_DB_PATH"
DEFAULT_DB_FILE = "pantrypal.db"


@dataclass
class SettingsConfig:
    """Typed runtime settings that persist via StorageLocal."""

    db_path: str = DEFAULT_DB_FILE
    remember_user: bool = True
    last_user: str = ""
    debug_logging: bool = False


class SettingsVM:
    """Keeps app settings state and validation, no I/O here."""

    def __init__(self, *, config: Optional[SettingsConfig] = None) -> None:
        self.config = config or SettingsConfig()

    # ------------------------------------------------------------------
    # Properties bridging to the typed config
    # ------------------------------------------------------------------
    @property
    def db_path(self) -> str:
        return self.config.db_path

    @db_path.setter
    def db_path(self, value: str) -> None:
        self.config = replace(self.config, db_path=self._coerce_path(value))

    @property
    def remember_user(self) -> bool:
        return self.config.remember_user

    @remember_user.setter
    def remember_user(self, value: bool) -> None:
        self.config = replace(self.config, remember_user=self._coerce_bool(value))

    @property
    def last_user(self) -> str:
        return self.config.last_user

    @last_user.setter
    def last_user(self, value: Optional[str]) -> None:
        self.config = replace(self.config, last_user=self._coerce_optional_str(value))

    @property
    def debug_logging(self) -> bool:
        return self.config.debug_logging

    @debug_logging.setter
    def debug_logging(self, value: bool) -> None:
        self.config = replace(self.config, debug_logging=self._coerce_bool(value))

    # ------------------------------------------------------------------
    def apply_dict(self, payload: Mapping[str, Any]) -> None:
        """Apply persisted settings to the view-model."""

        if not isinstance(payload, Mapping):
            raise ValueError("Settings payload must be a mapping of flat keys.")

        known = [f.name for f in fields(SettingsConfig)]
        unknown = set(payload.keys()) - set(known)
        if unknown:
            raise ValueError(f"Unsupported settings keys: {', '.join(sorted(str(key) for key in unknown))}")

        updates = {key: self._coerce_config_value(key, payload[key]) for key in known if key in payload}
        if updates:
            self.config = replace(self.config, **updates)

    def to_dict(self) -> dict:
        return asdict(self.config)

    def remember(self, user_name: str) -> bool:
        """Store ``user_name`` as last user if remembering is enabled."""
        if not self.remember_user:
            return False
        self.last_user = user_name
        return True

    def forget_user(self) -> None:
        self.last_user = ""

    def resolve_db_path(self, storage_root: str) -> str:
        """Return the database file, honouring ``PANTRYPAL_DB_PATH``.

        Relative paths are resolved against ``storage_root``; ``:memory:`` is
        passed through unchanged.
        """
        override = os.getenv(DB_PATH_ENV)
        path = override.strip() if override and override.strip() else self.db_path
        if path == ":memory:" or os.path.isabs(os.path.expanduser(path)):
            return os.path.expanduser(path)
        return os.path.join(storage_root, path)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _coerce_config_value(self, key: str, raw: Any) -> Any:
        if key == "db_path":
            return self._coerce_path(raw)
        if key in ("remember_user", "debug_logging"):
            return self._coerce_bool(raw)
        if key == "last_user":
            return self._coerce_optional_str(raw)
        raise ValueError(f"Unhandled config field: {key}")

    @staticmethod
    def _coerce_path(value: Any) -> str:
        if value is None:
            return DEFAULT_DB_FILE
        if not isinstance(value, str):
            raise ValueError("db_path must be a string path.")
        return value.strip() or DEFAULT_DB_FILE

    @staticmethod
    def _coerce_optional_str(value: Any) -> str:
        if value is None:
            return ""
        return str(value).strip()

    @staticmethod
    def _coerce_bool(value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return bool(value)
        if isinstance(value, str):
            return value.strip().lower() in {"1", "true", "yes", "on"}
        return bool(value)

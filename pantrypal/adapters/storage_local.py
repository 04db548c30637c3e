from __future__ import annotations
import json, os, tempfile
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from pantrypal.domain.ports import StoragePort

SETTINGS_FILE = "user_settings.json"
STORAGE_ROOT_ENV = "PANTRYPAL_STORAGE_ROOT"


def default_storage_root() -> str:
    """Return the settings directory, honouring ``PANTRYPAL_STORAGE_ROOT``."""
    override = os.getenv(STORAGE_ROOT_ENV)
    if override and override.strip():
        return override.strip()
    return str(Path.home() / ".pantrypal")


class StorageLocal(StoragePort):
    """Local filesystem storage for user settings (JSON)."""

    def __init__(self, root_dir: Optional[str] = None) -> None:
        self.root = root_dir or default_storage_root()

    @property
    def settings_path(self) -> str:
        return os.path.join(self.root, SETTINGS_FILE)

    # ---- User settings (JSON) ----
    def save_user_settings(self, payload: Mapping[str, Any]) -> None:
        os.makedirs(self.root, exist_ok=True)
        # temp file + os.replace: readers see the old or the new file, never a partial one
        fd, tmp_path = tempfile.mkstemp(prefix=".user_settings.", suffix=".tmp", dir=self.root)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(dict(payload), f, ensure_ascii=False, indent=2, sort_keys=True)
            os.replace(tmp_path, self.settings_path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def load_user_settings(self) -> Optional[Dict[str, Any]]:
        path = self.settings_path
        if not os.path.exists(path):
            return None
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"{path} does not contain a settings object.")
        return data


__all__ = ["SETTINGS_FILE", "STORAGE_ROOT_ENV", "StorageLocal", "default_storage_root"]

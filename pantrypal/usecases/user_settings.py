from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional
from ..domain.ports import StoragePort, UseCaseError


@dataclass
class LoadUserSettings:
    storage: StoragePort

    def __call__(self) -> Optional[Dict[str, Any]]:
        try:
            return self.storage.load_user_settings()
        except (OSError, ValueError) as e:
            raise UseCaseError("LOAD_SETTINGS_FAILED", f"Could not load settings: {e}")


@dataclass
class SaveUserSettings:
    storage: StoragePort

    def __call__(self, payload: Mapping[str, Any]) -> None:
        try:
            self.storage.save_user_settings(payload)
        except (OSError, TypeError, ValueError) as e:
            raise UseCaseError("SAVE_SETTINGS_FAILED", f"Could not save settings: {e}")

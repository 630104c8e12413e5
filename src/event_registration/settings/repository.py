from __future__ import annotations

from typing import Dict, Mapping, Protocol


class SettingsRepository(Protocol):
    def get_all(self) -> Dict[str, str]:
        raise NotImplementedError

    def upsert_many(self, values: Mapping[str, str]) -> None:
        """Insert or update every pair in a single transaction."""

        raise NotImplementedError

from __future__ import annotations

from typing import Protocol

from .model import EventSettings
from .repository import SettingsRepository


class SettingsProvider(Protocol):
    """Read-only access to the current event settings."""

    def snapshot(self) -> EventSettings:
        raise NotImplementedError


class RepositorySettingsProvider(SettingsProvider):
    """Reads the settings table on every call (no caching)."""

    def __init__(self, settings: SettingsRepository):
        self._settings = settings

    def snapshot(self) -> EventSettings:
        return EventSettings.from_mapping(self._settings.get_all())

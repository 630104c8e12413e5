from __future__ import annotations

import re
from typing import Dict, Mapping

from ..core.constants import EDITABLE_SETTINGS, SETTING_CAPACITY_DAY1, SETTING_CAPACITY_DAY2
from ..core.exceptions import ValidationError
from .repository import SettingsRepository

_CAPACITY_VALUE = re.compile(r"[0-9]+")


class SettingsService:
    """Use case: read and edit event settings (admin)."""

    def __init__(self, settings: SettingsRepository):
        self._settings = settings

    def public_settings(self) -> Dict[str, str]:
        return dict(self._settings.get_all())

    def update(self, values: Mapping[str, object]) -> Dict[str, str]:
        if not isinstance(values, Mapping):
            raise ValidationError("Dados inválidos")

        accepted: Dict[str, str] = {}
        for key, value in values.items():
            if key not in EDITABLE_SETTINGS or not isinstance(value, str) or not value.strip():
                continue
            value = value.strip()
            if key in (SETTING_CAPACITY_DAY1, SETTING_CAPACITY_DAY2):
                if not _CAPACITY_VALUE.fullmatch(value):
                    raise ValidationError("O número de vagas deve ser um inteiro não negativo")
                value = str(int(value))
            accepted[key] = value

        self._settings.upsert_many(accepted)
        return accepted

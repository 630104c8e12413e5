from __future__ import annotations

from typing import Dict, Mapping

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .repository import SettingsRepository


class MySQLSettingsRepository(SettingsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_all(self) -> Dict[str, str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT setting_key, setting_value FROM settings")
            return {r["setting_key"]: r["setting_value"] for r in fetchall(cur)}

    def upsert_many(self, values: Mapping[str, str]) -> None:
        if not values:
            return
        with db_cursor(self._conn_factory) as (_, cur):
            for key, value in values.items():
                cur.execute(
                    """
                    INSERT INTO settings(setting_key, setting_value)
                    VALUES(%s,%s)
                    ON DUPLICATE KEY UPDATE setting_value=VALUES(setting_value)
                    """,
                    (key, value),
                )

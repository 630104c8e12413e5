from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

import mysql.connector

from ..core.exceptions import ConflictError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_key
from .model import Admin
from .repository import AdminRepository

_DUPLICATE_EMAIL = "Já existe um administrador com este e-mail"


def _to_admin(r: Dict[str, Any]) -> Admin:
    return Admin(
        admin_id=int(r["admin_id"]),
        full_name=r["full_name"],
        email=r["email"],
        password_hash=r["password_hash"],
        created_at=r.get("created_at"),
    )


class MySQLAdminRepository(AdminRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, admin_id: int) -> Optional[Admin]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT admin_id, full_name, email, password_hash, created_at FROM admins WHERE admin_id=%s",
                (int(admin_id),),
            )
            r = fetchone(cur)
            return _to_admin(r) if r else None

    def get_by_email(self, email: str) -> Optional[Admin]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT admin_id, full_name, email, password_hash, created_at FROM admins WHERE email=%s",
                (email,),
            )
            r = fetchone(cur)
            return _to_admin(r) if r else None

    def list_all(self) -> Sequence[Admin]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT admin_id, full_name, email, password_hash, created_at FROM admins ORDER BY admin_id ASC")
            return [_to_admin(r) for r in fetchall(cur)]

    def create_admin(self, *, full_name: str, email: str, password_hash: str) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "INSERT INTO admins(full_name, email, password_hash) VALUES(%s,%s,%s)",
                    (full_name, email, password_hash),
                )
                return int(cur.lastrowid)
        except mysql.connector.IntegrityError as exc:
            if is_duplicate_key(exc):
                raise ConflictError(_DUPLICATE_EMAIL) from exc
            raise

    def update_admin(
        self,
        admin_id: int,
        *,
        full_name: str,
        email: str,
        password_hash: Optional[str] = None,
    ) -> bool:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                if password_hash:
                    cur.execute(
                        "UPDATE admins SET full_name=%s, email=%s, password_hash=%s WHERE admin_id=%s",
                        (full_name, email, password_hash, int(admin_id)),
                    )
                else:
                    cur.execute(
                        "UPDATE admins SET full_name=%s, email=%s WHERE admin_id=%s",
                        (full_name, email, int(admin_id)),
                    )
                return cur.rowcount > 0
        except mysql.connector.IntegrityError as exc:
            if is_duplicate_key(exc):
                raise ConflictError(_DUPLICATE_EMAIL) from exc
            raise

    def delete_by_id(self, admin_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM admins WHERE admin_id=%s", (int(admin_id),))
            return cur.rowcount > 0

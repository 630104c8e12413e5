from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import mysql.connector
from mysql.connector import errorcode

from ..core.exceptions import InfrastructureError
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield ``(conn, cursor)`` inside one transaction.

    Commits on success, rolls back on error. Driver errors surface as
    InfrastructureError, except integrity errors which callers may translate.
    """
    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as exc:
        raise InfrastructureError("Banco de dados indisponível") from exc

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.IntegrityError:
        conn.rollback()
        raise
    except mysql.connector.Error as exc:
        conn.rollback()
        raise InfrastructureError("Erro ao acessar o banco de dados") from exc
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def is_duplicate_key(exc: mysql.connector.IntegrityError) -> bool:
    return getattr(exc, "errno", None) == errorcode.ER_DUP_ENTRY


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def fetch_count(cur) -> int:
    row = cur.fetchone()
    if not row:
        return 0
    value = row["count"] if isinstance(row, dict) else row[0]
    return int(value or 0)

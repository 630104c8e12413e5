from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable

from werkzeug.security import generate_password_hash

from ..core.constants import (
    DEFAULT_DAY_CAPACITY,
    DEFAULT_EVENT_DATE,
    DEFAULT_EVENT_LOCATION,
    DEFAULT_EVENT_NAME,
    DEFAULT_EVENT_WORKLOAD,
    SETTING_CAPACITY_DAY1,
    SETTING_CAPACITY_DAY2,
    SETTING_EVENT_DATE,
    SETTING_EVENT_LOCATION,
    SETTING_EVENT_NAME,
    SETTING_EVENT_WORKLOAD,
)
from .connection import DatabaseConnection, DBConfig

SCHEMA_PATH = Path(__file__).resolve().with_name("schema.sql")

DEFAULT_SETTINGS = (
    (SETTING_EVENT_NAME, DEFAULT_EVENT_NAME),
    (SETTING_EVENT_DATE, DEFAULT_EVENT_DATE),
    (SETTING_EVENT_LOCATION, DEFAULT_EVENT_LOCATION),
    (SETTING_EVENT_WORKLOAD, DEFAULT_EVENT_WORKLOAD),
    (SETTING_CAPACITY_DAY1, str(DEFAULT_DAY_CAPACITY)),
    (SETTING_CAPACITY_DAY2, str(DEFAULT_DAY_CAPACITY)),
)


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _strip_line_comments(sql: str) -> str:
    return re.sub(r"(?m)^\s*--.*$", "", sql)


def iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for schema files (handles ';' inside quotes).
    buf: list[str] = []
    in_single = False
    in_double = False
    escape = False

    for ch in sql:
        if escape:
            buf.append(ch)
            escape = False
            continue

        if ch == "\\":
            buf.append(ch)
            escape = True
            continue

        if ch == "'" and not in_double:
            in_single = not in_single
            buf.append(ch)
            continue

        if ch == '"' and not in_single:
            in_double = not in_double
            buf.append(ch)
            continue

        if ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def ensure_database_exists(db_config: dict) -> None:
    target = DBConfig.from_dict(db_config)
    conn = DatabaseConnection(target).connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path = SCHEMA_PATH) -> None:
    ensure_database_exists(db_config)

    sql = Path(schema_path).read_text(encoding="utf-8")
    sql = _strip_line_comments(_strip_create_db_and_use(sql))

    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor()
        for stmt in iter_sql_statements(sql):
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()


def seed_default_settings(db_config: dict) -> None:
    """Insert default event settings; existing values are left untouched."""
    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor()
        for key, value in DEFAULT_SETTINGS:
            cur.execute(
                "INSERT IGNORE INTO settings (setting_key, setting_value) VALUES (%s, %s)",
                (key, value),
            )
        conn.commit()
    finally:
        conn.close()


def ensure_default_admin(db_config: dict, *, full_name: str, email: str, password: str) -> bool:
    """Create the bootstrap admin if the e-mail is free. Returns True when created."""
    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor(dictionary=True)
        cur.execute("SELECT admin_id FROM admins WHERE email=%s", (email.strip().lower(),))
        if cur.fetchone():
            return False
        cur.execute(
            "INSERT INTO admins (full_name, email, password_hash) VALUES (%s, %s, %s)",
            (full_name, email.strip().lower(), generate_password_hash(password)),
        )
        conn.commit()
        return True
    finally:
        conn.close()


def list_tables(db_config: dict) -> list[str]:
    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()

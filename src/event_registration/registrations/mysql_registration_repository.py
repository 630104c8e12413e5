from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

import mysql.connector

from ..core.enums import EnrollmentDay, EventDay
from ..core.exceptions import DuplicateRegistration
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_key
from .model import NewRegistration, Registration
from .repository import RegistrationRepository

_COLUMNS = """
    registration_id, full_name, cpf, email, phone, organization, role,
    enrollment_day, present_day1, present_day2, present, created_at, display_date
"""

# Column names are fixed per day; never interpolate user input here.
_PRESENT_COLUMN = {
    EventDay.DAY1: "present_day1",
    EventDay.DAY2: "present_day2",
}


def _to_registration(r: Dict[str, Any]) -> Registration:
    return Registration(
        registration_id=int(r["registration_id"]),
        full_name=r["full_name"],
        cpf=r["cpf"],
        email=r["email"],
        phone=r["phone"],
        organization=r["organization"],
        role=r["role"],
        enrollment_day=EnrollmentDay(r["enrollment_day"]),
        present_day1=bool(r["present_day1"]),
        present_day2=bool(r["present_day2"]),
        present=bool(r["present"]),
        created_at=r["created_at"],
        display_date=r["display_date"],
    )


class MySQLRegistrationRepository(RegistrationRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, registration_id: int) -> Optional[Registration]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM registrations WHERE registration_id=%s", (int(registration_id),))
            r = fetchone(cur)
            return _to_registration(r) if r else None

    def get_by_cpf(self, cpf: str) -> Optional[Registration]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM registrations WHERE cpf=%s", (cpf,))
            r = fetchone(cur)
            return _to_registration(r) if r else None

    def create(self, new: NewRegistration) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO registrations(
                        full_name, cpf, email, phone, organization, role,
                        enrollment_day, created_at, display_date
                    )
                    VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s)
                    """,
                    (
                        new.full_name,
                        new.cpf,
                        new.email,
                        new.phone,
                        new.organization,
                        new.role,
                        new.enrollment_day.value,
                        new.created_at,
                        new.display_date,
                    ),
                )
                return int(cur.lastrowid)
        except mysql.connector.IntegrityError as exc:
            if is_duplicate_key(exc):
                raise DuplicateRegistration() from exc
            raise

    def count_by_enrollment_day(self) -> Dict[EnrollmentDay, int]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT enrollment_day, COUNT(*) AS total
                FROM registrations
                GROUP BY enrollment_day
                """
            )
            counts = {day: 0 for day in EnrollmentDay}
            for r in fetchall(cur):
                counts[EnrollmentDay(r["enrollment_day"])] = int(r["total"])
            return counts

    def mark_present(self, registration_id: int, day: EventDay) -> bool:
        column = _PRESENT_COLUMN[day]
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE registrations SET {column}=1, present=1 WHERE registration_id=%s",
                (int(registration_id),),
            )
            return cur.rowcount > 0

    def set_present(self, registration_id: int, *, present: bool) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE registrations SET present=%s WHERE registration_id=%s",
                (1 if present else 0, int(registration_id)),
            )
            return cur.rowcount > 0

    def delete_by_id(self, registration_id: int) -> bool:
        rid = int(registration_id)
        with db_cursor(self._conn_factory) as (_, cur):
            # one transaction; explicit deletes also cover tables created before ON DELETE CASCADE
            cur.execute("DELETE FROM certificates WHERE registration_id=%s", (rid,))
            cur.execute("DELETE FROM evaluations WHERE registration_id=%s", (rid,))
            cur.execute("DELETE FROM registrations WHERE registration_id=%s", (rid,))
            return cur.rowcount > 0

    def list_all(self) -> Sequence[Registration]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM registrations ORDER BY created_at DESC, registration_id DESC")
            return [_to_registration(r) for r in fetchall(cur)]

    def list_by_name(self) -> Sequence[Registration]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM registrations ORDER BY full_name ASC")
            return [_to_registration(r) for r in fetchall(cur)]

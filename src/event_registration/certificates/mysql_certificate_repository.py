from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetch_count, fetchone
from .model import CertificateRecord, CertificateStats
from .repository import CertificateRepository


class MySQLCertificateRepository(CertificateRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_registration(self, registration_id: int) -> Optional[CertificateRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT certificate_id, registration_id, file_path, generated, sent, generated_at, sent_at
                FROM certificates
                WHERE registration_id=%s
                """,
                (int(registration_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            return CertificateRecord(
                certificate_id=int(r["certificate_id"]),
                registration_id=int(r["registration_id"]),
                file_path=r.get("file_path"),
                generated=bool(r["generated"]),
                sent=bool(r["sent"]),
                generated_at=r.get("generated_at"),
                sent_at=r.get("sent_at"),
            )

    def stats(self) -> CertificateStats:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS count FROM registrations WHERE present=1")
            present_total = fetch_count(cur)
            cur.execute("SELECT COUNT(*) AS count FROM certificates WHERE generated=1")
            generated = fetch_count(cur)
            cur.execute("SELECT COUNT(*) AS count FROM certificates WHERE sent=1")
            sent = fetch_count(cur)
            return CertificateStats(present_total=present_total, generated=generated, sent=sent)

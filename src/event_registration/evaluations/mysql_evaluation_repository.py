from __future__ import annotations

from typing import Sequence

import mysql.connector

from ..core.exceptions import ConflictError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_key
from .model import EvaluationRow, NewEvaluation
from .repository import EvaluationRepository


class MySQLEvaluationRepository(EvaluationRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def exists_for_registration(self, registration_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT evaluation_id FROM evaluations WHERE registration_id=%s", (int(registration_id),))
            return fetchone(cur) is not None

    def create(self, new: NewEvaluation) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO evaluations(
                        registration_id, score_overall, score_content, score_organization,
                        score_speakers, comment, suggestions
                    )
                    VALUES(%s,%s,%s,%s,%s,%s,%s)
                    """,
                    (
                        new.registration_id,
                        new.score_overall,
                        new.score_content,
                        new.score_organization,
                        new.score_speakers,
                        new.comment,
                        new.suggestions,
                    ),
                )
                return int(cur.lastrowid)
        except mysql.connector.IntegrityError as exc:
            if is_duplicate_key(exc):
                raise ConflictError("Você já enviou sua avaliação. Obrigado!") from exc
            raise

    def list_rows(self) -> Sequence[EvaluationRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT
                    e.evaluation_id, e.registration_id,
                    r.full_name, r.cpf, r.organization, r.role,
                    e.score_overall, e.score_content, e.score_organization, e.score_speakers,
                    e.comment, e.suggestions, e.created_at
                FROM evaluations e
                JOIN registrations r ON r.registration_id = e.registration_id
                ORDER BY e.created_at DESC, e.evaluation_id DESC
                """
            )
            return [
                EvaluationRow(
                    evaluation_id=int(r["evaluation_id"]),
                    registration_id=int(r["registration_id"]),
                    full_name=r["full_name"],
                    cpf=r["cpf"],
                    organization=r["organization"],
                    role=r["role"],
                    score_overall=int(r["score_overall"]),
                    score_content=int(r["score_content"]),
                    score_organization=int(r["score_organization"]),
                    score_speakers=int(r["score_speakers"]),
                    comment=r.get("comment"),
                    suggestions=r.get("suggestions"),
                    created_at=r["created_at"],
                )
                for r in fetchall(cur)
            ]

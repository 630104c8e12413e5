from __future__ import annotations

from collections import Counter
from typing import Mapping, Optional

from ..common.csv_export import to_csv_bytes
from ..common.validators import normalize_cpf
from ..core.constants import MAX_SCORE, MIN_SCORE, RECENT_COMMENTS_LIMIT
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from ..registrations.repository import RegistrationRepository
from .model import NewEvaluation
from .repository import EvaluationRepository

SCORE_FIELDS = ("nota_geral", "nota_conteudo", "nota_organizacao", "nota_palestrantes")

EXPORT_HEADER = (
    "Nome",
    "CPF",
    "Instituição",
    "Cargo",
    "Nota Geral",
    "Nota Conteúdo",
    "Nota Organização",
    "Nota Palestrantes",
    "Comentário",
    "Sugestões",
    "Data",
)


def _average(values: list[float]) -> float:
    return round(sum(values) / len(values), 1) if values else 0


def _optional_text(value: object) -> Optional[str]:
    if not isinstance(value, str) or not value.strip():
        return None
    return value.strip()


class EvaluationService:
    """Use case: participants rate the event; admins read aggregates."""

    def __init__(self, evaluations: EvaluationRepository, registrations: RegistrationRepository):
        self._evaluations = evaluations
        self._registrations = registrations

    def submit(self, payload: Mapping[str, object]) -> int:
        cpf = payload.get("cpf")
        scores = [payload.get(f) for f in SCORE_FIELDS]
        if not cpf or any(s is None or s == "" for s in scores):
            raise ValidationError("CPF e todas as notas são obrigatórios")

        if any(
            not isinstance(s, int) or isinstance(s, bool) or s < MIN_SCORE or s > MAX_SCORE for s in scores
        ):
            raise ValidationError(f"Todas as notas devem ser entre {MIN_SCORE} e {MAX_SCORE}")

        registration = self._registrations.get_by_cpf(normalize_cpf(str(cpf)))
        if not registration:
            raise NotFoundError("CPF não encontrado. Apenas participantes inscritos podem avaliar.")

        if self._evaluations.exists_for_registration(registration.registration_id):
            raise ConflictError("Você já enviou sua avaliação. Obrigado!")

        overall, content, organization, speakers = scores
        return self._evaluations.create(
            NewEvaluation(
                registration_id=registration.registration_id,
                score_overall=overall,
                score_content=content,
                score_organization=organization,
                score_speakers=speakers,
                comment=_optional_text(payload.get("comentario")),
                suggestions=_optional_text(payload.get("sugestoes")),
            )
        )

    def stats(self) -> dict:
        rows = list(self._evaluations.list_rows())
        total_registrations = sum(self._registrations.count_by_enrollment_day().values())

        overall = [r.score_overall for r in rows]
        content = [r.score_content for r in rows]
        organization = [r.score_organization for r in rows]
        speakers = [r.score_speakers for r in rows]
        combined = [sum(r.scores) / 4.0 for r in rows]

        distribution = Counter(score for r in rows for score in r.scores)

        return {
            "totalAvaliacoes": len(rows),
            "totalInscritos": total_registrations,
            "taxaResposta": round(len(rows) / total_registrations * 100) if total_registrations else 0,
            "mediaGeral": _average(combined),
            "medias": {
                "geral": _average(overall),
                "conteudo": _average(content),
                "organizacao": _average(organization),
                "palestrantes": _average(speakers),
            },
            "distribuicao": [{"nota": nota, "count": distribution[nota]} for nota in sorted(distribution)],
            "comentarios": [
                {
                    "comentario": r.comment,
                    "sugestoes": r.suggestions,
                    "created_at": r.created_at.isoformat(),
                    "nome": r.full_name,
                }
                for r in rows
                if r.comment
            ][:RECENT_COMMENTS_LIMIT],
        }

    def export_csv(self) -> bytes:
        rows = (
            (
                r.full_name,
                r.cpf,
                r.organization,
                r.role,
                r.score_overall,
                r.score_content,
                r.score_organization,
                r.score_speakers,
                r.comment,
                r.suggestions,
                r.created_at.strftime("%d/%m/%Y %H:%M"),
            )
            for r in self._evaluations.list_rows()
        )
        return to_csv_bytes(EXPORT_HEADER, rows)

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class NewEvaluation:
    registration_id: int
    score_overall: int
    score_content: int
    score_organization: int
    score_speakers: int
    comment: Optional[str] = None
    suggestions: Optional[str] = None


@dataclass(frozen=True)
class EvaluationRow:
    """Read-model: an evaluation joined with its participant."""

    evaluation_id: int
    registration_id: int
    full_name: str
    cpf: str
    organization: str
    role: str
    score_overall: int
    score_content: int
    score_organization: int
    score_speakers: int
    comment: Optional[str]
    suggestions: Optional[str]
    created_at: datetime

    @property
    def scores(self) -> tuple[int, int, int, int]:
        return (self.score_overall, self.score_content, self.score_organization, self.score_speakers)

from __future__ import annotations

from typing import Protocol, Sequence

from .model import EvaluationRow, NewEvaluation


class EvaluationRepository(Protocol):
    def exists_for_registration(self, registration_id: int) -> bool:
        raise NotImplementedError

    def create(self, new: NewEvaluation) -> int:
        """Raises ConflictError when the registration already evaluated."""

        raise NotImplementedError

    def list_rows(self) -> Sequence[EvaluationRow]:
        """Newest first."""

        raise NotImplementedError

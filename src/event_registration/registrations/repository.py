from __future__ import annotations

from typing import Dict, Optional, Protocol, Sequence

from ..core.enums import EnrollmentDay, EventDay
from .model import NewRegistration, Registration


class RegistrationRepository(Protocol):
    """Repository interface for Registration.

    Services depend on this interface, never on a concrete database.
    """

    def get_by_id(self, registration_id: int) -> Optional[Registration]:
        raise NotImplementedError

    def get_by_cpf(self, cpf: str) -> Optional[Registration]:
        raise NotImplementedError

    def create(self, new: NewRegistration) -> int:
        """Insert a row; raises DuplicateRegistration if the CPF is taken."""

        raise NotImplementedError

    def count_by_enrollment_day(self) -> Dict[EnrollmentDay, int]:
        raise NotImplementedError

    def mark_present(self, registration_id: int, day: EventDay) -> bool:
        """Set the per-day flag and the legacy flag in one update."""

        raise NotImplementedError

    def set_present(self, registration_id: int, *, present: bool) -> bool:
        """Admin override of the legacy combined flag only."""

        raise NotImplementedError

    def delete_by_id(self, registration_id: int) -> bool:
        """Delete the registration with its certificate and evaluation, atomically."""

        raise NotImplementedError

    def list_all(self) -> Sequence[Registration]:
        """Newest first."""

        raise NotImplementedError

    def list_by_name(self) -> Sequence[Registration]:
        raise NotImplementedError

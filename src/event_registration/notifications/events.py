from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import EnrollmentDay


@dataclass(frozen=True)
class RegistrationConfirmed:
    """Emitted once a registration row has been committed."""

    registration_id: int
    full_name: str
    email: str
    enrollment_day: EnrollmentDay

    @property
    def first_name(self) -> str:
        return self.full_name.split(" ")[0]

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.enums import EnrollmentDay, EventDay


@dataclass(frozen=True)
class Registration:
    """Domain entity: one participant registration, keyed by CPF.

    ``present`` is the legacy combined flag: check-in keeps it in sync with
    the per-day flags, the admin toggle may override it.
    """

    registration_id: int
    full_name: str
    cpf: str
    email: str
    phone: str
    organization: str
    role: str
    enrollment_day: EnrollmentDay
    present_day1: bool
    present_day2: bool
    present: bool
    created_at: datetime
    display_date: str

    def is_present_on(self, day: EventDay) -> bool:
        return self.present_day1 if day is EventDay.DAY1 else self.present_day2

    def to_dict(self) -> dict:
        return {
            "id": self.registration_id,
            "nome": self.full_name,
            "cpf": self.cpf,
            "email": self.email,
            "telefone": self.phone,
            "instituicao": self.organization,
            "cargo": self.role,
            "dia_participacao": self.enrollment_day.value,
            "presente_dia1": self.present_day1,
            "presente_dia2": self.present_day2,
            "presente": self.present,
            "data_inscricao": self.display_date,
            "created_at": self.created_at.isoformat(),
        }


@dataclass(frozen=True)
class NewRegistration:
    """Validated, normalized input ready to be inserted."""

    full_name: str
    cpf: str
    email: str
    phone: str
    organization: str
    role: str
    enrollment_day: EnrollmentDay
    created_at: datetime
    display_date: str


@dataclass(frozen=True)
class RegistrationResult:
    registration_id: int

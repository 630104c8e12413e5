from __future__ import annotations

import logging
from collections import Counter
from typing import Mapping, Optional

from ..capacity.service import CapacityService
from ..certificates.repository import CertificateRepository
from ..common.csv_export import to_csv_bytes, yes_no
from ..common.datetime_utils import format_display_date, now_local
from ..common.validators import normalize_cpf, require_non_empty
from ..core.constants import RECENT_REGISTRATIONS_LIMIT
from ..core.enums import EnrollmentDay, EventDay
from ..core.exceptions import (
    CapacityExceeded,
    DuplicateRegistration,
    InfrastructureError,
    InvalidEnrollmentDay,
    NotFoundError,
    ValidationError,
)
from ..notifications.channel import NotificationChannel
from ..notifications.events import RegistrationConfirmed
from .model import NewRegistration, Registration, RegistrationResult
from .repository import RegistrationRepository

logger = logging.getLogger(__name__)

# (form field, label used in error messages)
REQUIRED_FIELDS = (
    ("nome", "Nome"),
    ("cpf", "CPF"),
    ("email", "E-mail"),
    ("telefone", "Telefone"),
    ("instituicao", "Instituição"),
    ("cargo", "Cargo"),
    ("dia_participacao", "Dia de participação"),
)

EXPORT_HEADER = (
    "Nome",
    "CPF",
    "E-mail",
    "Telefone",
    "Instituição",
    "Cargo",
    "Dia de participação",
    "Presente 1º dia",
    "Presente 2º dia",
    "Presente",
    "Data Inscrição",
)


def _as_text(value: object) -> object:
    # JSON clients sometimes send the CPF or phone as a number.
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


class RegistrationService:
    """Use case: register participants and manage registrations (admin)."""

    def __init__(
        self,
        registrations: RegistrationRepository,
        capacity: CapacityService,
        certificates: CertificateRepository,
        notifications: NotificationChannel,
    ):
        self._registrations = registrations
        self._capacity = capacity
        self._certificates = certificates
        self._notifications = notifications

    def register(self, fields: Mapping[str, object]) -> RegistrationResult:
        if not isinstance(fields, Mapping):
            raise ValidationError("Dados inválidos")

        values = {key: require_non_empty(_as_text(fields.get(key)), label) for key, label in REQUIRED_FIELDS}

        try:
            enrollment_day = EnrollmentDay(values["dia_participacao"])
        except ValueError:
            raise InvalidEnrollmentDay()

        cpf = normalize_cpf(values["cpf"])

        if self._registrations.get_by_cpf(cpf):
            raise DuplicateRegistration()

        self._check_capacity(enrollment_day)

        now = now_local()
        new = NewRegistration(
            full_name=values["nome"],
            cpf=cpf,
            email=values["email"].lower(),
            phone=values["telefone"],
            organization=values["instituicao"],
            role=values["cargo"],
            enrollment_day=enrollment_day,
            created_at=now,
            display_date=format_display_date(now),
        )
        registration_id = self._registrations.create(new)

        self._notify(
            RegistrationConfirmed(
                registration_id=registration_id,
                full_name=new.full_name,
                email=new.email,
                enrollment_day=enrollment_day,
            )
        )
        return RegistrationResult(registration_id=registration_id)

    def _check_capacity(self, enrollment_day: EnrollmentDay) -> None:
        # Best effort: check-then-insert is not atomic, and an unreadable
        # snapshot must not block registration.
        try:
            snapshot = self._capacity.compute_occupancy()
        except InfrastructureError:
            logger.warning("Não foi possível verificar as vagas; seguindo com a inscrição", exc_info=True)
            return

        for day in EventDay:
            if enrollment_day.covers(day) and snapshot.for_day(day).is_full:
                raise CapacityExceeded(day)

    def _notify(self, event: RegistrationConfirmed) -> None:
        try:
            self._notifications.publish(event)
        except Exception:
            logger.exception("Erro ao agendar e-mail de confirmação para a inscrição %s", event.registration_id)

    def get(self, registration_id: int) -> Registration:
        registration = self._registrations.get_by_id(registration_id)
        if not registration:
            raise NotFoundError("Inscrição não encontrada")
        return registration

    def list_all(self) -> list[dict]:
        return [r.to_dict() for r in self._registrations.list_all()]

    def toggle_attendance(self, registration_id: int) -> dict:
        registration = self.get(registration_id)
        new_status = not registration.present
        if not self._registrations.set_present(registration.registration_id, present=new_status):
            raise NotFoundError("Inscrição não encontrada")
        return {"id": registration.registration_id, "presente": new_status}

    def delete(self, registration_id: int) -> None:
        registration = self.get(registration_id)
        if not self._registrations.delete_by_id(registration.registration_id):
            raise NotFoundError("Inscrição não encontrada")

    def stats(self, *, recent_limit: Optional[int] = None) -> dict:
        registrations = list(self._registrations.list_all())
        certificates = self._certificates.stats()
        present = sum(1 for r in registrations if r.present)

        by_org = Counter(r.organization for r in registrations)
        recent_limit = RECENT_REGISTRATIONS_LIMIT if recent_limit is None else recent_limit

        return {
            "totalInscritos": len(registrations),
            "presentes": present,
            "ausentes": len(registrations) - present,
            "presentesDia1": sum(1 for r in registrations if r.present_day1),
            "presentesDia2": sum(1 for r in registrations if r.present_day2),
            "certificadosGerados": certificates.generated,
            "certificadosEnviados": certificates.sent,
            "porInstituicao": [{"name": name, "count": count} for name, count in by_org.most_common()],
            "recentes": [
                {
                    "nome": r.full_name,
                    "instituicao": r.organization,
                    "cargo": r.role,
                    "data_inscricao": r.display_date,
                }
                for r in registrations[:recent_limit]
            ],
        }

    def export_csv(self) -> bytes:
        rows = (
            (
                r.full_name,
                r.cpf,
                r.email,
                r.phone,
                r.organization,
                r.role,
                r.enrollment_day.label,
                yes_no(r.present_day1),
                yes_no(r.present_day2),
                yes_no(r.present),
                r.display_date,
            )
            for r in self._registrations.list_by_name()
        )
        return to_csv_bytes(EXPORT_HEADER, rows)

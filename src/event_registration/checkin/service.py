from __future__ import annotations

import io

import qrcode

from ..common.validators import normalize_cpf
from ..core.enums import EventDay
from ..core.exceptions import InvalidDay, NotEnrolledForDay, NotFoundError
from ..registrations.model import Registration
from ..registrations.repository import RegistrationRepository
from .model import CheckInResult


class CheckInService:
    """Use case: record physical attendance per participant per day.

    Calling twice with the same arguments is safe: the second call reports
    ``already_checked_in`` and writes nothing. Concurrent duplicates may both
    write, which is harmless since the update only sets flags to true.
    """

    def __init__(self, registrations: RegistrationRepository):
        self._registrations = registrations

    def check_in(self, cpf: str, day: str) -> CheckInResult:
        try:
            event_day = EventDay(day)
        except ValueError:
            raise InvalidDay()

        registration = self._find(cpf)

        if not registration.enrollment_day.covers(event_day):
            raise NotEnrolledForDay(registration.enrollment_day)

        if registration.is_present_on(event_day):
            return CheckInResult(full_name=registration.full_name, already_checked_in=True)

        # rowcount may be 0 if a concurrent call already set the flag; that is still success
        self._registrations.mark_present(registration.registration_id, event_day)
        return CheckInResult(full_name=registration.full_name, already_checked_in=False)

    def qr_code_png(self, cpf: str) -> bytes:
        """Check-in QR code for a participant; the payload is the bare CPF."""
        registration = self._find(cpf)

        qr = qrcode.QRCode(
            version=1,
            error_correction=qrcode.constants.ERROR_CORRECT_M,
            box_size=10,
            border=2,
        )
        qr.add_data(registration.cpf)
        qr.make(fit=True)
        img = qr.make_image(fill_color="black", back_color="white")

        buf = io.BytesIO()
        img.save(buf, format="PNG")
        return buf.getvalue()

    def _find(self, cpf: str) -> Registration:
        registration = self._registrations.get_by_cpf(normalize_cpf(cpf))
        if not registration:
            raise NotFoundError("CPF não encontrado")
        return registration

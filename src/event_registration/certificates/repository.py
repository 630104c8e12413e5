from __future__ import annotations

from typing import Optional, Protocol

from .model import CertificateRecord, CertificateStats


class CertificateRepository(Protocol):
    def get_for_registration(self, registration_id: int) -> Optional[CertificateRecord]:
        raise NotImplementedError

    def stats(self) -> CertificateStats:
        raise NotImplementedError

from __future__ import annotations

from .repository import CertificateRepository


class CertificateService:
    """Admin view over certificate records. Rendering and sending live elsewhere."""

    def __init__(self, certificates: CertificateRepository):
        self._certificates = certificates

    def stats(self) -> dict:
        return self._certificates.stats().to_dict()

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class CertificateRecord:
    """Generation/sending state of a participant's certificate (one per registration)."""

    certificate_id: int
    registration_id: int
    file_path: Optional[str]
    generated: bool
    sent: bool
    generated_at: Optional[datetime] = None
    sent_at: Optional[datetime] = None


@dataclass(frozen=True)
class CertificateStats:
    present_total: int
    generated: int
    sent: int

    @property
    def pending(self) -> int:
        return max(0, self.present_total - self.sent)

    def to_dict(self) -> dict:
        return {
            "totalPresentes": self.present_total,
            "certificadosGerados": self.generated,
            "certificadosEnviados": self.sent,
            "pendentes": self.pending,
        }

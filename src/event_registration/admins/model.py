from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Admin:
    """Domain entity: an administrator account.

    Note: plain data object (no DB access code).
    """

    admin_id: int
    full_name: str
    email: str
    password_hash: str
    created_at: Optional[datetime] = None

    def to_public_dict(self) -> dict:
        return {
            "id": self.admin_id,
            "nome": self.full_name,
            "email": self.email,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CheckInResult:
    full_name: str
    already_checked_in: bool

    def to_dict(self) -> dict:
        return {"nome": self.full_name, "jaRegistrado": self.already_checked_in}

from __future__ import annotations

from enum import Enum


class EnrollmentDay(str, Enum):
    """Dia(s) de participação escolhido(s) na inscrição."""

    DAY1 = "day1"
    DAY2 = "day2"
    BOTH = "both"

    def covers(self, day: "EventDay") -> bool:
        return self is EnrollmentDay.BOTH or self.value == day.value

    @property
    def label(self) -> str:
        return {
            EnrollmentDay.DAY1: "1º dia",
            EnrollmentDay.DAY2: "2º dia",
            EnrollmentDay.BOTH: "ambos os dias",
        }[self]


class EventDay(str, Enum):
    """Um dia concreto do evento (check-in e contagem de vagas)."""

    DAY1 = "day1"
    DAY2 = "day2"

    @property
    def label(self) -> str:
        return "1º dia" if self is EventDay.DAY1 else "2º dia"

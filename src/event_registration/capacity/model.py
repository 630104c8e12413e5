from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import EventDay


@dataclass(frozen=True)
class DayOccupancy:
    occupied: int
    limit: int

    @property
    def available(self) -> int:
        return max(0, self.limit - self.occupied)

    @property
    def is_full(self) -> bool:
        return self.occupied >= self.limit

    def to_dict(self) -> dict:
        return {"total": self.occupied, "max": self.limit, "available": self.available}


@dataclass(frozen=True)
class CapacitySnapshot:
    """Read-model computed per request; never persisted."""

    day1: DayOccupancy
    day2: DayOccupancy

    def for_day(self, day: EventDay) -> DayOccupancy:
        return self.day1 if day is EventDay.DAY1 else self.day2

    def to_dict(self) -> dict:
        return {"day1": self.day1.to_dict(), "day2": self.day2.to_dict()}

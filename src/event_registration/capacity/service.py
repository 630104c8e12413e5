from __future__ import annotations

from ..core.enums import EnrollmentDay, EventDay
from ..registrations.repository import RegistrationRepository
from ..settings.provider import SettingsProvider
from .model import CapacitySnapshot, DayOccupancy


class CapacityService:
    """Use case: seat occupancy per event day.

    Occupancy for a day counts registrations for that day plus those for
    both days. Pure read; store errors propagate to the caller.
    """

    def __init__(self, registrations: RegistrationRepository, settings: SettingsProvider):
        self._registrations = registrations
        self._settings = settings

    def compute_occupancy(self) -> CapacitySnapshot:
        counts = self._registrations.count_by_enrollment_day()
        settings = self._settings.snapshot()
        both = int(counts.get(EnrollmentDay.BOTH, 0))

        def _day(day: EventDay) -> DayOccupancy:
            only = int(counts.get(EnrollmentDay(day.value), 0))
            return DayOccupancy(occupied=only + both, limit=settings.capacity_for(day))

        return CapacitySnapshot(day1=_day(EventDay.DAY1), day2=_day(EventDay.DAY2))

    def get_vacancy(self) -> dict:
        return self.compute_occupancy().to_dict()

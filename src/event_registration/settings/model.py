from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from ..common.validators import parse_non_negative_int
from ..core.constants import (
    DEFAULT_DAY_CAPACITY,
    DEFAULT_EVENT_DATE,
    DEFAULT_EVENT_LOCATION,
    DEFAULT_EVENT_NAME,
    DEFAULT_EVENT_WORKLOAD,
    SETTING_CAPACITY_DAY1,
    SETTING_CAPACITY_DAY2,
    SETTING_EVENT_DATE,
    SETTING_EVENT_LOCATION,
    SETTING_EVENT_NAME,
    SETTING_EVENT_WORKLOAD,
)
from ..core.enums import EventDay


@dataclass(frozen=True)
class EventSettings:
    """Typed snapshot of the ``settings`` table.

    Missing rows fall back to defaults; unparsable capacities fall back to 500.
    """

    capacity_day1: int = DEFAULT_DAY_CAPACITY
    capacity_day2: int = DEFAULT_DAY_CAPACITY
    event_name: str = DEFAULT_EVENT_NAME
    event_date: str = DEFAULT_EVENT_DATE
    event_location: str = DEFAULT_EVENT_LOCATION
    event_workload: str = DEFAULT_EVENT_WORKLOAD

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "EventSettings":
        return cls(
            capacity_day1=parse_non_negative_int(values.get(SETTING_CAPACITY_DAY1), DEFAULT_DAY_CAPACITY),
            capacity_day2=parse_non_negative_int(values.get(SETTING_CAPACITY_DAY2), DEFAULT_DAY_CAPACITY),
            event_name=values.get(SETTING_EVENT_NAME) or DEFAULT_EVENT_NAME,
            event_date=values.get(SETTING_EVENT_DATE) or DEFAULT_EVENT_DATE,
            event_location=values.get(SETTING_EVENT_LOCATION) or DEFAULT_EVENT_LOCATION,
            event_workload=values.get(SETTING_EVENT_WORKLOAD) or DEFAULT_EVENT_WORKLOAD,
        )

    def capacity_for(self, day: EventDay) -> int:
        return self.capacity_day1 if day is EventDay.DAY1 else self.capacity_day2

"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

CPF_LENGTH = 11
DEFAULT_DAY_CAPACITY = 500

SETTING_CAPACITY_DAY1 = "vagas_dia1"
SETTING_CAPACITY_DAY2 = "vagas_dia2"
SETTING_EVENT_NAME = "event_name"
SETTING_EVENT_DATE = "event_date"
SETTING_EVENT_LOCATION = "event_location"
SETTING_EVENT_WORKLOAD = "event_workload"

EDITABLE_SETTINGS = (
    SETTING_EVENT_NAME,
    SETTING_EVENT_DATE,
    SETTING_EVENT_LOCATION,
    SETTING_EVENT_WORKLOAD,
    SETTING_CAPACITY_DAY1,
    SETTING_CAPACITY_DAY2,
)

DEFAULT_EVENT_NAME = "Jornada Pedagógica 2026"
DEFAULT_EVENT_DATE = "25 e 26 de Fevereiro de 2026"
DEFAULT_EVENT_LOCATION = "Centro de Convenções, Tuntum - MA"
DEFAULT_EVENT_WORKLOAD = "40"

MIN_PASSWORD_LENGTH = 6
RECENT_REGISTRATIONS_LIMIT = 5
RECENT_COMMENTS_LIMIT = 20
MIN_SCORE = 1
MAX_SCORE = 5

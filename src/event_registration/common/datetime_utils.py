from __future__ import annotations

from datetime import datetime


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def format_display_date(value: datetime) -> str:
    """Human-readable registration date, e.g. '19/10/2026 14:05'."""
    return value.strftime("%d/%m/%Y %H:%M")

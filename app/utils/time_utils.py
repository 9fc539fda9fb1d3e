# app/utils/time_utils.py
from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """
    Naive datetimes are treated as UTC.
    Aware datetimes are converted to UTC.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def fixed_clock(instant: datetime) -> Clock:
    """
    Clock that always returns the same instant.
    Used by tests and replays instead of patching global time.
    """
    frozen = ensure_utc(instant)

    def _clock() -> datetime:
        return frozen

    return _clock

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Optional

from app.schemas.event import EventDescriptor
from app.utils.time_utils import Clock, ensure_utc, utc_now


class EventStatusValue(str, Enum):
    ACTIVE = "active"
    IN_REVIEW = "inReview"
    DONE = "done"


@dataclass(frozen=True)
class EventStatus:
    """
    Lifecycle phase of an event at one instant.
    No state stored. Fully deterministic for a given clock.

        now <= end_date                      -> active
        end_date < now <= end_date + review  -> inReview
        now > end_date + review              -> done
    """

    value: EventStatusValue

    @classmethod
    def from_event(
        cls,
        event: Optional[EventDescriptor],
        clock: Clock = utc_now,
    ) -> "EventStatus":
        if event is None:
            return cls(EventStatusValue.DONE)

        now = ensure_utc(clock())
        end_date = ensure_utc(event.end_date)
        if end_date >= now:
            return cls(EventStatusValue.ACTIVE)

        try:
            review_deadline = end_date + timedelta(hours=event.review_duration_in_hours)
        except OverflowError:
            # deadline beyond datetime range: sign decides which side of now it is
            if event.review_duration_in_hours > 0:
                return cls(EventStatusValue.IN_REVIEW)
            return cls(EventStatusValue.DONE)

        if review_deadline >= now:
            return cls(EventStatusValue.IN_REVIEW)
        return cls(EventStatusValue.DONE)

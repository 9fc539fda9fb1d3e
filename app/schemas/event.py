from datetime import datetime

from pydantic import BaseModel, ConfigDict


class EventDescriptor(BaseModel):
    """
    Latest event of a group as seen by the status check.
    - end_date: when the event (e.g. a poll) closes
    - review_duration_in_hours: grace period after end_date
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    end_date: datetime
    # finite only; zero/negative collapses the review window
    review_duration_in_hours: float

from app.domain.events.event_status import EventStatus
from app.repositories.base import LoadLastEventRepository
from app.utils.time_utils import Clock, utc_now


class CheckLastEventStatus:
    """
    Load the most recent event of a group and classify it.
    Repository errors propagate unchanged.
    """

    def __init__(
        self,
        load_last_event_repository: LoadLastEventRepository,
        clock: Clock = utc_now,
    ):
        self.load_last_event_repository = load_last_event_repository
        self.clock = clock

    async def perform(self, *, group_id: str) -> EventStatus:
        event = await self.load_last_event_repository.load_last_event(group_id=group_id)
        return EventStatus.from_event(event, clock=self.clock)

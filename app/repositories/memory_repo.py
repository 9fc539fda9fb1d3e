import logging
from typing import Dict, List, Optional, Union

from app.repositories.base import LoadLastEventRepository
from app.schemas.event import EventDescriptor
from app.utils.time_utils import ensure_utc

logger = logging.getLogger(__name__)


class MemoryEventRepository(LoadLastEventRepository):

    def __init__(self, db: Optional[Dict[str, List[Union[EventDescriptor, dict]]]] = None):
        self.db: Dict[str, List[EventDescriptor]] = {}
        for group_id, events in (db or {}).items():
            for event in events:
                self.add_event(group_id, event)

    def add_event(self, group_id: str, event: Union[EventDescriptor, dict]) -> None:
        self.db.setdefault(group_id, []).append(EventDescriptor.model_validate(event))

    async def load_last_event(self, *, group_id: str) -> Optional[EventDescriptor]:
        events = self.db.get(group_id, [])
        logger.debug(
            "Loading last event",
            extra={"props": {"group_id": group_id, "candidates": len(events)}},
        )
        return max(events, key=lambda e: ensure_utc(e.end_date), default=None)

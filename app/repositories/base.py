from abc import ABC, abstractmethod
from typing import Optional

from app.schemas.event import EventDescriptor


class LoadLastEventRepository(ABC):
    """
    Data access for the most recent event of a group.
    """

    @abstractmethod
    async def load_last_event(self, *, group_id: str) -> Optional[EventDescriptor]:
        """Return the latest event of the group, or None if it has none."""
        pass

import asyncio
import logging
from typing import Any, Optional

from app.repositories.base import LoadLastEventRepository
from app.schemas.event import EventDescriptor

logger = logging.getLogger(__name__)


class SupabaseEventRepository(LoadLastEventRepository):
    """
    Supabase (Postgres) implementation of LoadLastEventRepository

    Table: events
    - group_id
    - end_date (timestamptz)
    - review_duration_in_hours (numeric)
    """

    def __init__(self, client: Any, table: str = "events"):
        self.client = client
        self.table = table

    async def load_last_event(self, *, group_id: str) -> Optional[EventDescriptor]:
        # supabase-py client is blocking
        rows = await asyncio.to_thread(self._select_last_event, group_id)
        logger.debug(
            "Loaded last event from Supabase",
            extra={"props": {"group_id": group_id, "found": bool(rows)}},
        )
        if not rows:
            return None
        return EventDescriptor.model_validate(rows[0])

    def _select_last_event(self, group_id: str) -> list:
        res = (
            self.client
            .table(self.table)
            .select("end_date, review_duration_in_hours")
            .eq("group_id", group_id)
            .order("end_date", desc=True)
            .limit(1)
            .execute()
        )
        return res.data or []

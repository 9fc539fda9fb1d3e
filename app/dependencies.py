# app/dependencies.py
import logging
from typing import Optional

from app.core.config import Settings, settings as default_settings
from app.repositories.base import LoadLastEventRepository
from app.repositories.memory_repo import MemoryEventRepository
from app.repositories.supabase_repo import SupabaseEventRepository
from app.services.check_last_event_status import CheckLastEventStatus
from app.utils.time_utils import Clock, utc_now

logger = logging.getLogger(__name__)


class EventRepositoryConfigError(RuntimeError):
    """Selected repository backend is missing required settings."""


def build_event_repository(settings: Settings) -> LoadLastEventRepository:
    backend = settings.event_repository_backend.strip().lower()

    if backend == "memory":
        logger.info("Event repository initialized", extra={"props": {"backend": backend}})
        return MemoryEventRepository()

    if backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise EventRepositoryConfigError("SUPABASE_URL or SUPABASE_SERVICE_KEY not set")

        from app.db.supabase_client import get_supabase_client

        client = get_supabase_client(settings.supabase_url, settings.supabase_service_key)
        logger.info(
            "Event repository initialized",
            extra={"props": {"backend": backend, "table": settings.events_table}},
        )
        return SupabaseEventRepository(client, table=settings.events_table)

    raise ValueError(f"Unknown event repository backend: {settings.event_repository_backend!r}")


def get_check_last_event_status(
    settings: Optional[Settings] = None,
    clock: Optional[Clock] = None,
) -> CheckLastEventStatus:
    repository = build_event_repository(settings or default_settings)
    return CheckLastEventStatus(repository, clock=clock or utc_now)

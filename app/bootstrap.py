# app/bootstrap.py
import logging
from typing import Optional

from app.core.config import Settings, settings as default_settings
from app.core.logging import setup_logging
from app.dependencies import get_check_last_event_status
from app.services.check_last_event_status import CheckLastEventStatus
from app.utils.time_utils import Clock

logger = logging.getLogger(__name__)


def create_status_checker(
    settings: Optional[Settings] = None,
    clock: Optional[Clock] = None,
) -> CheckLastEventStatus:
    """
    Process-level setup for callers embedding the status check:
    logging first, then the checker bound to the configured repository.
    """
    settings = settings or default_settings
    setup_logging(
        level=settings.log_level,
        json_logs=settings.log_json,
        app_name=settings.app_name,
    )

    checker = get_check_last_event_status(settings, clock=clock)
    logger.info(
        "Status checker ready",
        extra={"props": {"backend": settings.event_repository_backend}},
    )
    return checker

# app/core/logging.py
import logging
import sys
from typing import Optional

from app.core.config import settings
from app.utils.logger import JsonFormatter

_HANDLER_NAME = "event-status-stdout"


def setup_logging(
    level: Optional[str] = None,
    json_logs: Optional[bool] = None,
    app_name: Optional[str] = None,
) -> None:
    """
    Configure the root logger once.
    Calling again only updates the level and formatter.
    """
    level = (level or settings.log_level).upper()
    json_logs = settings.log_json if json_logs is None else json_logs
    app_name = app_name or settings.app_name

    root = logging.getLogger()
    handler = next((h for h in root.handlers if h.get_name() == _HANDLER_NAME), None)
    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(_HANDLER_NAME)
        root.addHandler(handler)

    if json_logs:
        handler.setFormatter(JsonFormatter(app_name=app_name))
    else:
        handler.setFormatter(
            logging.Formatter(f"%(asctime)s {app_name} %(levelname)s %(name)s: %(message)s")
        )
    root.setLevel(level)

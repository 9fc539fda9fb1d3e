import logging
import json
from typing import Optional


class JsonFormatter(logging.Formatter):
    def __init__(self, app_name: Optional[str] = None):
        super().__init__()
        self.app_name = app_name

    def format(self, record):
        log_obj = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "line": record.lineno
        }
        if self.app_name:
            log_obj["app"] = self.app_name
        # extra={"props": {...}} is merged into the record
        if hasattr(record, "props"):
            log_obj.update(record.props)
        if record.exc_info:
            log_obj["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(log_obj, default=str)

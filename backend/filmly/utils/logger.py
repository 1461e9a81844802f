"""JSON logging for the filmly logger"""
import json
import logging
import sys
from datetime import datetime, timezone

LOGGER_NAME = "filmly"

# Fields callers may attach through ``extra=``
CONTEXT_FIELDS = ("email", "movie_id", "request_id", "action")


class JSONFormatter(logging.Formatter):
    """One JSON object per record"""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (field, getattr(record, field))
            for field in CONTEXT_FIELDS
            if getattr(record, field, None) is not None
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def setup_logging(log_level: str = "INFO") -> logging.Logger:
    """Point the filmly logger at stdout with JSON output.

    Safe to call more than once; the level is updated and the stdout handler
    is reused.
    """
    log = logging.getLogger(LOGGER_NAME)
    log.setLevel(log_level.upper())
    log.propagate = False

    if not any(isinstance(h.formatter, JSONFormatter) for h in log.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(JSONFormatter())
        log.addHandler(handler)
    return log


logger = setup_logging()

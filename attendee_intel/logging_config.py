"""
Logging setup for attendee_intel.

setup_logging() installs one root handler (stdout, plus LOG_FILE when set)
with either a text or a JSON-lines formatter. Insights modules log through
get_component_logger() and attach the attendee they were working on:

    logger = get_component_logger("value_prop")
    logger.debug("Fallback used", extra={"record_name": "Jane Doe"})

Both formatters surface RECORD_FIELDS when a call site supplies them.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone

from attendee_intel import config

# Extra keys set by error_handler and the insights modules
RECORD_FIELDS = ("record_name", "phase", "component")


def _record_context(record: logging.LogRecord) -> dict:
    return {key: getattr(record, key) for key in RECORD_FIELDS if hasattr(record, key)}


class JSONFormatter(logging.Formatter):
    """One JSON object per line: level, logger, message, source location, record context."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "line": record.lineno,
        }
        entry.update(_record_context(record))
        if record.exc_info and record.exc_info[0]:
            entry["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
            }
        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """Readable lines for development; record context is appended in brackets."""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = _record_context(record)
        if context:
            line += " [" + " ".join(f"{k}={v}" for k, v in context.items()) + "]"
        return line


_initialized = False


def setup_logging(level: str = None, fmt: str = None, log_file: str = None):
    """Configure root logging once; later calls are no-ops.

    Args:
        level: Log level override (default: config.LOG_LEVEL)
        fmt: "text" or "json" (default: config.LOG_FORMAT)
        log_file: Extra file destination (default: config.LOG_FILE)
    """
    global _initialized
    if _initialized:
        return
    _initialized = True

    level = (level or config.LOG_LEVEL).upper()
    fmt = fmt or config.LOG_FORMAT
    log_file = log_file or config.LOG_FILE

    formatter = JSONFormatter() if fmt == "json" else TextFormatter()
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        os.makedirs(os.path.dirname(log_file) or ".", exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    root = logging.getLogger()
    root.setLevel(getattr(logging, level, logging.INFO))
    root.handlers.clear()
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    logging.getLogger("attendee_intel").info(
        "Logging configured: level=%s, format=%s%s",
        level, fmt, f", file={log_file}" if log_file else "",
    )


def get_component_logger(component: str) -> logging.Logger:
    """Logger for an insights component, e.g. attendee_intel.insights.value_prop."""
    return logging.getLogger(f"attendee_intel.insights.{component}")

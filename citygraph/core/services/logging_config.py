"""Structured logging configuration for the CityGraph API."""

import json
import logging
import sys

from citygraph.config import settings

# Extra record attributes copied into JSON log lines when present
EXTRA_FIELDS = (
    "request_id",
    "method",
    "path",
    "client_ip",
    "status_code",
    "duration_ms",
    "error_code",
    "exception_type",
    "details",
)


class JSONFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_entry = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for field in EXTRA_FIELDS:
            if hasattr(record, field):
                log_entry[field] = getattr(record, field)

        # Add exception info if present
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False, default=str)


class TextFormatter(logging.Formatter):
    """Custom text formatter for development."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as text."""
        request_id = getattr(record, "request_id", "")
        if request_id:
            record.request_id_str = f"[{request_id}] "
        else:
            record.request_id_str = ""

        return super().format(record)


def setup_logging() -> None:
    """Set up logging configuration."""
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    if settings.log_format == "json":
        console_handler.setFormatter(JSONFormatter())
    else:
        console_handler.setFormatter(
            TextFormatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(request_id_str)s%(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )

    # Configure root logger
    logging.basicConfig(level=level, handlers=[console_handler], force=True)

    # Configure specific loggers
    logging.getLogger("uvicorn").setLevel(logging.INFO)
    logging.getLogger("neo4j").setLevel(logging.WARNING)

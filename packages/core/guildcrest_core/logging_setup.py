"""JSON log files for render and provisioning runs."""

from __future__ import annotations

import json
import logging
import logging.handlers
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from .config import LoggingConfig, config_path


_LOGGER_NAME = "guildcrest"
_LOG_FILE = "guildcrest.log"

# Record attributes passed through ``extra=`` that end up in the JSON payload.
_EXTRA_FIELDS = ("event", "kind", "size")


def log_dir(settings: LoggingConfig | None = None) -> Path:
    if settings is not None and settings.directory:
        path = Path(settings.directory).expanduser()
    else:
        path = config_path().parent / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts_utc": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for name in _EXTRA_FIELDS:
            if hasattr(record, name):
                payload[name] = getattr(record, name)
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_logging(settings: LoggingConfig | None = None) -> logging.Logger:
    """Attach the rotating JSON file handler once; later calls are no-ops."""
    settings = settings or LoggingConfig()
    logger = logging.getLogger(_LOGGER_NAME)
    if logger.handlers:
        return logger

    logger.setLevel(settings.level)
    handler = logging.handlers.TimedRotatingFileHandler(
        filename=str(log_dir(settings) / _LOG_FILE),
        when="midnight",
        backupCount=max(2, settings.keep_files),
        encoding="utf-8",
    )
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)

    if settings.console:
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        logger.addHandler(stream_handler)

    logger.debug("logging configured", extra={"event": "logging_configured"})
    return logger


def get_logger() -> logging.Logger:
    return logging.getLogger(_LOGGER_NAME)

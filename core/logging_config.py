"""Structured logging for the AI home server.

Every record emitted while serving ``/ai/doc/home/`` carries the branch it
took (``kind``) and the resource it asked for (``relative_path``), so the
JSON log can be filtered per asset without parsing messages.
"""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from logging.handlers import TimedRotatingFileHandler
from typing import Any, Dict, Optional

import config

REQUEST_FIELDS = ("endpoint", "relative_path", "kind")


class StructuredFormatter(logging.Formatter):
    """Render log records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "line": record.lineno,
        }
        payload.update({field: getattr(record, field) for field in REQUEST_FIELDS if hasattr(record, field)})
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def _resolve_logs_dir(logs_dir: Optional[str]) -> str:
    logs_dir = os.path.abspath(logs_dir or config.LOG_DIR)
    try:
        os.makedirs(logs_dir, exist_ok=True)
    except OSError:
        logs_dir = os.getcwd()
    return logs_dir


def setup_logging(app, logs_dir: Optional[str] = None) -> logging.Logger:
    """Attach a daily-rotated JSON file handler and a console handler to the app logger."""

    logger = app.logger
    logger.setLevel(getattr(logging, config.LOG_LEVEL, logging.INFO))

    structured_path = os.path.join(_resolve_logs_dir(logs_dir), "ai_home.log")
    if not any(getattr(h, "baseFilename", None) == structured_path for h in logger.handlers):
        # rotate daily, keep a week
        structured_handler = TimedRotatingFileHandler(structured_path, when="midnight", backupCount=7, encoding="utf-8")
        structured_handler.setFormatter(StructuredFormatter())
        logger.addHandler(structured_handler)

    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter("%(asctime)s - %(levelname)s - %(message)s"))
        console_handler.setLevel(logging.INFO)
        logger.addHandler(console_handler)

    logging.getLogger("werkzeug").setLevel(logging.WARNING)
    return logger


def log_error(logger: logging.Logger, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
    """Log an error with its traceback and structured context."""

    logger.error("Error: %s", error, extra=context or {}, exc_info=True)


def log_request(
    logger: logging.Logger,
    endpoint: str,
    *,
    relative_path: Optional[str] = None,
    kind: Optional[str] = None,
) -> None:
    """Log which resource a request resolved to."""

    extra: Dict[str, Any] = {"endpoint": endpoint}
    if relative_path is not None:
        extra["relative_path"] = relative_path
    if kind:
        extra["kind"] = kind
    logger.info("Request to %s%s", endpoint, relative_path or "", extra=extra)

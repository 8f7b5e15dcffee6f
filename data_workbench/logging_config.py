from __future__ import annotations

import logging
import os
from typing import Optional

from pythonjsonlogger import jsonlogger

LOG_FORMAT_ENV = "DATA_WORKBENCH_LOG_FORMAT"

JSON_FIELDS = "%(asctime)s %(levelname)s %(name)s %(message)s"
PLAIN_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Dash's dev server logs every request at INFO
QUIET_LOGGERS = ("werkzeug",)


def resolve_log_format(force_format: Optional[str] = None) -> str:
    """
    "plain" or "json": the explicit argument wins, then the env var.
    Anything unrecognised means JSON.
    """
    mode = force_format if force_format is not None else os.getenv(LOG_FORMAT_ENV, "json")
    return "plain" if mode.strip().lower() == "plain" else "json"


def build_formatter(mode: str) -> logging.Formatter:
    if mode == "plain":
        return logging.Formatter(PLAIN_FORMAT)
    # Context fields passed via ``extra=`` (dataset_version, action_type, ...)
    # end up as top-level JSON keys
    return jsonlogger.JsonFormatter(JSON_FIELDS)


def configure_logging(
        level: int = logging.INFO,
        force_format: Optional[str] = None,
) -> None:
    """
    Route all workbench logging through one stream handler on the root logger.

    JSON records by default, plain lines for local work. Existing root
    handlers are dropped so repeated calls (Dash reloader) don't duplicate
    output.
    """
    root = logging.getLogger()
    root.setLevel(level)

    handler = logging.StreamHandler()
    handler.setFormatter(build_formatter(resolve_log_format(force_format)))

    root.handlers.clear()
    root.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

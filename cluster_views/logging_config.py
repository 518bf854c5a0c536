from __future__ import annotations

import logging
import os
from typing import Optional

from pythonjsonlogger import jsonlogger

# Dash's dev server logs every callback POST at INFO
_QUIET_LOGGERS = ("werkzeug",)


def configure_logging(
        level: Optional[int] = None,
        force_format: Optional[str] = None,
) -> None:
    """
    Route clustering-run and view-sync events to stderr.

    JSON lines carry the ``extra={...}`` payloads of ``cluster_start``,
    ``cluster_done`` and ``view_synced`` as top-level keys; plain mode is a
    one-line-per-event format for local Dash sessions.

    Format: ``force_format`` ("json" or "plain"), else env
    CLUSTER_VIEWS_LOG_FORMAT, else "json".
    Level: ``level``, else env CLUSTER_VIEWS_LOG_LEVEL (e.g. "DEBUG"), else INFO.
    """
    format_mode = (force_format or os.getenv("CLUSTER_VIEWS_LOG_FORMAT", "json")).lower()
    if level is None:
        level = logging.getLevelName(os.getenv("CLUSTER_VIEWS_LOG_LEVEL", "INFO").upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)

    handler = logging.StreamHandler()
    if format_mode == "plain":
        handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
    else:
        handler.setFormatter(jsonlogger.JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s"))

    # one handler per process, even when the app factory runs twice
    root.handlers.clear()
    root.addHandler(handler)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

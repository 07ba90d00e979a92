from __future__ import annotations

import logging
import os
from typing import Optional

from pythonjsonlogger import jsonlogger

LOG_FORMAT_ENV = "STATS_BROWSER_LOG_FORMAT"
LOG_FORMATS = ("json", "plain")


def configure_logging(
        level: int = logging.INFO,
        force_format: Optional[str] = None,
) -> None:
    """
    Send all calculator logs through one root handler on stderr.

    The format is "json" (one object per line, extra={} fields included)
    or "plain" for reading in a terminal. force_format wins over the
    STATS_BROWSER_LOG_FORMAT env var; anything unrecognised means json.
    Calling this again replaces the handler rather than adding a second one.
    """
    requested = force_format if force_format is not None else os.getenv(LOG_FORMAT_ENV, "json")
    format_mode = requested.strip().lower()

    handler = logging.StreamHandler()
    if format_mode == "plain":
        handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
    else:
        handler.setFormatter(jsonlogger.JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s"))

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(handler)

    if format_mode not in LOG_FORMATS:
        logging.getLogger(__name__).warning("Unknown log format %r, using json", requested)

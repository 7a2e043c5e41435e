"""
envv/logging_config.py
Logging setup for the envv CLI and for applications that want envv's
structured records.

Library modules never configure logging themselves; they log through
``logging.getLogger(__name__)`` and attach machine-readable fields as
``extra={"extra_data": {...}}`` (e.g. ``{"event": "invalid env value",
"value": "FOO"}``).
"""

from __future__ import annotations

import json
import logging
import os
import time
from typing import Optional

LOG_FILE = "envv.log"


# ── Structured JSON Formatter ─────────────────────────────────────────────

class StructuredFormatter(logging.Formatter):
    """
    JSON log formatter for machine-parseable logs.
    Fields: ts, level, logger, msg, extra (from ``extra_data``), exception
    """

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "ts": time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created)),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        if hasattr(record, "extra_data"):
            entry["extra"] = record.extra_data

        if record.exc_info and record.exc_info[0]:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, ensure_ascii=False, default=str)


# ── Setup ─────────────────────────────────────────────────────────────────

def setup_logging(level: str = "WARNING", structured: bool = False,
                  log_dir: Optional[str] = None) -> logging.Logger:
    """
    Configure the root logger.
    Args:
        level: log level (DEBUG/INFO/WARNING/ERROR)
        structured: if True, use JSON format; if False, use human-readable
        log_dir: directory for envv.log; no file handler when empty/None
    """
    root = logging.getLogger()
    numeric = getattr(logging, level.upper(), logging.WARNING)
    root.setLevel(numeric)

    # Remove existing handlers
    for h in root.handlers[:]:
        root.removeHandler(h)

    if structured:
        formatter: logging.Formatter = StructuredFormatter()
    else:
        formatter = logging.Formatter(
            "[%(asctime)s][%(name)s][%(levelname)s] %(message)s",
            datefmt="%H:%M:%S",
        )

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    console.setLevel(numeric)
    root.addHandler(console)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(os.path.join(log_dir, LOG_FILE),
                                           encoding="utf-8")
        file_handler.setFormatter(formatter)
        file_handler.setLevel(numeric)
        root.addHandler(file_handler)

    return root

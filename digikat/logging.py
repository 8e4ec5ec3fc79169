"""
Logging — console output plus the append-only run log

Console logs go to stdout as text (default) or JSON lines. Every
preparation run also writes a plain-text audit log in the output
directory, one line per event:

    [2024-03-01 14:02:11] Filtered to web only: 41,203 rows (dropped 160,877 non-web)

The run log is for reproducibility, not machine parsing.

Usage:
    from digikat.logging import setup_logging, get_logger
    setup_logging(run_log_path="data/data_preparation_log.txt")
    logger = get_logger("cleaning")
    logger.info("Removed %d duplicates", n, extra={"stage": "dedup", "dropped": n})
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from digikat.config import settings


class JSONFormatter(logging.Formatter):
    """Formats log records as JSON lines."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Include extra fields
        for key in ("stage", "rows", "dropped", "path", "error", "error_type"):
            val = getattr(record, key, None)
            if val is not None:
                entry[key] = val

        if record.exc_info and record.exc_info[0]:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable format for development."""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s [%(levelname)-8s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


class RunLogFormatter(logging.Formatter):
    """Run log lines: [YYYY-MM-DD HH:MM:SS] message"""

    def __init__(self):
        super().__init__(fmt="[%(asctime)s] %(message)s", datefmt="%Y-%m-%d %H:%M:%S")


def setup_logging(run_log_path: Optional[str | Path] = None, fresh: bool = True):
    """
    Configure the digikat logger. Call once per run.

    Args:
        run_log_path: Where to write the run log. None disables it.
        fresh: Truncate an existing run log before appending.
    """
    root = logging.getLogger("digikat")
    root.setLevel(getattr(logging, settings.LOG_LEVEL, logging.INFO))

    for handler in list(root.handlers):
        handler.close()
    root.handlers.clear()

    console = logging.StreamHandler(sys.stdout)
    if settings.LOG_FORMAT == "json":
        console.setFormatter(JSONFormatter())
    else:
        console.setFormatter(TextFormatter())
    root.addHandler(console)

    if run_log_path is not None:
        run_log_path = Path(run_log_path)
        run_log_path.parent.mkdir(parents=True, exist_ok=True)
        run_log = logging.FileHandler(
            run_log_path, mode="w" if fresh else "a", encoding="utf-8",
        )
        run_log.setFormatter(RunLogFormatter())
        run_log.setLevel(logging.INFO)
        root.addHandler(run_log)

    return root


def get_logger(name: str) -> logging.Logger:
    """Get a named logger under the digikat namespace."""
    return logging.getLogger(f"digikat.{name}")

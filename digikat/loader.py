"""
Read the raw monitoring export into a DataFrame.

Format is chosen by file extension. Anything else fails fast before
a single row is processed.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

logger = logging.getLogger(__name__)


class UnsupportedFormatError(ValueError):
    """Input file extension has no reader."""


READERS = {
    ".csv": lambda p: pd.read_csv(p, encoding="utf-8", low_memory=False),
    ".xlsx": lambda p: pd.read_excel(p),
    ".xls": lambda p: pd.read_excel(p),
    ".parquet": lambda p: pd.read_parquet(p),
    ".pkl": lambda p: pd.read_pickle(p),
    ".pickle": lambda p: pd.read_pickle(p),
}


def load_table(path: str | Path) -> pd.DataFrame:
    path = Path(path)
    ext = path.suffix.lower()
    reader = READERS.get(ext)
    if reader is None:
        raise UnsupportedFormatError(f"Unsupported file format: {ext or '(none)'}")
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")

    logger.info("Detected file format: %s", ext.lstrip("."))
    df = reader(path)
    logger.info("Raw data loaded: %s rows, %d columns", f"{len(df):,}", df.shape[1],
                extra={"stage": "load", "rows": len(df), "path": str(path)})
    return df

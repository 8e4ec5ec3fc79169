"""
The four published subcorpora.

All four share the enriched schema; they differ only in which rows
they keep:
  full            every cleaned web record
  framed          has_any_frame
  catholic        media_type == "Catholic"
  catholic_framed both of the above
"""

from __future__ import annotations

import logging

import pandas as pd

from digikat.detector import SEARCH_TEXT_COLUMN
from digikat.lexicon import MEDIA_TYPE_CATHOLIC

logger = logging.getLogger(__name__)

CORPUS_NAMES: tuple[str, ...] = ("full", "framed", "catholic", "catholic_framed")


def partition_corpora(df: pd.DataFrame) -> dict[str, pd.DataFrame]:
    is_catholic = df["media_type"] == MEDIA_TYPE_CATHOLIC
    framed = df["has_any_frame"].astype(bool)

    corpora = {
        "full": df,
        "framed": df[framed],
        "catholic": df[is_catholic],
        "catholic_framed": df[is_catholic & framed],
    }

    logger.info("Subcorpora created:")
    logger.info("  Full corpus (web): %s", f"{len(corpora['full']):,}")
    logger.info("  Framed corpus: %s", f"{len(corpora['framed']):,}")
    logger.info("  Catholic corpus: %s", f"{len(corpora['catholic']):,}")
    logger.info("  Catholic framed: %s", f"{len(corpora['catholic_framed']):,}")
    return corpora


def internal_columns(df: pd.DataFrame) -> list[str]:
    """Columns that never leave the pipeline: search text and raw frame counts."""
    return [c for c in df.columns if c == SEARCH_TEXT_COLUMN or c.startswith("fcount_")]


def export_columns(df: pd.DataFrame) -> pd.DataFrame:
    return df.drop(columns=internal_columns(df))

"""
Index Builder — Narrative Proximity Index and narrative phase

NPI measures structural resemblance to disinformation narrative
patterns, not factual accuracy:

    npi_raw = 2.0 * CONSPIRACY
            + 1.5 * FOREIGN_THREAT
            + 1.5 * INSTITUTIONAL_DISTRUST
            + 1.0 * MEDIA_CRITIQUE            (frame flags as 0/1)

Normalization runs in two explicit phases: every raw score is final
first, then one min/max reduction over the whole batch, then a pure
per-record rescale:

    npi_normalized = round(100 * (raw - min) / max(max - min, 1), 1)

npi_normalized is therefore batch-relative. Recomputing it on a subset
of the same records gives different values; that is expected.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Mapping

import pandas as pd

from digikat.detector import frame_column
from digikat.lexicon import NARRATIVE_PHASES, NPI_WEIGHTS, PHASE_LABELS, PHASE_OTHER

logger = logging.getLogger(__name__)


def npi_raw(frame_present: Mapping[str, bool]) -> float:
    """Weighted sum of the NPI frames for one record."""
    return float(sum(
        weight * bool(frame_present.get(frame, False))
        for frame, weight in NPI_WEIGHTS.items()
    ))


def normalize_npi(raw: pd.Series) -> pd.Series:
    """Min-max rescale a finished batch of raw scores to 0-100."""
    if raw.empty:
        return raw.astype("float64")
    lo = raw.min()
    hi = raw.max()
    denom = max(hi - lo, 1)
    return ((raw - lo) / denom * 100).round(1)


def narrative_phase(day) -> str:
    """Phase label for a date. Missing or unparseable dates map to Other."""
    if day is None or pd.isna(day):
        return PHASE_OTHER
    if isinstance(day, datetime):
        day = day.date()
    elif not isinstance(day, date):
        try:
            day = pd.Timestamp(day).date()
        except (TypeError, ValueError):
            return PHASE_OTHER
    for phase in NARRATIVE_PHASES:
        if phase.contains(day):
            return phase.label
    return PHASE_OTHER


def build_indices(df: pd.DataFrame, date_column: str = "DATE") -> pd.DataFrame:
    """Add npi_raw, npi_normalized and narrative_phase columns."""
    # Phase 1: raw scores, row-wise
    raw = pd.Series(0.0, index=df.index)
    for frame, weight in NPI_WEIGHTS.items():
        raw = raw + df[frame_column(frame)].astype(float) * weight
    df["npi_raw"] = raw

    # Phase 2: batch reduction + rescale
    df["npi_normalized"] = normalize_npi(df["npi_raw"])

    df["narrative_phase"] = pd.Categorical(
        [narrative_phase(d) for d in df[date_column]],
        categories=list(PHASE_LABELS),
        ordered=True,
    )

    logger.info("Derived indices computed")
    if len(df):
        logger.info("  Mean npi_raw: %s", round(df["npi_raw"].mean(), 3))
        logger.info("  Mean npi_normalized: %s", round(df["npi_normalized"].mean(), 1))
    return df

"""
Detector — Frame and Actor Detection

Deterministic keyword detection over the lowercased search text.
No NLU, no models: each category is one pre-compiled alternation.

  - FrameDetector: counts non-overlapping matches per frame, derives
    presence flags from the counts, then the aggregates (frame_total,
    has_any_frame, dominant_frame).
  - ActorDetector: presence only, first match short-circuits.

Both detectors compile their patterns once at construction and are
shared read-only across every row of the batch. They read the
search-text column and never write it.

Known limitation: matching is unanchored substring matching. A short
term can fire inside an unrelated longer word ("most" inside
"mostar"). This is kept for compatibility with the published corpora.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

import numpy as np
import pandas as pd

from digikat.lexicon import (
    ACTOR_DICTIONARIES,
    FRAME_DICTIONARIES,
    NO_FRAME,
    KeywordGroup,
)

logger = logging.getLogger(__name__)

SEARCH_TEXT_COLUMN = "_search_text"


def count_column(frame: str) -> str:
    return f"fcount_{frame}"


def frame_column(frame: str) -> str:
    return f"frame_{frame}"


def actor_column(actor: str) -> str:
    return f"actor_{actor}"


def _compile(groups: tuple[KeywordGroup, ...]) -> dict[str, re.Pattern]:
    return {g.name: re.compile(g.pattern(), re.IGNORECASE) for g in groups}


# ============================================================
# FRAMES
# ============================================================

@dataclass
class FrameEvaluation:
    """Frame detection result for a single text."""
    counts: dict[str, int]
    present: dict[str, bool] = field(init=False)
    frame_total: int = field(init=False)
    has_any_frame: bool = field(init=False)
    dominant_frame: str = field(init=False)

    def __post_init__(self):
        self.present = {name: n > 0 for name, n in self.counts.items()}
        self.frame_total = sum(self.present.values())
        self.has_any_frame = self.frame_total > 0
        self.dominant_frame = dominant_frame(self.counts)


def dominant_frame(counts: dict[str, int]) -> str:
    """
    Frame with the greatest count. Ties go to the frame declared first
    (dict order follows declaration order). NONE when nothing matched.
    """
    best, best_count = NO_FRAME, 0
    for name, n in counts.items():
        if n > best_count:
            best, best_count = name, n
    return best


class FrameDetector:
    """Counts frame keyword matches. One regex scan per frame per text."""

    def __init__(self, dictionaries: tuple[KeywordGroup, ...] = FRAME_DICTIONARIES):
        self._patterns = _compile(dictionaries)

    @property
    def frames(self) -> list[str]:
        return list(self._patterns)

    def count(self, text: str) -> dict[str, int]:
        if not isinstance(text, str):
            text = ""
        return {name: len(regex.findall(text)) for name, regex in self._patterns.items()}

    def evaluate(self, text: str) -> FrameEvaluation:
        return FrameEvaluation(self.count(text))

    def annotate(self, df: pd.DataFrame, text_column: str = SEARCH_TEXT_COLUMN) -> pd.DataFrame:
        """
        Add fcount_<F>, frame_<F>, frame_total, has_any_frame and
        dominant_frame columns.
        """
        texts = df[text_column].fillna("")
        logger.info("Running frame detection (%d count passes)...", len(self._patterns))

        for name, regex in self._patterns.items():
            counts = texts.map(lambda t, rx=regex: len(rx.findall(t))).astype("int64")
            df[count_column(name)] = counts
            df[frame_column(name)] = counts > 0
            logger.info("  %s: %s", name, f"{int((counts > 0).sum()):,}",
                        extra={"stage": "frames", "rows": int((counts > 0).sum())})

        frame_cols = [frame_column(n) for n in self._patterns]
        count_cols = [count_column(n) for n in self._patterns]

        df["frame_total"] = df[frame_cols].sum(axis=1).astype("int64")
        df["has_any_frame"] = df["frame_total"] > 0

        names = np.array(self.frames, dtype=object)
        count_matrix = df[count_cols].to_numpy()
        if len(df):
            # argmax returns the first maximum, i.e. the first declared frame
            winners = names[count_matrix.argmax(axis=1)]
        else:
            winners = np.array([], dtype=object)
        df["dominant_frame"] = np.where(df["frame_total"].to_numpy() == 0, NO_FRAME, winners)

        logger.info("Frame detection complete")
        return df


# ============================================================
# ACTORS
# ============================================================

class ActorDetector:
    """Presence-only actor detection."""

    def __init__(self, dictionaries: tuple[KeywordGroup, ...] = ACTOR_DICTIONARIES):
        self._patterns = _compile(dictionaries)

    @property
    def actors(self) -> list[str]:
        return list(self._patterns)

    def evaluate(self, text: str) -> dict[str, bool]:
        if not isinstance(text, str):
            text = ""
        return {name: regex.search(text) is not None for name, regex in self._patterns.items()}

    def annotate(self, df: pd.DataFrame, text_column: str = SEARCH_TEXT_COLUMN) -> pd.DataFrame:
        texts = df[text_column].fillna("")
        logger.info("Running actor detection (%d detect passes)...", len(self._patterns))
        for name, regex in self._patterns.items():
            df[actor_column(name)] = texts.map(
                lambda t, rx=regex: rx.search(t) is not None
            ).astype(bool)
        logger.info("Actor detection complete")
        return df

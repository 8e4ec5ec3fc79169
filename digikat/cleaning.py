"""
Filter & Clean — web-only, text-bearing, dated, de-duplicated rows

Order matters and mirrors the published preparation:
  1. validate required columns
  2. SOURCE_TYPE == "web"
  3. non-blank FULL_TEXT
  4. parseable DATE (+ temporal helper columns)
  5. de-duplicate (URL if present, else TITLE + DATE + FROM)
  6. comma decimal separators, engagement counters -> numeric, NaN -> 0
  7. build the lowercased search text once, plus word_count

Rows are only ever dropped by steps 2-5. Bad numeric values are
coerced, never a reason to drop a row.
"""

from __future__ import annotations

import logging

import pandas as pd

from digikat.detector import SEARCH_TEXT_COLUMN
from digikat.schemas.corpus import CleaningReport

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS: tuple[str, ...] = ("DATE", "TITLE", "FULL_TEXT", "FROM", "SOURCE_TYPE")

COMMA_DECIMAL_COLUMNS: tuple[str, ...] = ("VIRALITY", "ENGAGEMENT_RATE")

ENGAGEMENT_COLUMNS: tuple[str, ...] = (
    "INTERACTIONS", "LIKE_COUNT", "COMMENT_COUNT", "SHARE_COUNT",
    "LOVE_COUNT", "WOW_COUNT", "HAHA_COUNT", "SAD_COUNT", "ANGRY_COUNT",
    "TOTAL_REACTIONS_COUNT", "REACH", "VIEW_COUNT",
)

WEB_SOURCE = "web"


class MissingColumnsError(ValueError):
    """Raw table lacks one or more required columns."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(f"Missing required columns: {', '.join(missing)}")


def validate_columns(df: pd.DataFrame) -> None:
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise MissingColumnsError(missing)


def _wall_clock(value) -> pd.Timestamp:
    ts = pd.to_datetime(value, errors="coerce")
    if pd.isna(ts):
        return pd.NaT
    return ts.tz_localize(None) if ts.tzinfo is not None else ts


def parse_dates(values: pd.Series) -> pd.Series:
    """
    Parse to midnight-normalized naive timestamps; unparseable -> NaT.

    UTC offsets are dropped, not converted: "2022-05-01T00:30:00+02:00"
    stays on 2022-05-01, the calendar day the outlet published on.
    """
    try:
        parsed = pd.to_datetime(values, errors="coerce", format="mixed")
    except ValueError:
        # Mixed UTC offsets (or offsets next to naive stamps)
        parsed = None
    if parsed is None or not pd.api.types.is_datetime64_any_dtype(parsed):
        parsed = pd.to_datetime(values.map(_wall_clock), errors="coerce")
    if parsed.dt.tz is not None:
        parsed = parsed.dt.tz_localize(None)
    return parsed.dt.normalize()


def add_temporal_columns(df: pd.DataFrame) -> pd.DataFrame:
    dates = df["DATE"].dt
    df["year"] = dates.year
    df["month"] = dates.month
    df["year_month"] = dates.to_period("M").dt.to_timestamp()
    df["week"] = dates.isocalendar().week.astype("int64")
    df["quarter"] = dates.quarter
    df["year_quarter"] = df["year"].astype(str) + " Q" + df["quarter"].astype(str)
    df["day_of_week"] = dates.day_name()
    return df


def dedup_key(df: pd.DataFrame) -> list[str]:
    return ["URL"] if "URL" in df.columns else ["TITLE", "DATE", "FROM"]


def deduplicate(df: pd.DataFrame) -> pd.DataFrame:
    """Keep the first row per URL (or per TITLE + DATE + FROM). Idempotent."""
    return df.drop_duplicates(subset=dedup_key(df), keep="first")


def fix_decimal_commas(df: pd.DataFrame) -> pd.DataFrame:
    for col in COMMA_DECIMAL_COLUMNS:
        if col in df.columns and not pd.api.types.is_numeric_dtype(df[col]):
            df[col] = pd.to_numeric(
                df[col].astype(str).str.replace(",", ".", regex=False),
                errors="coerce",
            )
    return df


def coerce_engagement(df: pd.DataFrame) -> tuple[pd.DataFrame, int]:
    """Engagement counters to non-negative numbers. Returns coerced-cell count."""
    coerced = 0
    for col in ENGAGEMENT_COLUMNS:
        if col not in df.columns:
            continue
        values = pd.to_numeric(df[col], errors="coerce")
        bad = values.isna() | (values < 0)
        coerced += int(bad.sum())
        df[col] = values.fillna(0).clip(lower=0)
    return df, coerced


def build_search_text(df: pd.DataFrame) -> pd.Series:
    """Lowercased TITLE + FULL_TEXT; the sole input to every detector."""
    title = df["TITLE"].fillna("").astype(str)
    body = df["FULL_TEXT"].fillna("").astype(str)
    return (title + " " + body).str.lower()


def clean_articles(df: pd.DataFrame) -> tuple[pd.DataFrame, CleaningReport]:
    """Run every Filter & Clean step. Raises MissingColumnsError up front."""
    validate_columns(df)
    logger.info("Required columns validated")

    report = CleaningReport(raw_rows=len(df))

    # --- Web only ---
    df = df[df["SOURCE_TYPE"] == WEB_SOURCE]
    report.dropped_non_web = report.raw_rows - len(df)
    logger.info("Filtered to web only: %s rows (dropped %s non-web)",
                f"{len(df):,}", f"{report.dropped_non_web:,}",
                extra={"stage": "web_filter", "rows": len(df), "dropped": report.dropped_non_web})

    # --- Empty text ---
    n_before = len(df)
    text = df["FULL_TEXT"]
    has_text = text.notna() & text.astype(str).str.strip().str.len().gt(0)
    df = df[has_text]
    report.dropped_empty_text = n_before - len(df)
    logger.info("Removed %d records with empty FULL_TEXT", report.dropped_empty_text,
                extra={"stage": "empty_text", "dropped": report.dropped_empty_text})

    # --- Dates ---
    df = df.copy()
    n_before = len(df)
    df["DATE"] = parse_dates(df["DATE"])
    df = df[df["DATE"].notna()].copy()
    report.dropped_invalid_date = n_before - len(df)
    logger.info("Removed %d records with unparseable DATE", report.dropped_invalid_date,
                extra={"stage": "dates", "dropped": report.dropped_invalid_date})
    df = add_temporal_columns(df)

    # --- Duplicates ---
    n_before = len(df)
    report.dedup_key = dedup_key(df)
    df = deduplicate(df)
    report.dropped_duplicates = n_before - len(df)
    logger.info("Removed %d duplicates by %s", report.dropped_duplicates,
                "+".join(report.dedup_key),
                extra={"stage": "dedup", "dropped": report.dropped_duplicates})

    # --- Numerics ---
    df = fix_decimal_commas(df)
    df, report.numeric_values_coerced = coerce_engagement(df)
    if report.numeric_values_coerced:
        logger.info("Coerced %d missing/invalid engagement values to 0",
                    report.numeric_values_coerced)

    # --- Search text (single allocation, reused by all detectors) ---
    df[SEARCH_TEXT_COLUMN] = build_search_text(df)
    df["word_count"] = df["FULL_TEXT"].astype(str).str.count(r"\S+").astype("int64")

    df = df.reset_index(drop=True)
    report.final_rows = len(df)
    logger.info("Cleaned web corpus: %s rows", f"{len(df):,}",
                extra={"stage": "clean", "rows": len(df)})
    return df, report

"""
Pipeline — Preparation Orchestrator

Runs the full batch pass:

    load -> clean -> outlets -> frames -> actors -> indices
         -> partition -> export

classify_articles() is the in-memory core (stages 3-6) and is what the
tests exercise; run_pipeline() adds file I/O and the run log around it.
The process either completes the whole batch or fails before writing
any output.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import pandas as pd

from digikat.cleaning import clean_articles
from digikat.config import settings
from digikat.corpora import partition_corpora
from digikat.detector import ActorDetector, FrameDetector, frame_column
from digikat.export import SUMMARY_FILE, build_summary, write_corpora, write_summary
from digikat.lexicon import FRAME_NAMES, LEXICON_VERSION, MEDIA_TYPE_CATHOLIC
from digikat.loader import load_table
from digikat.logging import setup_logging
from digikat.outlets import OutletClassifier
from digikat.schemas.corpus import CleaningReport, CorpusSizes, PipelineResult
from digikat.scorer import build_indices

logger = logging.getLogger(__name__)


def classify_articles(
    df: pd.DataFrame,
    outlets: Optional[OutletClassifier] = None,
    frames: Optional[FrameDetector] = None,
    actors: Optional[ActorDetector] = None,
) -> pd.DataFrame:
    """
    Enrich a cleaned table with every classification column.

    Expects the output of clean_articles (search text already built).
    """
    outlets = outlets or OutletClassifier()
    frames = frames or FrameDetector()
    actors = actors or ActorDetector()

    logger.info("Media classification:")
    df = outlets.annotate(df)
    subcats = df.loc[df["media_type"] == MEDIA_TYPE_CATHOLIC, "catholic_subcategory"].value_counts()
    if len(subcats):
        logger.info("Catholic subcategories:")
        for name, n in subcats.items():
            logger.info("  %s: %s", name, f"{n:,}")

    df = frames.annotate(df)
    df = actors.annotate(df)
    df = build_indices(df)
    return df


def prepare(raw: pd.DataFrame) -> tuple[pd.DataFrame, CleaningReport]:
    """Clean + classify an already-loaded raw table."""
    cleaned, report = clean_articles(raw)
    return classify_articles(cleaned), report


def run_pipeline(
    input_path: Optional[str | Path] = None,
    output_dir: Optional[str | Path] = None,
    configure_logging: bool = True,
) -> PipelineResult:
    input_path = Path(input_path or settings.DATA_FILE_PATH)
    output_dir = Path(output_dir or settings.OUTPUT_DIR)
    run_log_path = output_dir / settings.LOG_FILE_NAME

    if configure_logging:
        setup_logging(run_log_path)

    logger.info("Pipeline started (web only, frames + actors)")
    logger.info("Input file: %s", input_path)
    logger.info("Output directory: %s", output_dir)

    raw = load_table(input_path)
    df, report = prepare(raw)
    corpora = partition_corpora(df)

    written = write_corpora(corpora, output_dir)
    summary_path = write_summary(build_summary(corpora), output_dir / SUMMARY_FILE)

    result = PipelineResult(
        input_path=str(input_path),
        output_dir=str(output_dir),
        lexicon_version=LEXICON_VERSION,
        cleaning=report,
        corpus_sizes=CorpusSizes(**{name: len(c) for name, c in corpora.items()}),
        media_types={k: int(v) for k, v in df["media_type"].value_counts().items()},
        catholic_subcategories={
            k: int(v) for k, v in df["catholic_subcategory"].value_counts().items()
        },
        frame_prevalence={f: int(df[frame_column(f)].sum()) for f in FRAME_NAMES},
        mean_npi_raw=round(float(df["npi_raw"].mean()), 3) if len(df) else None,
        corpus_files={name: str(p) for name, p in written.items()},
        summary_path=str(summary_path),
        run_log_path=str(run_log_path) if configure_logging else None,
    )

    logger.info("Pipeline complete")
    logger.info("All outputs in: %s", output_dir.resolve())
    return result

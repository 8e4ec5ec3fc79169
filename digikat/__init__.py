"""
digikat — Catholic Media Corpus Preparation

Turns a raw media-monitoring export into labeled research corpora for
studying disinformation narratives in Croatian Catholic media.

Public API:
  - clean_articles:      Web-only filter, cleaning, de-duplication
  - OutletClassifier:    Publisher -> media_type / catholic_subcategory
  - FrameDetector:       8 narrative frames (counts, flags, dominant frame)
  - ActorDetector:       7 actor categories (presence flags)
  - build_indices:       Narrative Proximity Index + narrative phase
  - classify_articles:   Stages 3-6 over a cleaned table
  - partition_corpora:   The four published subcorpora
  - run_pipeline:        Load -> classify -> export, with run log

Usage:
    from digikat import clean_articles, classify_articles, partition_corpora
    cleaned, report = clean_articles(raw_df)
    corpora = partition_corpora(classify_articles(cleaned))
"""

__version__ = "1.0.0"

from digikat.lexicon import (
    LEXICON_VERSION,
    FRAME_NAMES,
    ACTOR_NAMES,
    NPI_WEIGHTS,
    NARRATIVE_PHASES,
    NO_FRAME,
)
from digikat.cleaning import clean_articles, deduplicate, MissingColumnsError
from digikat.loader import load_table, UnsupportedFormatError
from digikat.outlets import OutletClassifier, OutletLabel, classify_outlet
from digikat.detector import FrameDetector, FrameEvaluation, ActorDetector
from digikat.scorer import npi_raw, normalize_npi, narrative_phase, build_indices
from digikat.corpora import partition_corpora, export_columns
from digikat.pipeline import classify_articles, prepare, run_pipeline

__all__ = [
    "LEXICON_VERSION",
    "FRAME_NAMES",
    "ACTOR_NAMES",
    "NPI_WEIGHTS",
    "NARRATIVE_PHASES",
    "NO_FRAME",
    "clean_articles",
    "deduplicate",
    "MissingColumnsError",
    "load_table",
    "UnsupportedFormatError",
    "OutletClassifier",
    "OutletLabel",
    "classify_outlet",
    "FrameDetector",
    "FrameEvaluation",
    "ActorDetector",
    "npi_raw",
    "normalize_npi",
    "narrative_phase",
    "build_indices",
    "partition_corpora",
    "export_columns",
    "classify_articles",
    "prepare",
    "run_pipeline",
]

"""
Corpus Schemas — run reports

Pydantic models for what a preparation run reports back: per-step
cleaning counts, corpus sizes and the overall result printed by
run_preparation.py --json.
"""

from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, Field


class CleaningReport(BaseModel):
    """Row counts removed or coerced at each Filter & Clean step."""
    raw_rows: int = 0
    dropped_non_web: int = 0
    dropped_empty_text: int = 0
    dropped_invalid_date: int = 0
    dropped_duplicates: int = 0
    dedup_key: list[str] = Field(default_factory=list)
    numeric_values_coerced: int = 0
    final_rows: int = 0


class CorpusSizes(BaseModel):
    full: int
    framed: int
    catholic: int
    catholic_framed: int


class PipelineResult(BaseModel):
    """Outcome of one full preparation run."""
    input_path: str
    output_dir: str
    lexicon_version: str
    cleaning: CleaningReport
    corpus_sizes: CorpusSizes
    media_types: dict[str, int]
    catholic_subcategories: dict[str, int]
    frame_prevalence: dict[str, int]
    mean_npi_raw: Optional[float] = None
    corpus_files: dict[str, str] = Field(default_factory=dict)
    summary_path: Optional[str] = None
    run_log_path: Optional[str] = None

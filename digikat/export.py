"""
Export — corpus files and the summary workbook

Writes each subcorpus to Parquet (internal columns stripped) and a
five-sheet Excel summary:

    Corpus Overview | Media Types | Catholic Subcategories
    Frame Prevalence | Narrative Phases
"""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from digikat.corpora import export_columns
from digikat.detector import frame_column
from digikat.lexicon import FRAME_NAMES

logger = logging.getLogger(__name__)

CORPUS_FILES: dict[str, str] = {
    "full": "catholic_media_full_corpus.parquet",
    "framed": "catholic_media_contested_corpus.parquet",
    "catholic": "catholic_media_catholic_corpus.parquet",
    "catholic_framed": "catholic_media_catholic_contested.parquet",
}

SUMMARY_FILE = "catholic_media_summary_stats.xlsx"


def write_corpora(corpora: dict[str, pd.DataFrame], output_dir: str | Path) -> dict[str, Path]:
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    written = {}
    for name, filename in CORPUS_FILES.items():
        path = output_dir / filename
        export_columns(corpora[name]).reset_index(drop=True).to_parquet(path, index=False)
        written[name] = path
    logger.info("Corpus files saved", extra={"stage": "export", "path": str(output_dir)})
    return written


def _distribution(series: pd.Series, name: str, sort: bool = True) -> pd.DataFrame:
    counts = series.value_counts(sort=sort, dropna=True)
    if not sort:
        counts = counts.sort_index()
    table = counts.rename_axis(name).reset_index(name="n")
    total = table["n"].sum()
    table["pct"] = (table["n"] / total * 100).round(2) if total else 0.0
    return table


def build_summary(corpora: dict[str, pd.DataFrame]) -> dict[str, pd.DataFrame]:
    """Summary tables keyed by sheet name."""
    full = corpora["full"]
    catholic = corpora["catholic"]

    overview = pd.DataFrame({
        "Metric": [
            "Total web records", "Records with any frame", "Catholic media records",
            "Catholic framed records", "Date range start", "Date range end",
            "Unique sources", "Unique Catholic sources",
        ],
        "Value": [
            str(len(full)), str(len(corpora["framed"])),
            str(len(catholic)), str(len(corpora["catholic_framed"])),
            str(full["DATE"].min().date()) if len(full) else "",
            str(full["DATE"].max().date()) if len(full) else "",
            str(full["FROM"].nunique()),
            str(catholic["FROM"].nunique()),
        ],
    })

    frame_counts = [int(full[frame_column(f)].sum()) for f in FRAME_NAMES]
    prevalence = pd.DataFrame({"frame": list(FRAME_NAMES), "count": frame_counts})
    prevalence["pct"] = (prevalence["count"] / len(full) * 100).round(2) if len(full) else 0.0
    prevalence = prevalence.sort_values("count", ascending=False, kind="stable").reset_index(drop=True)

    return {
        "Corpus Overview": overview,
        "Media Types": _distribution(full["media_type"], "media_type"),
        "Catholic Subcategories": _distribution(catholic["catholic_subcategory"],
                                                "catholic_subcategory"),
        "Frame Prevalence": prevalence,
        # Phase order is chronological, not by size
        "Narrative Phases": _distribution(full["narrative_phase"], "narrative_phase", sort=False),
    }


def write_summary(sheets: dict[str, pd.DataFrame], path: str | Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        for sheet_name, table in sheets.items():
            out = table.copy()
            # openpyxl cannot write categoricals directly
            for col in out.columns:
                if isinstance(out[col].dtype, pd.CategoricalDtype):
                    out[col] = out[col].astype(str)
            out.to_excel(writer, sheet_name=sheet_name, index=False)
    logger.info("Excel summary saved", extra={"stage": "export", "path": str(path)})
    return path

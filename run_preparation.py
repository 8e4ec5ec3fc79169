#!/usr/bin/env python3
"""
run_preparation.py — Build the Catholic media corpora.

Usage:
    python run_preparation.py                          # Input from DIGIKAT_DATA_PATH
    python run_preparation.py --input export.xlsx      # Custom input file
    python run_preparation.py --output-dir out/        # Custom output location
    python run_preparation.py --json                   # Print run result as JSON
"""

from __future__ import annotations

import argparse
import sys

from digikat.cleaning import MissingColumnsError
from digikat.config import settings
from digikat.loader import UnsupportedFormatError
from digikat.logging import get_logger
from digikat.pipeline import run_pipeline

logger = get_logger("cli")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="digikat corpus preparation")
    parser.add_argument(
        "--input",
        default=settings.DATA_FILE_PATH,
        help=f"Raw export (.csv, .xlsx, .xls, .parquet, .pkl) (default: {settings.DATA_FILE_PATH})",
    )
    parser.add_argument(
        "--output-dir",
        default=settings.OUTPUT_DIR,
        help=f"Directory for corpora, summary and run log (default: {settings.OUTPUT_DIR})",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the run result as JSON",
    )
    args = parser.parse_args(argv)

    try:
        result = run_pipeline(args.input, args.output_dir)
    except (UnsupportedFormatError, MissingColumnsError, FileNotFoundError) as e:
        logger.error("Preparation failed: %s", e,
                     extra={"error": str(e), "error_type": type(e).__name__})
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(result.model_dump_json(indent=2))
    else:
        sizes = result.corpus_sizes
        print()
        print(f"Full corpus:      {sizes.full:,}")
        print(f"Framed corpus:    {sizes.framed:,}")
        print(f"Catholic corpus:  {sizes.catholic:,}")
        print(f"Catholic framed:  {sizes.catholic_framed:,}")
        print(f"Summary saved to: {result.summary_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

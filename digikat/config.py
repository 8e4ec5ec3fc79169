"""
digikat Configuration

Central settings loaded from environment variables.
DIGIKAT_DATA_PATH is the only override that affects the data; the
rest only control where and how the run is logged.
"""

import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Immutable application settings."""

    # --- Input ---
    DATA_FILE_PATH: str = os.getenv(
        "DIGIKAT_DATA_PATH", os.path.join("data", "merged_comprehensive.parquet")
    )

    # --- Output ---
    OUTPUT_DIR: str = "data"
    LOG_FILE_NAME: str = "data_preparation_log.txt"

    # --- Logging ---
    LOG_LEVEL: str = os.getenv("DIGIKAT_LOG_LEVEL", "INFO").upper()
    LOG_FORMAT: str = os.getenv("DIGIKAT_LOG_FORMAT", "text")  # "json" or "text"


settings = Settings()

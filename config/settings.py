"""
Configuration settings for reviewstats.

Centralized configuration for report outputs, prompts, and logging.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Union

# Output files (written to the output directory, current directory by default)
POPULAR_PRODUCTS_FILE = "popular_products.csv"
RATED_PRODUCTS_FILE = "rated_products.csv"
POPULAR_PRODUCTS_PERIOD_FILE = "popular_products_period.csv"
MATCHED_PRODUCTS_FILE = "matched_products.csv"

# Report headers
POPULAR_PRODUCTS_HEADER = ["ASIN", "КоличествоОтзывов", "Verified", "Style"]
RATED_PRODUCTS_HEADER = ["ASIN", "AvgRating", "Verified", "Style"]
POPULAR_PRODUCTS_PERIOD_HEADER = ["ASIN", "ReviewsCount", "Verified", "Style"]
MATCHED_PRODUCTS_HEADER = ["ASIN", "ReviewText", "Verified", "Style"]

# Input
INPUT_ENCODING = "utf-8"

# Interactive prompts
DATE_INPUT_FORMAT = "MM dd, yyyy"
START_DATE_PROMPT = f"Enter start date ({DATE_INPUT_FORMAT}): "
END_DATE_PROMPT = f"Enter end date ({DATE_INPUT_FORMAT}): "
SEARCH_PROMPT = "Enter text to search for in reviews: "

# Logging
LOG_LEVEL = os.getenv("REVIEWSTATS_LOG_LEVEL", "INFO")  # DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE = os.getenv("REVIEWSTATS_LOG_FILE", "reviewstats.log")


@dataclass(frozen=True)
class OutputConfig:
    """
    Destination paths for the four reports.
    Built once at startup and handed to the orchestrator.
    """
    popular_products: Path
    rated_products: Path
    popular_products_period: Path
    matched_products: Path

    @classmethod
    def from_directory(cls, output_dir: Union[str, Path] = ".") -> "OutputConfig":
        """Place every report under output_dir with its standard file name."""
        output_dir = Path(output_dir)
        return cls(
            popular_products=output_dir / POPULAR_PRODUCTS_FILE,
            rated_products=output_dir / RATED_PRODUCTS_FILE,
            popular_products_period=output_dir / POPULAR_PRODUCTS_PERIOD_FILE,
            matched_products=output_dir / MATCHED_PRODUCTS_FILE
        )

"""
Export of scraped movements to JSON or CSV files.

Usage:
    from pilotage.export import save_movements
    save_movements(records, "./data/", fmt="csv")
"""

import json
import logging
import os
from typing import Iterable

import pandas as pd

from .models import FIELD_NAMES, MovementRecord

logger = logging.getLogger(__name__)

SECTION_NAME = "Movements"
FORMATS = ("json", "csv")


def movements_frame(movements: Iterable[MovementRecord]) -> pd.DataFrame:
    """Build a DataFrame with one row per movement and the six fields as columns."""
    return pd.DataFrame(
        [movement.to_dict() for movement in movements], columns=list(FIELD_NAMES)
    )


def save_movements(movements, output_path="./data/", fmt="json") -> str:
    """Save movements under ``output_path`` and return the written file path.

    JSON output is wrapped as ``{"Movements": [...]}`` and keeps accented
    text readable; CSV output has one header line with the field names.

    Raises:
        ValueError: If ``fmt`` is not one of FORMATS
        OSError: If directory creation or file writing fails
    """
    if fmt not in FORMATS:
        raise ValueError(f"Unsupported export format: {fmt}")

    # Create the directory if it doesn't exist
    if not os.path.exists(output_path):
        os.makedirs(output_path)
        logger.info(f"Created directory: {output_path}")

    frame = movements_frame(movements)
    file_path = os.path.join(output_path, SECTION_NAME.lower() + "." + fmt)
    logger.info(f"Saving {len(frame)} movements to {file_path}")

    if fmt == "csv":
        frame.to_csv(file_path, index=False)
    else:
        wrapped = {SECTION_NAME: frame.to_dict(orient="records")}
        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(wrapped, f, indent=4, ensure_ascii=False)

    return file_path

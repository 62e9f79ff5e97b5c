"""
CSV READER
----------
Reads a CSV file into raw dict rows. Every cell stays text, exactly as a
header-mode CSV decoder would hand it over; typing is the importer's job.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List

import pandas as pd

from .limits import check_file_size

logger = logging.getLogger(__name__)


def read_csv(csv_path: Path) -> List[Dict[str, Any]]:
    """
    Read a CSV file where line 1 = headers, following lines = data.

    Blank lines are skipped; quoting is left to pandas.

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If the file is too large or cannot be parsed as CSV
    """
    csv_path = Path(csv_path).expanduser().resolve()

    if not csv_path.exists():
        raise FileNotFoundError(f"CSV file not found: {csv_path}")
    check_file_size(csv_path)

    try:
        df = pd.read_csv(
            csv_path,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            encoding="utf-8-sig",
        )
    except pd.errors.EmptyDataError:
        return []
    except (pd.errors.ParserError, UnicodeDecodeError) as e:
        raise ValueError(f"Cannot parse CSV file: {e}") from e

    df.columns = [str(c).strip() for c in df.columns]
    rows = df.to_dict(orient="records")

    logger.debug("Read %d rows with columns %s from %s", len(rows), list(df.columns), csv_path.name)
    return rows

"""
LEGACY EXCEL READER
-------------------
Reads a binary .xls workbook (Excel 97-2003) into raw dict rows, in the same
shape read_excel produces for .xlsx: row 1 = keys, blank titles become
col_n, fully empty rows are dropped and empty cells are None.

openpyxl cannot open .xls, so this goes through pandas with the xlrd engine.
Note that .xls stores every number as a float.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List

import pandas as pd

from .limits import check_file_size

logger = logging.getLogger(__name__)


def _column_title(title: Any, position: int) -> str:
    text = "" if pd.isna(title) else str(title).strip()
    if not text or text.startswith("Unnamed:"):
        return f"col_{position}"
    return text


def read_xls(xls_path: Path, sheet_name: str | None = None) -> List[Dict[str, Any]]:
    """
    Read .xls file where row 1 = headers, rows 2+ = data.

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If file is not a readable .xls workbook, is too large or the sheet is missing
    """
    xls_path = Path(xls_path).expanduser().resolve()

    if not xls_path.exists():
        raise FileNotFoundError(f"Excel file not found: {xls_path}")
    check_file_size(xls_path)

    try:
        df = pd.read_excel(xls_path, sheet_name=sheet_name or 0, engine="xlrd", dtype=object)
    except Exception as e:
        raise ValueError(f"Cannot read Excel file (is it corrupted or wrong format?): {e}") from e

    df.columns = [_column_title(h, c) for c, h in enumerate(df.columns, start=1)]
    df = df.dropna(how="all")
    df = df.astype(object).where(df.notna(), None)
    rows = df.to_dict(orient="records")

    logger.debug("Read %d rows with columns %s from %s", len(rows), list(df.columns), xls_path.name)
    return rows

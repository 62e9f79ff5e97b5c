"""
EXCEL READER
------------
Reads the first (or named) worksheet into raw dict rows with NO transformation.
Keys are the uploaded file's own column titles; values are the cell values
openpyxl decodes (str, int, float, datetime or None).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List

from openpyxl import load_workbook

from .limits import check_file_size

logger = logging.getLogger(__name__)


def read_excel(xlsx_path: Path, sheet_name: str | None = None) -> List[Dict[str, Any]]:
    """
    Read Excel file where row 1 = headers, rows 2+ = data.

    Args:
        xlsx_path: Path to Excel file
        sheet_name: Optional sheet name (uses first sheet if None)

    Returns:
        List of row dicts with original headers as keys

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If file is not a valid Excel file, is too large or the sheet is missing
    """
    xlsx_path = Path(xlsx_path).expanduser().resolve()

    if not xlsx_path.exists():
        raise FileNotFoundError(f"Excel file not found: {xlsx_path}")
    check_file_size(xlsx_path)

    try:
        wb = load_workbook(xlsx_path, data_only=True)
    except Exception as e:
        raise ValueError(f"Cannot read Excel file (is it corrupted or wrong format?): {e}") from e

    try:
        if sheet_name is not None and sheet_name not in wb.sheetnames:
            raise ValueError(f"Sheet '{sheet_name}' not found. Available: {', '.join(wb.sheetnames)}")
        ws = wb[sheet_name] if sheet_name else wb.worksheets[0]

        values = ws.iter_rows(values_only=True)
        header_cells = next(values, None)
        if header_cells is None:
            return []

        headers: List[str] = [
            str(h).strip() if h not in (None, "") else f"col_{c}"
            for c, h in enumerate(header_cells, start=1)
        ]

        # Skip fully empty rows
        rows: List[Dict[str, Any]] = []
        for cells in values:
            if all(v in (None, "") for v in cells):
                continue
            padded = list(cells) + [None] * (len(headers) - len(cells))
            rows.append(dict(zip(headers, padded)))
    finally:
        wb.close()

    logger.debug("Read %d rows with columns %s from %s", len(rows), headers, xlsx_path.name)
    return rows

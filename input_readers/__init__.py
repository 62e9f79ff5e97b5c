"""
Decoders that turn an uploaded file into raw dict rows.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

from config import SUPPORTED_EXTENSIONS

from .csvfile import read_csv
from .excel import read_excel
from .legacy_excel import read_xls

__all__ = ["read_csv", "read_excel", "read_table", "read_xls"]


def read_table(path: Path) -> List[Dict[str, Any]]:
    """Decode a .csv or Excel file into raw rows, chosen by file extension."""
    path = Path(path)
    ext = path.suffix.lower()

    if ext == ".csv":
        return read_csv(path)
    if ext == ".xls":
        return read_xls(path)
    if ext in SUPPORTED_EXTENSIONS:
        return read_excel(path)

    raise ValueError(
        f"Unsupported file type '{ext or path.name}'. Please upload {', '.join(SUPPORTED_EXTENSIONS)} files."
    )

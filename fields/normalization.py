"""
Cell-level normalization for decoded spreadsheet values.

Decoders hand us whatever the file contained: strings with stray
whitespace, ints and floats from Excel, datetimes from date-formatted
cells, None for empty cells. These helpers turn a single cell into the
text or number a record field needs, and never raise for bad input.
"""

from __future__ import annotations

import math
import re
from datetime import date, datetime
from typing import Any

# Leading decimal number, as a lenient parseFloat would read it ("12.5kg" -> 12.5).
_NUMBER_PREFIX = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def is_numeric_cell(value: Any) -> bool:
    """True for real numbers as decoded (int/float), never for bools or numeric-looking strings."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def cell_text(value: Any) -> str:
    """
    Render a cell as trimmed text.

    None, blank and whitespace-only cells become "". Integral floats drop
    the trailing ".0" that Excel decoding adds, and dates render as ISO
    YYYY-MM-DD.
    """
    if value is None:
        return ""
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, float):
        if math.isnan(value):
            return ""
        if value.is_integer():
            return str(int(value))
    return str(value).strip()


def parse_number(value: Any) -> float:
    """Parse a cell as a decimal number; absent or unparsable cells give 0."""
    if is_numeric_cell(value):
        try:
            number = float(value)
        except OverflowError:
            # ints wider than a double
            return 0.0
        return number if math.isfinite(number) else 0.0

    text = cell_text(value)
    if not text:
        return 0.0

    match = _NUMBER_PREFIX.match(text)
    if not match:
        return 0.0

    number = float(match.group(0))
    return number if math.isfinite(number) else 0.0


def non_negative(number: float) -> float:
    return number if number > 0 else 0.0


def round_half_up(number: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(number + 0.5))

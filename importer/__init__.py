"""
Tabular import normalization for inventory and requisition uploads.
"""

from .normalizer import (  # noqa: F401
    EMPTY_TABLE_MESSAGE,
    ImportResult,
    RequisitionImportResult,
    detect_header_row,
    normalize_inventory,
    normalize_requisition,
    requisition_total,
    resolve_columns,
)

__all__ = [
    "EMPTY_TABLE_MESSAGE",
    "ImportResult",
    "RequisitionImportResult",
    "detect_header_row",
    "normalize_inventory",
    "normalize_requisition",
    "requisition_total",
    "resolve_columns",
]

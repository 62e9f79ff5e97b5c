"""
Spreadsheet rows into depot records.

This module converts a decoded table (a list of row dicts keyed by
whatever column names the file carried) into InventoryItem records or a
single Requisition. It is pure: no I/O, no shared state, and malformed
cells never raise. A batch that yields nothing comes back as an empty
result with a message listing the columns that were found.

Pipeline per import:
1. Decide whether the first row is a header line that the decoder turned
   into data (detect_header_row) and skip it if so.
2. Resolve every role of the target synonym table to a column key once
   (resolve_columns), falling back to a fixed column position.
3. Read each data row through that map, drop empty/padding rows and build
   records with field defaults.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Mapping, Optional, Sequence

from config import (
    DEFAULT_CATEGORY,
    DEFAULT_ITEM_NAME,
    DEFAULT_PHARMACY_CONTACT,
    DEFAULT_PHARMACY_NAME,
    DEFAULT_PRODUCT_NAME,
    DEFAULT_UNIT,
)
from domain.records import InventoryItem, Requisition, RequisitionItem
from domain.schemas import (
    CATEGORY,
    CONTACT,
    EXPIRY_DATE,
    HEADER_VOCABULARY,
    INVENTORY_EXPECTED_COLUMNS,
    INVENTORY_SYNONYMS,
    ITEM_NAME,
    NAME,
    PHARMACY_NAME,
    QUANTITY,
    REQUISITION_EXPECTED_COLUMNS,
    REQUISITION_HEADER_SYNONYMS,
    REQUISITION_ITEM_SYNONYMS,
    UNIT,
    UNIT_PRICE,
    SynonymTable,
)
from fields.identifiers import import_id, now_ms, requisition_id
from fields.normalization import cell_text, is_numeric_cell, non_negative, parse_number

logger = logging.getLogger(__name__)

Row = Mapping[str, Any]
ColumnMap = Dict[str, Optional[str]]

EMPTY_TABLE_MESSAGE = "No rows found in file."


@dataclass
class ImportResult:
    records: List[InventoryItem] = field(default_factory=list)
    columns: List[str] = field(default_factory=list)
    message: str = ""

    @property
    def ok(self) -> bool:
        return bool(self.records)


@dataclass
class RequisitionImportResult:
    requisition: Optional[Requisition] = None
    columns: List[str] = field(default_factory=list)
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.requisition is not None


def _mapping_rows(rows: Sequence[Any]) -> List[Row]:
    return [row for row in rows if isinstance(row, Mapping)]


def _column_keys(table: Sequence[Row]) -> List[str]:
    """Column keys in the order the decoder produced them for the first row."""
    return list(table[0].keys()) if table else []


def _no_records_message(columns: Sequence[Any], expected: str) -> str:
    found = ", ".join(str(c) for c in columns) or "none"
    return f"No items imported. Found columns: {found}. Expected: {expected}"


def detect_header_row(rows: Sequence[Any]) -> bool:
    """
    Heuristic: does the first row hold column titles rather than data?

    True when any first-row cell, trimmed and lower-cased, is one of the
    header words in HEADER_VOCABULARY, or when any cell is an actual
    number (int/float as decoded, not a numeric-looking string). The
    numeric rule means an Excel sheet whose first data row holds numbers
    loses that row; single-row and numbers-only files are ambiguous by
    nature. Rows that are not mappings are not part of the table, so the
    first mapping row is the one inspected.
    """
    table = _mapping_rows(rows)
    if not table:
        return False

    for value in table[0].values():
        if is_numeric_cell(value):
            return True
        if cell_text(value).lower() in HEADER_VOCABULARY:
            return True
    return False


def resolve_columns(columns: Sequence[str], table: SynonymTable) -> ColumnMap:
    """
    Map each role of `table` to one of `columns`.

    A role's synonyms are tried in their listed order; the first synonym
    equal (case-insensitive, trimmed) to a column key picks that column.
    Roles with no matching column use their fallback position, unless the
    table is narrower than that position or the column there was already
    matched by name to another role; those roles map to None.
    """
    by_folded_name: Dict[str, str] = {}
    for key in columns:
        by_folded_name.setdefault(str(key).strip().lower(), key)

    column_map: ColumnMap = {}
    for role_spec in table:
        column_map[role_spec.role] = None
        for synonym in role_spec.synonyms:
            resolved = by_folded_name.get(synonym.strip().lower())
            if resolved is not None:
                column_map[role_spec.role] = resolved
                break

    claimed = {key for key in column_map.values() if key is not None}
    fallbacks: List[str] = []
    for role_spec in table:
        if column_map[role_spec.role] is not None:
            continue
        fallbacks.append(role_spec.role)
        if role_spec.fallback_index < len(columns) and columns[role_spec.fallback_index] not in claimed:
            column_map[role_spec.role] = columns[role_spec.fallback_index]

    if fallbacks:
        logger.debug("Positional fallback used for roles %s", fallbacks)
    logger.debug("Resolved columns: %s", column_map)
    return column_map


def _text(row: Row, key: Optional[str]) -> str:
    if key is None:
        return ""
    return cell_text(row.get(key))


def _number(row: Row, key: Optional[str]) -> float:
    if key is None:
        return 0.0
    return non_negative(parse_number(row.get(key)))


def _data_rows(table: Sequence[Row]) -> Sequence[Row]:
    return table[1:] if detect_header_row(table) else table


def normalize_inventory(rows: Sequence[Any], *, timestamp_ms: Optional[int] = None) -> ImportResult:
    """
    Convert decoded rows into InventoryItem records.

    A row is kept when it has a name, a nonzero price or a nonzero
    quantity. Kept rows get defaults for missing fields ("Product {n}",
    "General", "units") and an id built from the batch timestamp and the
    row's position among the kept rows.
    """
    table = _mapping_rows(rows)
    if not table:
        return ImportResult(message=EMPTY_TABLE_MESSAGE)

    columns = _column_keys(table)
    column_map = resolve_columns(columns, INVENTORY_SYNONYMS)
    ts = now_ms() if timestamp_ms is None else timestamp_ms

    records: List[InventoryItem] = []
    for row in _data_rows(table):
        name = _text(row, column_map[NAME])
        price = _number(row, column_map[UNIT_PRICE])
        quantity = _number(row, column_map[QUANTITY])

        if not (name or price or quantity):
            continue

        position = len(records)
        records.append(
            InventoryItem(
                id=import_id(ts, position),
                name=name or DEFAULT_PRODUCT_NAME.format(n=position + 1),
                category=_text(row, column_map[CATEGORY]) or DEFAULT_CATEGORY,
                unitPrice=price,
                quantity=quantity,
                unit=_text(row, column_map[UNIT]) or DEFAULT_UNIT,
                expiryDate=_text(row, column_map[EXPIRY_DATE]),
            )
        )

    if not records:
        logger.warning("No inventory items recognized in %d rows; columns: %s", len(rows), columns)
        return ImportResult(columns=columns, message=_no_records_message(columns, INVENTORY_EXPECTED_COLUMNS))

    logger.info("Normalized %d inventory items from %d rows", len(records), len(rows))
    return ImportResult(records=records, columns=columns, message=f"Imported {len(records)} items")


def normalize_requisition(
    rows: Sequence[Any],
    *,
    timestamp_ms: Optional[int] = None,
    request_date: Optional[str] = None,
) -> RequisitionImportResult:
    """
    Convert decoded rows into one pending Requisition.

    Every line belongs to the same pharmacy: its name and contact are read
    from the first kept line only. Lines with no name, quantity or price
    are dropped; kept lines without a name become "Item {n}". When no line
    survives, no requisition is produced.
    """
    table = _mapping_rows(rows)
    if not table:
        return RequisitionImportResult(message=EMPTY_TABLE_MESSAGE)

    columns = _column_keys(table)
    column_map = resolve_columns(columns, REQUISITION_HEADER_SYNONYMS + REQUISITION_ITEM_SYNONYMS)

    items: List[RequisitionItem] = []
    pharmacy_row: Optional[Row] = None
    for row in _data_rows(table):
        name = _text(row, column_map[ITEM_NAME])
        quantity = _number(row, column_map[QUANTITY])
        price = _number(row, column_map[UNIT_PRICE])

        if not (name or quantity or price):
            continue

        if pharmacy_row is None:
            pharmacy_row = row
        items.append(
            RequisitionItem(
                name=name or DEFAULT_ITEM_NAME.format(n=len(items) + 1),
                quantity=quantity,
                unitPrice=price,
            )
        )

    if pharmacy_row is None:
        logger.warning("No requisition lines recognized in %d rows; columns: %s", len(rows), columns)
        return RequisitionImportResult(
            columns=columns,
            message=_no_records_message(columns, REQUISITION_EXPECTED_COLUMNS),
        )

    ts = now_ms() if timestamp_ms is None else timestamp_ms
    requisition = Requisition(
        id=requisition_id(ts),
        pharmacyName=_text(pharmacy_row, column_map[PHARMACY_NAME]) or DEFAULT_PHARMACY_NAME,
        pharmacyContact=_text(pharmacy_row, column_map[CONTACT]) or DEFAULT_PHARMACY_CONTACT,
        requestDate=request_date or date.fromtimestamp(ts / 1000).isoformat(),
        items=items,
        status="pending",
        momoCode=None,
        totalAmount=requisition_total(items),
    )

    logger.info("Normalized requisition with %d lines for %s", len(items), requisition["pharmacyName"])
    return RequisitionImportResult(
        requisition=requisition,
        columns=columns,
        message=f"Imported requisition with {len(items)} items",
    )


def requisition_total(items: Sequence[RequisitionItem]) -> float:
    """Sum of quantity x unit price over the lines."""
    return sum(item["quantity"] * item["unitPrice"] for item in items)

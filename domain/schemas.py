"""
Column synonym tables for spreadsheet imports.

Uploaded files name their columns however the author liked ("Qty",
"Stock", "Unit Price", ...). Each table below lists, per role, the column
spellings we accept. Matching is case-insensitive, and the order of a
role's synonyms is its preference order: when a file carries two columns
that both match a role, the one whose synonym is listed first wins.

When no column matches a role, the importer falls back to a fixed column
position. That position assumes the usual layout of our templates
(name, category, price, quantity, unit, expiry) and can pick the wrong
column for files laid out differently.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

# Role identifiers
NAME = "name"
CATEGORY = "category"
UNIT_PRICE = "unit_price"
QUANTITY = "quantity"
UNIT = "unit"
EXPIRY_DATE = "expiry_date"

PHARMACY_NAME = "pharmacy_name"
CONTACT = "contact"
ITEM_NAME = "item_name"


@dataclass(frozen=True)
class RoleSpec:
    role: str
    synonyms: Tuple[str, ...]
    fallback_index: int


SynonymTable = Tuple[RoleSpec, ...]


INVENTORY_SYNONYMS: SynonymTable = (
    RoleSpec(
        NAME,
        (
            "name",
            "product",
            "medicine",
            "medicineName",
            "productName",
            "item",
            "description",
        ),
        0,
    ),
    RoleSpec(CATEGORY, ("category", "type", "group"), 1),
    RoleSpec(
        UNIT_PRICE,
        (
            "unitPrice",
            "price",
            "unit_price",
            "Unit Price",
            "sellingPrice",
            "Selling Price",
        ),
        2,
    ),
    RoleSpec(QUANTITY, ("quantity", "qty", "stock", "amount", "available"), 3),
    RoleSpec(UNIT, ("unit", "units", "packSize", "Pack Size", "pack_size"), 4),
    RoleSpec(
        EXPIRY_DATE,
        (
            "expiryDate",
            "expiry",
            "expireDate",
            "expire",
            "Expiration Date",
            "expiration",
        ),
        5,
    ),
)

# Pharmacy details are read from the same sheet as the line items,
# so their fallback positions overlap with the item columns.
REQUISITION_HEADER_SYNONYMS: SynonymTable = (
    RoleSpec(
        PHARMACY_NAME,
        (
            "pharmacyName",
            "pharmacy",
            "Pharmacy Name",
            "pharmacy_name",
            "customer",
            "client",
        ),
        0,
    ),
    RoleSpec(
        CONTACT,
        (
            "pharmacyContact",
            "contact",
            "phone",
            "Phone Number",
            "telephone",
            "tel",
            "mobile",
        ),
        1,
    ),
)

REQUISITION_ITEM_SYNONYMS: SynonymTable = (
    RoleSpec(
        ITEM_NAME,
        (
            "itemName",
            "Item Name",
            "item",
            "medicine",
            "medicineName",
            "product",
            "productName",
            "name",
            "description",
        ),
        0,
    ),
    RoleSpec(QUANTITY, ("quantity", "qty", "amount", "count", "requested"), 1),
    RoleSpec(
        UNIT_PRICE,
        ("unitPrice", "price", "unit_price", "Unit Price", "cost"),
        2,
    ),
)

# Cell values that mark a first row as a header line rather than data.
HEADER_VOCABULARY = frozenset(
    {
        "name",
        "category",
        "price",
        "quantity",
        "qty",
        "unit",
        "expiry",
        "pharmacy",
        "contact",
        "phone",
        "item",
        "medicine",
        "product",
        "stock",
        "amount",
        "type",
        "group",
        "date",
    }
)

INVENTORY_EXPECTED_COLUMNS = "name/medicine, category, unitPrice, quantity, unit, expiryDate"
REQUISITION_EXPECTED_COLUMNS = "pharmacy, contact, item/medicine, quantity, unitPrice"

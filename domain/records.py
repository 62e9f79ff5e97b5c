"""
Depot record shapes.

These TypedDicts are the normalized structures shared by the importer,
the in-memory store and the dashboard. Keys keep the camelCase names the
dashboard tables display, so a record can be handed to a DataFrame as-is.

InventoryItem and RequisitionItem are produced by the import normalizer;
Requisition bundles line items with the ordering pharmacy's details and
tracks the accept/reject workflow.
"""

from __future__ import annotations

from typing import List, Literal, Optional, TypedDict

RequisitionStatus = Literal["pending", "accepted", "rejected"]

REQUISITION_STATUSES: tuple[str, ...] = ("pending", "accepted", "rejected")


class InventoryItem(TypedDict):
    id: str
    name: str
    category: str
    unitPrice: float
    quantity: float
    unit: str
    expiryDate: str


class RequisitionItem(TypedDict):
    name: str
    quantity: float
    unitPrice: float


class Requisition(TypedDict):
    id: str
    pharmacyName: str
    pharmacyContact: str
    requestDate: str
    items: List[RequisitionItem]
    status: RequisitionStatus
    momoCode: Optional[str]
    totalAmount: float


class LicenseDoc(TypedDict):
    id: str
    name: str
    uploadDate: str
    type: str


INVENTORY_FIELDS: tuple[str, ...] = tuple(InventoryItem.__annotations__)

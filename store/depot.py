"""
In-memory depot state.

DepotStore holds the inventory, requisitions and license documents of one
dashboard session. It is owned by the caller (the Streamlit session, a
test) and passed to whatever needs to read or change it; nothing here is
module-level state. Import batches are appended as-is: the normalizer has
already produced fully-typed records.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Iterable, List, Optional

from domain.demo import DEMO_INVENTORY, DEMO_LICENSES, DEMO_REQUISITIONS
from domain.records import (
    INVENTORY_FIELDS,
    REQUISITION_STATUSES,
    InventoryItem,
    LicenseDoc,
    Requisition,
)
from fields.identifiers import license_id, now_ms
from fields.normalization import round_half_up

logger = logging.getLogger(__name__)


@dataclass
class DepotStore:
    inventory: List[InventoryItem] = field(default_factory=list)
    requisitions: List[Requisition] = field(default_factory=list)
    licenses: List[LicenseDoc] = field(default_factory=list)

    @classmethod
    def seeded(cls) -> "DepotStore":
        """A store pre-filled with the demo catalog, requests and licenses."""
        return cls(
            inventory=copy.deepcopy(DEMO_INVENTORY),
            requisitions=copy.deepcopy(DEMO_REQUISITIONS),
            licenses=copy.deepcopy(DEMO_LICENSES),
        )

    # ------------------------------------------------------------------
    # Inventory
    # ------------------------------------------------------------------
    def set_inventory(self, items: Iterable[InventoryItem]) -> None:
        self.inventory = list(items)

    def add_inventory(self, items: Iterable[InventoryItem]) -> int:
        """Append an import batch; returns how many items were added."""
        batch = list(items)
        self.inventory.extend(batch)
        logger.info("Added %d inventory items (total %d)", len(batch), len(self.inventory))
        return len(batch)

    def get_inventory_item(self, item_id: str) -> InventoryItem:
        for item in self.inventory:
            if item["id"] == item_id:
                return item
        raise KeyError(f"Inventory item not found: {item_id}")

    def update_inventory_item(self, item_id: str, **updates: Any) -> InventoryItem:
        """Apply field updates (e.g. unitPrice=..., quantity=...) to one item."""
        rejected = sorted(set(updates) - (set(INVENTORY_FIELDS) - {"id"}))
        if rejected:
            raise ValueError(f"Cannot update inventory fields: {', '.join(rejected)}")

        item = self.get_inventory_item(item_id)
        item.update(updates)
        return item

    def bulk_update_prices(self, percentage: float) -> None:
        """Scale every unit price by `percentage` percent, rounded to whole currency units."""
        factor = 1 + percentage / 100
        for item in self.inventory:
            item["unitPrice"] = round_half_up(item["unitPrice"] * factor)
        logger.info("Bulk price update of %+g%% on %d items", percentage, len(self.inventory))

    def search_inventory(self, query: str) -> List[InventoryItem]:
        """Items whose name or category contains `query` (case-insensitive)."""
        needle = (query or "").strip().lower()
        if not needle:
            return list(self.inventory)
        return [
            item
            for item in self.inventory
            if needle in item["name"].lower() or needle in item["category"].lower()
        ]

    # ------------------------------------------------------------------
    # Requisitions
    # ------------------------------------------------------------------
    def add_requisition(self, requisition: Requisition) -> None:
        self.requisitions.append(requisition)
        logger.info("Added requisition %s from %s", requisition["id"], requisition["pharmacyName"])

    def get_requisition(self, req_id: str) -> Requisition:
        for req in self.requisitions:
            if req["id"] == req_id:
                return req
        raise KeyError(f"Requisition not found: {req_id}")

    def accept_requisition(self, req_id: str, momo_code: str) -> Requisition:
        """Mark a requisition accepted, recording the MoMo payment code given by the pharmacy."""
        code = (momo_code or "").strip()
        if not code:
            raise ValueError("Please enter a MoMo payment code")

        req = self.get_requisition(req_id)
        req["status"] = "accepted"
        req["momoCode"] = code
        logger.info("Accepted requisition %s", req_id)
        return req

    def reject_requisition(self, req_id: str) -> Requisition:
        req = self.get_requisition(req_id)
        req["status"] = "rejected"
        logger.info("Rejected requisition %s", req_id)
        return req

    def requisitions_by_status(self, status: str) -> List[Requisition]:
        if status not in REQUISITION_STATUSES:
            raise ValueError(f"Unknown requisition status: {status}")
        return [req for req in self.requisitions if req["status"] == status]

    # ------------------------------------------------------------------
    # Licenses
    # ------------------------------------------------------------------
    def add_license(
        self,
        name: str,
        doc_type: str = "License Document",
        *,
        upload_date: Optional[str] = None,
        timestamp_ms: Optional[int] = None,
    ) -> LicenseDoc:
        ts = now_ms() if timestamp_ms is None else timestamp_ms
        doc = LicenseDoc(
            id=license_id(ts),
            name=name,
            uploadDate=upload_date or date.today().isoformat(),
            type=doc_type,
        )
        self.licenses.append(doc)
        return doc

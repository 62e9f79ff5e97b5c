"""
Dashboard figures derived from the depot store.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from config import LOW_STOCK_THRESHOLD, RECENT_REQUESTS_LIMIT, TOP_MEDICINES_LIMIT
from domain.records import InventoryItem, Requisition
from fields.normalization import round_half_up

from .depot import DepotStore


@dataclass
class DashboardSummary:
    total_units: float
    total_value: float
    product_count: int
    pending_requests: int
    accepted_requests: int
    low_stock: List[InventoryItem]


def dashboard_summary(store: DepotStore, low_stock_threshold: float = LOW_STOCK_THRESHOLD) -> DashboardSummary:
    inventory = store.inventory
    return DashboardSummary(
        total_units=sum(i["quantity"] for i in inventory),
        total_value=sum(i["quantity"] * i["unitPrice"] for i in inventory),
        product_count=len(inventory),
        pending_requests=len(store.requisitions_by_status("pending")),
        accepted_requests=len(store.requisitions_by_status("accepted")),
        low_stock=[i for i in inventory if i["quantity"] < low_stock_threshold],
    )


def top_medicines(requisitions: Sequence[Requisition], limit: int = TOP_MEDICINES_LIMIT) -> List[Tuple[str, float]]:
    """Most requested medicines by total quantity across all requisitions."""
    totals: Dict[str, float] = defaultdict(float)
    for req in requisitions:
        for item in req["items"]:
            totals[item["name"]] += item["quantity"]

    # sorted() is stable, so ties keep first-seen order
    ranked = sorted(totals.items(), key=lambda pair: pair[1], reverse=True)
    return ranked[:limit]


def average_order_value(requisitions: Sequence[Requisition]) -> int:
    if not requisitions:
        return 0
    return round_half_up(sum(r["totalAmount"] for r in requisitions) / len(requisitions))


def recent_requisitions(requisitions: Sequence[Requisition], limit: int = RECENT_REQUESTS_LIMIT) -> List[Requisition]:
    """The first `limit` requisitions in store order, as listed on the dashboard."""
    return list(requisitions[:limit])

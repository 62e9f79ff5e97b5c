"""
Caller-owned depot collections and the analytics computed over them.
"""

from .analytics import (  # noqa: F401
    DashboardSummary,
    average_order_value,
    dashboard_summary,
    recent_requisitions,
    top_medicines,
)
from .depot import DepotStore  # noqa: F401
from .invoices import Invoice, InvoiceLine, build_invoice, format_invoice_text, invoice_lines  # noqa: F401

__all__ = [
    "DashboardSummary",
    "DepotStore",
    "Invoice",
    "InvoiceLine",
    "average_order_value",
    "build_invoice",
    "dashboard_summary",
    "format_invoice_text",
    "invoice_lines",
    "recent_requisitions",
    "top_medicines",
]

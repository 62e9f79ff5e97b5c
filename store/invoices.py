"""
Invoices for accepted requisitions.

An invoice is a read-only view of one requisition: who is billed, one line
per requested medicine with its line total, the MoMo payment code and the
amount due. The amount due is the requisition's recorded totalAmount, the
figure the pharmacy agreed to when the request was accepted.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from config import CURRENCY
from domain.records import Requisition


@dataclass(frozen=True)
class InvoiceLine:
    name: str
    quantity: float
    unit_price: float
    line_total: float


@dataclass(frozen=True)
class Invoice:
    id: str
    date: str
    pharmacy_name: str
    pharmacy_contact: str
    lines: List[InvoiceLine]
    momo_code: str
    total: float


def invoice_lines(req: Requisition) -> List[InvoiceLine]:
    return [
        InvoiceLine(
            name=item["name"],
            quantity=item["quantity"],
            unit_price=item["unitPrice"],
            line_total=item["quantity"] * item["unitPrice"],
        )
        for item in req["items"]
    ]


def build_invoice(req: Requisition) -> Invoice:
    """
    Invoice for an accepted requisition.

    Raises:
        ValueError: If the requisition has not been accepted (there is no
            payment to invoice yet)
    """
    if req["status"] != "accepted":
        raise ValueError(f"Requisition {req['id']} is {req['status']}; only accepted requisitions are invoiced")

    return Invoice(
        id=req["id"],
        date=req["requestDate"],
        pharmacy_name=req["pharmacyName"],
        pharmacy_contact=req["pharmacyContact"],
        lines=invoice_lines(req),
        momo_code=req["momoCode"] or "",
        total=req["totalAmount"],
    )


def format_invoice_text(invoice: Invoice) -> str:
    """Plain-text rendering, used for the printable download."""
    out = [
        f"INVOICE {invoice.id}",
        f"Date: {invoice.date}",
        "",
        "Bill To:",
        invoice.pharmacy_name,
        invoice.pharmacy_contact,
        "",
        f"{'Item':<30} {'Qty':>8} {'Price':>10} {'Total':>12}",
    ]
    for line in invoice.lines:
        out.append(f"{line.name:<30} {line.quantity:>8,.0f} {line.unit_price:>10,.0f} {line.line_total:>12,.0f}")
    out += [
        "",
        f"MoMo Code: {invoice.momo_code}",
        f"Total Amount: {invoice.total:,.0f} {CURRENCY}",
    ]
    return "\n".join(out) + "\n"

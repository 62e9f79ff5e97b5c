import pytest

from domain.demo import DEMO_INVENTORY
from store import (
    DepotStore,
    average_order_value,
    build_invoice,
    dashboard_summary,
    format_invoice_text,
    recent_requisitions,
    top_medicines,
)


@pytest.fixture
def store():
    return DepotStore.seeded()


def test_seeded_stores_do_not_share_state(store):
    other = DepotStore.seeded()
    store.update_inventory_item("inv-1", unitPrice=1)

    assert other.get_inventory_item("inv-1")["unitPrice"] == 1200
    assert DEMO_INVENTORY[0]["unitPrice"] == 1200


def test_add_inventory_appends_batch(store):
    batch = [
        {"id": "imp-1-0", "name": "Gauze", "category": "General", "unitPrice": 50, "quantity": 10, "unit": "units", "expiryDate": ""},
    ]

    assert store.add_inventory(batch) == 1
    assert store.inventory[-1]["name"] == "Gauze"
    assert len(store.inventory) == 11


def test_update_inventory_item(store):
    item = store.update_inventory_item("inv-2", unitPrice=320, quantity=14000)

    assert item["unitPrice"] == 320
    assert store.get_inventory_item("inv-2")["quantity"] == 14000


def test_update_inventory_item_errors(store):
    with pytest.raises(KeyError):
        store.update_inventory_item("inv-404", quantity=1)
    with pytest.raises(ValueError, match="colour"):
        store.update_inventory_item("inv-1", colour="red")
    with pytest.raises(ValueError, match="id"):
        store.update_inventory_item("inv-1", id="inv-99")


def test_bulk_update_prices_rounds_to_whole_units(store):
    store.bulk_update_prices(10)

    assert store.get_inventory_item("inv-1")["unitPrice"] == 1320
    assert store.get_inventory_item("inv-4")["unitPrice"] == 495
    assert store.get_inventory_item("inv-10")["unitPrice"] == 385

    store.bulk_update_prices(-50)
    assert store.get_inventory_item("inv-1")["unitPrice"] == 660


def test_search_inventory(store):
    assert {i["id"] for i in store.search_inventory("analg")} == {"inv-2", "inv-4", "inv-8"}
    assert [i["id"] for i in store.search_inventory("OMEPRAZOLE")] == ["inv-5"]
    assert len(store.search_inventory("  ")) == len(store.inventory)


def test_accept_requisition_records_momo_code(store):
    req = store.accept_requisition("req-001", "  MP-2026-0001 ")

    assert req["status"] == "accepted"
    assert req["momoCode"] == "MP-2026-0001"


def test_accept_requisition_requires_code(store):
    with pytest.raises(ValueError, match="MoMo"):
        store.accept_requisition("req-001", "   ")
    assert store.get_requisition("req-001")["status"] == "pending"


def test_reject_requisition_and_status_filters(store):
    store.reject_requisition("req-002")

    assert [r["id"] for r in store.requisitions_by_status("pending")] == ["req-001", "req-005"]
    assert {r["id"] for r in store.requisitions_by_status("rejected")} == {"req-002", "req-004"}
    with pytest.raises(KeyError):
        store.reject_requisition("req-404")
    with pytest.raises(ValueError):
        store.requisitions_by_status("archived")


def test_add_license(store):
    doc = store.add_license("Import Permit 2027.pdf", upload_date="2026-10-18", timestamp_ms=42)

    assert doc == {"id": "lic-42", "name": "Import Permit 2027.pdf", "uploadDate": "2026-10-18", "type": "License Document"}
    assert store.licenses[-1] is doc


def test_dashboard_summary(store):
    summary = dashboard_summary(store)

    assert summary.product_count == 10
    assert summary.total_units == 53700
    assert summary.pending_requests == 3
    assert summary.accepted_requests == 1
    assert [i["id"] for i in summary.low_stock] == ["inv-6"]


def test_top_medicines(store):
    top = top_medicines(store.requisitions)

    assert len(top) == 8
    assert top[0] == ("Paracetamol 500mg", 620)
    # ties keep first-seen order
    assert top[1] == ("Metformin 850mg", 200)
    assert top[2] == ("Ibuprofen 400mg", 200)
    assert top_medicines([], limit=3) == []


def test_average_order_value(store):
    assert average_order_value(store.requisitions) == 172700
    assert average_order_value([]) == 0


def test_recent_requisitions(store):
    assert [r["id"] for r in recent_requisitions(store.requisitions)] == ["req-001", "req-002", "req-003", "req-004"]
    assert [r["id"] for r in recent_requisitions(store.requisitions, limit=2)] == ["req-001", "req-002"]
    assert recent_requisitions([]) == []


def test_invoice_for_accepted_requisition(store):
    invoice = build_invoice(store.get_requisition("req-003"))

    assert invoice.id == "req-003"
    assert invoice.date == "2026-02-13"
    assert invoice.pharmacy_name == "Pharmacy Vita"
    assert invoice.momo_code == "MP-2026-7821"
    assert len(invoice.lines) == 1
    line = invoice.lines[0]
    assert (line.name, line.quantity, line.unit_price, line.line_total) == ("Azithromycin 250mg", 25, 2500, 62500)
    assert invoice.total == 62500


def test_invoice_after_accepting_multi_line_requisition(store):
    store.accept_requisition("req-005", "MP-2026-0099")
    invoice = build_invoice(store.get_requisition("req-005"))

    assert [line.line_total for line in invoice.lines] == [150000, 90000, 50000]
    assert invoice.total == 315000

    text = format_invoice_text(invoice)
    assert "INVOICE req-005" in text
    assert "Ubuzima Pharmacy" in text
    assert "MoMo Code: MP-2026-0099" in text
    assert "Total Amount: 315,000 RWF" in text


def test_only_accepted_requisitions_are_invoiced(store):
    with pytest.raises(ValueError, match="pending"):
        build_invoice(store.get_requisition("req-001"))
    with pytest.raises(ValueError, match="rejected"):
        build_invoice(store.get_requisition("req-004"))

import tempfile

import pytest
from openpyxl import Workbook

from interface.processor import import_file, process_uploaded_file
from store import DepotStore

TS = 1_760_000_000_000


class FakeUpload:
    """Stand-in for a Streamlit UploadedFile."""

    def __init__(self, name, data):
        self.name = name
        self._data = data

    def getbuffer(self):
        return memoryview(self._data)


def test_inventory_csv_is_appended_to_store(tmp_path):
    path = tmp_path / "stock.csv"
    path.write_text("Medicine,Qty,Unit Price\nParacetamol,100,300\nIbuprofen,50,450\n", encoding="utf-8")
    store = DepotStore()

    outcome = import_file(path, "inventory", store, timestamp_ms=TS)

    assert outcome.success
    assert outcome.imported == 2
    assert [i["id"] for i in store.inventory] == [f"imp-{TS}-0", f"imp-{TS}-1"]
    assert store.inventory[0]["unitPrice"] == 300


def test_excel_numeric_first_row_is_treated_as_header(tmp_path):
    # Typed Excel cells trip the numeric rule of header detection, so the
    # first data row is taken for a header line and skipped.
    wb = Workbook()
    ws = wb.active
    ws.append(["Name", "Category", "Price", "Quantity"])
    ws.append(["Amoxicillin", "Antibiotics", 1200, 5000])
    ws.append(["Paracetamol", "Analgesics", 300, 15000])
    path = tmp_path / "stock.xlsx"
    wb.save(path)
    store = DepotStore()

    outcome = import_file(path, "inventory", store, timestamp_ms=TS)

    assert outcome.imported == 1
    assert store.inventory[0]["name"] == "Paracetamol"


def test_requisition_upload_creates_pending_requisition():
    data = (
        "Pharmacy,Phone,Medicine,Qty,Price\n"
        "Ubuzima Pharmacy,+250 788 567 890,Paracetamol 500mg,500,300\n"
        ",,Ibuprofen 400mg,200,450\n"
    ).encode("utf-8")
    store = DepotStore()

    outcome = process_uploaded_file(FakeUpload("order.csv", data), "requisition", store)

    assert outcome.success
    assert outcome.imported == 2
    req = store.requisitions[0]
    assert req["pharmacyName"] == "Ubuzima Pharmacy"
    assert req["pharmacyContact"] == "+250 788 567 890"
    assert req["totalAmount"] == 240000
    assert req["status"] == "pending"


def test_upload_with_no_recognizable_rows_fails_with_columns():
    data = "Foo,Bar\n,\n".encode("utf-8")
    store = DepotStore()

    outcome = process_uploaded_file(FakeUpload("junk.csv", data), "inventory", store)

    assert not outcome.success
    assert "Found columns: Foo, Bar" in outcome.message
    assert store.inventory == []


def test_unsupported_upload_is_reported_not_raised():
    store = DepotStore.seeded()

    outcome = process_uploaded_file(FakeUpload("notes.txt", b"hello"), "inventory", store)

    assert not outcome.success
    assert "Unsupported file type" in outcome.message
    assert len(store.inventory) == 10


def test_corrupt_workbook_is_reported_not_raised():
    store = DepotStore()

    outcome = process_uploaded_file(FakeUpload("stock.xlsx", b"not a zip"), "requisition", store)

    assert not outcome.success
    assert "Cannot read Excel file" in outcome.message
    assert store.requisitions == []


class UnreadableUpload(FakeUpload):
    def getbuffer(self):
        raise OSError("connection reset while reading upload")


def test_temp_copy_is_removed_after_import(tmp_path, monkeypatch):
    monkeypatch.setattr(tempfile, "tempdir", str(tmp_path))
    store = DepotStore()

    outcome = process_uploaded_file(FakeUpload("stock.csv", b"name,qty\nIbuprofen,8000\n"), "inventory", store)

    assert outcome.success
    assert list(tmp_path.iterdir()) == []


def test_temp_copy_is_removed_when_upload_cannot_be_read(tmp_path, monkeypatch):
    monkeypatch.setattr(tempfile, "tempdir", str(tmp_path))
    store = DepotStore()

    with pytest.raises(OSError, match="connection reset"):
        process_uploaded_file(UnreadableUpload("stock.csv", b""), "inventory", store)

    assert list(tmp_path.iterdir()) == []
    assert store.inventory == []

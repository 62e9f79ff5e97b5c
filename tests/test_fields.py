from datetime import date, datetime

import pytest

from fields.identifiers import IdConfig, import_id, license_id, now_ms, requisition_id
from fields.normalization import cell_text, is_numeric_cell, parse_number, round_half_up


@pytest.mark.parametrize(
    "value, expected",
    [
        ("300", 300),
        (" 12.5kg", 12.5),
        ("1,200", 1),
        (".5", 0.5),
        ("-3", -3),
        ("1e3", 1000),
        (450, 450),
        (2.75, 2.75),
        ("abc", 0),
        ("", 0),
        (None, 0),
        (True, 0),
        (float("nan"), 0),
        (float("inf"), 0),
        ("Infinity", 0),
        (10**400, 0),
    ],
)
def test_parse_number(value, expected):
    assert parse_number(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, ""),
        ("  Amoxicillin 500mg ", "Amoxicillin 500mg"),
        ("   ", ""),
        (1200.0, "1200"),
        (2.5, "2.5"),
        (0, "0"),
        (datetime(2027, 6, 15, 0, 0), "2027-06-15"),
        (date(2026, 11, 30), "2026-11-30"),
    ],
)
def test_cell_text(value, expected):
    assert cell_text(value) == expected


def test_is_numeric_cell_rejects_bools_and_strings():
    assert is_numeric_cell(3)
    assert is_numeric_cell(3.5)
    assert not is_numeric_cell(False)
    assert not is_numeric_cell("3")


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(-2.5) == -2
    assert round_half_up(1320.0000000000002) == 1320


def test_ids():
    assert import_id(1700, 0) == "imp-1700-0"
    assert requisition_id(1700) == "req-1700"
    assert license_id(1700) == "lic-1700"
    assert import_id(1700, 2, IdConfig(import_prefix="batch")) == "batch-1700-2"

    with pytest.raises(ValueError):
        import_id(1700, -1)


def test_now_ms_is_milliseconds():
    assert now_ms() > 1_600_000_000_000

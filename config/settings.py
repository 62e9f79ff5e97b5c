"""
Central configuration for import limits, record defaults and logging.

This module defines:
- File limits checked before a spreadsheet is decoded.
- Default values the normalizer fills in for missing cells.
- Dashboard thresholds used by the analytics helpers.
- The log level, read from the environment (via dotenv) so it can be
  changed without touching code.

All values except LOG_LEVEL are constants and should be imported where needed.
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

load_dotenv()


MAX_FILE_SIZE_MB = 10

SUPPORTED_EXTENSIONS = (".csv", ".xlsx", ".xlsm", ".xls")

DEFAULT_CATEGORY = "General"
DEFAULT_UNIT = "units"
DEFAULT_PRODUCT_NAME = "Product {n}"
DEFAULT_ITEM_NAME = "Item {n}"

DEFAULT_PHARMACY_NAME = "New Pharmacy"
DEFAULT_PHARMACY_CONTACT = "+250 788 000 000"

LOW_STOCK_THRESHOLD = 2000
TOP_MEDICINES_LIMIT = 8
RECENT_REQUESTS_LIMIT = 4

CURRENCY = "RWF"

LOG_LEVEL = os.getenv("DEPOT_LOG_LEVEL", "INFO").upper()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once for scripts and the Streamlit app."""
    logging.basicConfig(
        level=getattr(logging, level or LOG_LEVEL, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

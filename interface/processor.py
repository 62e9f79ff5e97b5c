"""
Upload processing: file -> raw rows -> normalized records -> store.

This is the one place where decoding errors become user-facing messages.
The normalizer itself never raises; readers raise FileNotFoundError /
ValueError, which are reported back as a failed UploadOutcome.
"""

from __future__ import annotations

import logging
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Optional

from importer import normalize_inventory, normalize_requisition
from input_readers import read_table
from store import DepotStore

logger = logging.getLogger(__name__)

UploadKind = Literal["inventory", "requisition"]


@dataclass
class UploadOutcome:
    success: bool
    imported: int
    message: str


def import_file(
    path: Path,
    kind: UploadKind,
    store: DepotStore,
    *,
    timestamp_ms: Optional[int] = None,
) -> UploadOutcome:
    """Decode `path`, normalize it as `kind` and append the result to `store`."""
    try:
        rows = read_table(path)
    except (FileNotFoundError, ValueError) as e:
        logger.error("Failed to read %s: %s", Path(path).name, e)
        return UploadOutcome(success=False, imported=0, message=str(e))

    if kind == "inventory":
        result = normalize_inventory(rows, timestamp_ms=timestamp_ms)
        if not result.ok:
            return UploadOutcome(success=False, imported=0, message=result.message)
        imported = store.add_inventory(result.records)
        return UploadOutcome(success=True, imported=imported, message=result.message)

    if kind == "requisition":
        req_result = normalize_requisition(rows, timestamp_ms=timestamp_ms)
        if not req_result.ok:
            return UploadOutcome(success=False, imported=0, message=req_result.message)
        store.add_requisition(req_result.requisition)
        return UploadOutcome(
            success=True,
            imported=len(req_result.requisition["items"]),
            message=req_result.message,
        )

    raise ValueError(f"Unknown upload kind: {kind}")


def process_uploaded_file(uploaded_file: Any, kind: UploadKind, store: DepotStore) -> UploadOutcome:
    """
    Import a Streamlit UploadedFile (or any object with .name/.getbuffer())
    into the store through a temp copy on disk.

    The temp copy is removed whether writing, decoding or importing fails.
    """
    suffix = Path(uploaded_file.name).suffix.lower()
    tmp = tempfile.NamedTemporaryFile(delete=False, suffix=suffix)
    temp_path = Path(tmp.name)
    try:
        with tmp:
            tmp.write(uploaded_file.getbuffer())
        outcome = import_file(temp_path, kind, store)
    finally:
        temp_path.unlink(missing_ok=True)

    logger.info("Upload %s (%s): %s", uploaded_file.name, kind, outcome.message)
    return outcome

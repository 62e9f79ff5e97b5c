"""
Identifier generation for imported and uploaded records.

Ids are derived from a millisecond timestamp, plus the row ordinal for
records created in a batch. They are unique within one batch; two batches
started in the same millisecond would collide, which is acceptable for a
single-user in-memory dashboard.

Primary API:
- now_ms(): current wall-clock time in milliseconds
- import_id(timestamp_ms, index): id for the index-th record of an import batch
- requisition_id(timestamp_ms) / license_id(timestamp_ms): single-record ids
"""

from __future__ import annotations

import time
from dataclasses import dataclass


@dataclass(frozen=True)
class IdConfig:
    import_prefix: str = "imp"
    requisition_prefix: str = "req"
    license_prefix: str = "lic"


def now_ms() -> int:
    """Return the current time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def import_id(timestamp_ms: int, index: int, cfg: IdConfig = IdConfig()) -> str:
    """Format an import-batch id like 'imp-1760000000000-3'."""
    if index < 0:
        raise ValueError(f"Row index must be non-negative, got: {index}")
    return f"{cfg.import_prefix}-{timestamp_ms}-{index}"


def requisition_id(timestamp_ms: int, cfg: IdConfig = IdConfig()) -> str:
    return f"{cfg.requisition_prefix}-{timestamp_ms}"


def license_id(timestamp_ms: int, cfg: IdConfig = IdConfig()) -> str:
    return f"{cfg.license_prefix}-{timestamp_ms}"

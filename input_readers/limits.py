from __future__ import annotations

from pathlib import Path

from config import MAX_FILE_SIZE_MB


def check_file_size(path: Path) -> None:
    """Raise ValueError for uploads over MAX_FILE_SIZE_MB."""
    size_mb = path.stat().st_size / (1024 * 1024)
    if size_mb > MAX_FILE_SIZE_MB:
        raise ValueError(f"File is {size_mb:.1f} MB; the limit is {MAX_FILE_SIZE_MB} MB.")

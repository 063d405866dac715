"""
Content Collection

Parallel extraction of selected file bodies into FileRecords.
"""

import threading
from concurrent.futures import ThreadPoolExecutor, wait
from typing import Optional

from lingest.configs.constants import (
    DRY_RUN_CONTENT_TEMPLATE,
    READ_ERROR_MESSAGE,
    get_max_workers,
)
from lingest.configs.logging import get_logger
from lingest.ingest.patterns import FilterConfig
from lingest.ingest.walker import walk_files
from lingest.models import FileRecord

logger = get_logger("ingest.collector")


class RecordCollector:
    """Append-only, thread-safe sink for FileRecords."""

    def __init__(self):
        self._lock = threading.Lock()
        self._records: list[FileRecord] = []

    def add(self, record: FileRecord) -> None:
        with self._lock:
            self._records.append(record)

    def snapshot(self) -> list[FileRecord]:
        with self._lock:
            return list(self._records)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)


def read_file(abs_path: str, rel_path: str, dry_run: bool = False) -> FileRecord:
    """
    Produce the record for one file.

    In dry-run mode nothing is read. Otherwise the file is decoded strictly
    as UTF-8 with line endings left untouched; any read or decode failure
    yields an empty record carrying READ_ERROR_MESSAGE.

    Args:
        abs_path: Absolute path used for reading
        rel_path: Root-relative path stored in the record
        dry_run: Skip the read and return a placeholder

    Returns:
        FileRecord for the file
    """
    if dry_run:
        return FileRecord(path=rel_path, content=DRY_RUN_CONTENT_TEMPLATE.format(path=rel_path))

    try:
        with open(abs_path, "r", encoding="utf-8", errors="strict", newline="") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Could not read {rel_path}: {e}")
        return FileRecord(path=rel_path, content="", error=READ_ERROR_MESSAGE)

    return FileRecord(path=rel_path, content=content)


def collect_contents(
    root: str,
    filters: FilterConfig,
    dry_run: bool = False,
    max_workers: Optional[int] = None,
) -> tuple[list[FileRecord], int]:
    """
    Collect records for every selected file under root.

    Each file is read as an independent task on a thread pool. Records come
    back in no particular order.

    Args:
        root: Root directory to walk
        filters: Ignore/include patterns and excluded output path
        dry_run: Produce placeholders instead of reading files
        max_workers: Pool size (defaults to the CPU count)

    Returns:
        Tuple of (records, processed count)
    """
    collector = RecordCollector()

    def process(abs_path: str, rel_path: str) -> None:
        collector.add(read_file(abs_path, rel_path, dry_run))

    with ThreadPoolExecutor(max_workers=max_workers or get_max_workers()) as executor:
        futures = [
            executor.submit(process, abs_path, rel_path)
            for abs_path, rel_path in walk_files(root, filters)
        ]
        wait(futures)

    # Surface programming errors from the workers
    for future in futures:
        future.result()

    records = collector.snapshot()
    errors = sum(1 for r in records if r.error is not None)
    logger.debug(f"Collected {len(records)} files ({errors} unreadable)")
    return records, len(records)

"""
Codebase Walker

File system traversal with glob filtering.
"""

import os
from typing import Generator

from lingest.configs.logging import get_logger
from lingest.ingest.patterns import FilterConfig, lossy_name

logger = get_logger("ingest.walker")


def walk_files(root: str, filters: FilterConfig) -> Generator[tuple[str, str], None, None]:
    """
    Walk the whole tree yielding files to process.

    Only regular files are yielded; symbolic links are neither followed nor
    yielded. Directories are always descended: each file is judged by its
    own relative path. Unreadable directories are skipped. Names that are not
    valid UTF-8 are decoded lossily in the relative path.

    Args:
        root: Root directory to walk
        filters: Ignore/include patterns and excluded output path

    Yields:
        (absolute path, root-relative forward-slash path) for each selected file
    """
    root = os.path.abspath(root)
    pending = [(root, "")]

    while pending:
        directory, rel_dir = pending.pop()
        try:
            with os.scandir(directory) as it:
                entries = list(it)
        except OSError as e:
            logger.debug(f"Skipping unreadable directory {directory}: {e}")
            continue

        for entry in entries:
            name = lossy_name(entry.name)
            rel_path = f"{rel_dir}/{name}" if rel_dir else name
            try:
                if entry.is_dir(follow_symlinks=False):
                    pending.append((entry.path, rel_path))
                    continue
                if not entry.is_file(follow_symlinks=False):
                    continue
            except OSError:
                continue

            if filters.is_excluded(entry.path):
                continue
            if not filters.accepts_file(rel_path):
                continue

            yield entry.path, rel_path

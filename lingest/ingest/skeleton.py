"""
Project Skeleton Generation

Render the filtered directory structure as an ASCII tree.
"""

import os
from dataclasses import dataclass, field

from lingest.configs.constants import (
    BRANCH_CONNECTOR,
    CORNER_CONNECTOR,
    PIPE_INDENT,
    SPACE_INDENT,
)
from lingest.configs.logging import get_logger
from lingest.ingest.patterns import FilterConfig, lossy_name

logger = get_logger("ingest.skeleton")


@dataclass
class _Frame:
    """One directory being rendered."""

    entries: list[os.DirEntry]
    rel_dir: str
    prefix: str
    index: int = field(default=0)


def _is_dir(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        return False


def _is_file(entry: os.DirEntry) -> bool:
    try:
        return entry.is_file(follow_symlinks=False)
    except OSError:
        return False


def list_children(directory: str, filters: FilterConfig) -> list[os.DirEntry]:
    """
    Direct children of a directory in tree order.

    Directories come first, then everything else; each group is ordered by
    raw name. The output artifact is left out. An unreadable directory
    yields an empty list.
    """
    try:
        with os.scandir(directory) as it:
            entries = [e for e in it if not filters.is_excluded(e.path)]
    except OSError as e:
        logger.debug(f"Cannot list {directory}: {e}")
        return []

    entries.sort(key=lambda e: (not _is_dir(e), e.name))
    return entries


def generate_tree(root: str, filters: FilterConfig) -> str:
    """
    Generate tree text for a project directory.

    The connector of each entry is chosen against the unfiltered sibling
    listing, so when the last sibling is filtered out the entry above it
    keeps the branch connector.

    Args:
        root: Root directory path
        filters: Ignore/include patterns and excluded output path

    Returns:
        Tree text, one newline-terminated line per entry ("" if nothing renders)
    """
    root = os.path.abspath(root)
    lines: list[str] = []
    stack = [_Frame(list_children(root, filters), rel_dir="", prefix="")]

    while stack:
        frame = stack[-1]
        if frame.index >= len(frame.entries):
            stack.pop()
            continue

        index = frame.index
        frame.index += 1
        entry = frame.entries[index]

        name = lossy_name(entry.name)
        rel_path = f"{frame.rel_dir}/{name}" if frame.rel_dir else name
        is_last = index == len(frame.entries) - 1
        connector = CORNER_CONNECTOR if is_last else BRANCH_CONNECTOR

        if _is_dir(entry):
            if filters.should_ignore(rel_path):
                continue
            lines.append(f"{frame.prefix}{connector}{name}/\n")
            child_prefix = frame.prefix + (SPACE_INDENT if is_last else PIPE_INDENT)
            stack.append(_Frame(list_children(entry.path, filters), rel_dir=rel_path, prefix=child_prefix))
        elif _is_file(entry):
            if not filters.accepts_file(rel_path):
                continue
            lines.append(f"{frame.prefix}{connector}{name}\n")

    logger.debug(f"Tree rendered: {len(lines)} entries")
    return "".join(lines)

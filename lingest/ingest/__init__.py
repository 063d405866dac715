"""
Lingest Ingestion Core

Glob filtering, tree rendering, and parallel content collection.
"""

from lingest.ingest.collector import RecordCollector, collect_contents, read_file
from lingest.ingest.engine import check_root, process_directory
from lingest.ingest.patterns import (
    FilterConfig,
    compile_glob,
    matches,
    normalize_path,
    should_ignore,
    should_include,
)
from lingest.ingest.skeleton import generate_tree, list_children
from lingest.ingest.walker import walk_files

__all__ = [
    # Patterns
    "FilterConfig",
    "compile_glob",
    "matches",
    "normalize_path",
    "should_ignore",
    "should_include",
    # Skeleton
    "generate_tree",
    "list_children",
    # Walker
    "walk_files",
    # Collector
    "RecordCollector",
    "collect_contents",
    "read_file",
    # Engine
    "check_root",
    "process_directory",
]

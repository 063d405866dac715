"""
Ingestion Engine

Runs the tree and content passes for one request and assembles the result.
"""

import os
import time

from lingest.configs.logging import get_logger
from lingest.exceptions import RootAccessError
from lingest.ingest.collector import collect_contents
from lingest.ingest.patterns import FilterConfig
from lingest.ingest.skeleton import generate_tree
from lingest.models import IngestRequest, IngestResult

logger = get_logger("ingest.engine")


def check_root(root: str) -> str:
    """
    Make sure the root can be traversed at all.

    Returns:
        Absolute root path

    Raises:
        RootAccessError: If root is missing, not a directory, or not listable
    """
    abs_root = os.path.abspath(root)
    if not os.path.exists(abs_root):
        raise RootAccessError("Root directory does not exist", root=abs_root)
    if not os.path.isdir(abs_root):
        raise RootAccessError("Root path is not a directory", root=abs_root)
    try:
        with os.scandir(abs_root):
            pass
    except OSError as e:
        raise RootAccessError("Root directory cannot be opened", root=abs_root, reason=str(e)) from e
    return abs_root


def process_directory(request: IngestRequest) -> IngestResult:
    """
    Ingest a directory: optional tree text plus the selected file contents.

    Per-file and per-directory failures are reported inline; only an
    unusable root fails the call.

    Args:
        request: Root, exclusion path, globs and mode flags

    Returns:
        IngestResult with tree (None when suppressed) and file records

    Raises:
        RootAccessError: If the root cannot be traversed
    """
    start = time.time()
    root = check_root(request.root)
    filters = FilterConfig.build(
        root,
        request.output_path,
        ignore_patterns=request.ignore_patterns,
        include_patterns=request.include_patterns,
    )

    tree = None
    if not request.no_tree:
        tree = generate_tree(root, filters)

    records, processed_count = collect_contents(root, filters, dry_run=request.dry_run)

    result = IngestResult(tree=tree, files=tuple(records), processed_count=processed_count)
    elapsed = time.time() - start
    logger.info(
        f"Processed {processed_count} file(s) under {root} in {elapsed:.2f}s"
        + (f" ({result.error_count} unreadable)" if result.error_count else "")
        + (" [dry run]" if request.dry_run else "")
    )
    return result

"""
lingest

Turn a directory into one text artifact for LLM ingestion: a directory tree
plus the contents of the selected files.
"""

from lingest.ingest import process_directory
from lingest.models import FileRecord, IngestRequest, IngestResult

__version__ = "1.0.0"

__all__ = [
    "FileRecord",
    "IngestRequest",
    "IngestResult",
    "process_directory",
    "__version__",
]

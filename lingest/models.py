"""
Ingest Data Models

Request, per-file record, and result types passed between the host and the
ingest core.
"""

from dataclasses import dataclass, field
from typing import Optional

from pydantic import BaseModel, ConfigDict


class IngestRequest(BaseModel):
    """Everything one ingest run needs. Immutable once constructed."""

    model_config = ConfigDict(frozen=True)

    root: str
    output_path: str
    ignore_patterns: tuple[str, ...] = ()
    include_patterns: tuple[str, ...] = ()
    no_tree: bool = False
    dry_run: bool = False


@dataclass(frozen=True)
class FileRecord:
    """Content of one selected file, or the reason it could not be read."""

    path: str
    content: str = ""
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class IngestResult:
    """Combined output of the tree and content passes."""

    tree: Optional[str]
    files: tuple[FileRecord, ...] = field(default_factory=tuple)
    processed_count: int = 0

    @property
    def error_count(self) -> int:
        return sum(1 for f in self.files if f.error is not None)

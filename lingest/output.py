"""
Output Formatting

Turns an IngestResult into the text artifact (or a dry-run preview) and
writes it to disk.
"""

from pathlib import Path

from lingest.configs.constants import EMPTY_OUTPUT_PLACEHOLDER, SECTION_RULE
from lingest.configs.logging import get_logger
from lingest.exceptions import OutputExistsError, OutputWriteError
from lingest.models import FileRecord, IngestResult

logger = get_logger("output")


def _sorted_files(result: IngestResult) -> list[FileRecord]:
    return sorted(result.files, key=lambda f: f.path)


def format_file_block(record: FileRecord) -> str:
    """Header plus body (or the read error) for one file."""
    header = f"{SECTION_RULE}\nFILE: {record.path}\n{SECTION_RULE}"
    if record.error:
        return f"{header}\n[Content not included: {record.error}]"
    return f"{header}\n{record.content}"


def format_output(result: IngestResult, no_tree: bool = False) -> str:
    """
    Render the full artifact text.

    Files are written in path order so that the artifact is stable across
    runs even though collection order is not.

    Args:
        result: Ingest result
        no_tree: Leave out the directory structure section

    Returns:
        Artifact text
    """
    parts: list[str] = []

    if result.tree and not no_tree:
        parts.append(f"Directory Structure:\n{SECTION_RULE}\n{result.tree.strip()}\n{SECTION_RULE}")

    if result.processed_count > 0:
        content_section = "\n\n".join(format_file_block(f) for f in _sorted_files(result))
        separator = "\n\n" if parts else ""
        parts.append(f"{separator}File Contents:\n{SECTION_RULE}\n{content_section}\n{SECTION_RULE}")

    return "".join(parts).strip() or EMPTY_OUTPUT_PLACEHOLDER


def format_dry_run_summary(result: IngestResult, output_path: str, no_tree: bool = False) -> str:
    """Preview of what a real run would write."""
    lines = ["", "[Dry Run] --- Summary ---"]

    if not no_tree and result.tree:
        lines.append(
            f"[Dry Run] Directory Structure Preview:\n{SECTION_RULE}\n{result.tree}\n{SECTION_RULE}"
        )
    elif not no_tree:
        lines.append("[Dry Run] No directory structure to include based on rules, or --no-tree specified.")

    if result.processed_count > 0:
        lines.append("")
        lines.append(f"[Dry Run] Would include content from {result.processed_count} file(s):")
        lines.extend(f"FILE: {f.path}" for f in _sorted_files(result))
    else:
        lines.append("[Dry Run] No files would be processed for content based on rules.")

    lines.append(f"[Dry Run] Output would be saved to: {output_path}")
    return "\n".join(lines)


def write_output(output_path: str, text: str, force: bool = False) -> Path:
    """
    Write the artifact.

    Args:
        output_path: Destination file
        text: Artifact text
        force: Overwrite an existing file

    Returns:
        Path written

    Raises:
        OutputExistsError: If the file exists and force is False
        OutputWriteError: If the file cannot be written
    """
    path = Path(output_path)
    if path.exists() and not force:
        raise OutputExistsError(
            f"Output file {path} exists. Use --force to overwrite.",
            {"path": str(path)},
        )

    # Encode before opening so a failure leaves no partial file
    try:
        data = text.encode("utf-8")
    except UnicodeError as e:
        raise OutputWriteError(f"Cannot encode output for {path}: {e}", {"path": str(path)}) from e

    try:
        path.write_bytes(data)
    except OSError as e:
        raise OutputWriteError(f"Cannot write {path}: {e}", {"path": str(path)}) from e

    logger.debug(f"Wrote {len(data)} bytes to {path}")
    return path

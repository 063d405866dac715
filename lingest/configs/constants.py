"""
Lingest Constants

Static values shared by the ingest core and the command line: default
artifact name, placeholder and diagnostic strings, worker pool sizing.
"""

import os

# --- Output ---

DEFAULT_OUTPUT_FILENAME = "lingest_output.md"
PROJECT_CONFIG_FILENAME = ".lingest.yaml"

# --- Content Collection ---

DRY_RUN_CONTENT_TEMPLATE = "[Dry Run] Content of {path} would be here."
READ_ERROR_MESSAGE = "Could not be read as UTF-8 text. Might be binary or encoding issue."

# --- Tree Rendering ---

BRANCH_CONNECTOR = "├── "
CORNER_CONNECTOR = "└── "
PIPE_INDENT = "│   "
SPACE_INDENT = "    "

# --- Output Sections ---

SECTION_RULE = "=" * 48
EMPTY_OUTPUT_PLACEHOLDER = "# No content generated."


def get_max_workers() -> int:
    """Worker pool size for content collection (one per available CPU)."""
    return os.cpu_count() or 1

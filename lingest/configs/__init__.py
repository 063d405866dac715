"""
Lingest Configuration Module

Re-exports commonly used functions for cleaner imports across the codebase.
"""

# Logging (most commonly used)
from lingest.configs.logging import get_logger, setup_logging

# Constants
from lingest.configs.constants import (
    DEFAULT_OUTPUT_FILENAME,
    DRY_RUN_CONTENT_TEMPLATE,
    PROJECT_CONFIG_FILENAME,
    READ_ERROR_MESSAGE,
    get_max_workers,
)

# Ignore patterns
from lingest.configs.ignore_patterns import (
    DEFAULT_IGNORE_GLOBS,
    build_ignore_globs,
    parse_glob_list,
)

# YAML config
from lingest.configs.yaml_config import (
    create_default_config,
    get_config_path,
    load_yaml_config,
)

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    # Constants
    "DEFAULT_OUTPUT_FILENAME",
    "DRY_RUN_CONTENT_TEMPLATE",
    "PROJECT_CONFIG_FILENAME",
    "READ_ERROR_MESSAGE",
    "get_max_workers",
    # Ignore patterns
    "DEFAULT_IGNORE_GLOBS",
    "build_ignore_globs",
    "parse_glob_list",
    # YAML config
    "create_default_config",
    "get_config_path",
    "load_yaml_config",
]

"""
Lingest YAML Configuration

Loading of the optional per-project ``.lingest.yaml`` file.
"""

from pathlib import Path
from typing import Any

import yaml

from lingest.configs.constants import PROJECT_CONFIG_FILENAME
from lingest.configs.ignore_patterns import parse_glob_list
from lingest.configs.logging import get_logger
from lingest.exceptions import ConfigFileError

logger = get_logger("config")

# --- Project Config Template ---

DEFAULT_CONFIG_YAML = """\
# lingest project configuration
# Command-line options take precedence over these values.

# Output file name (relative to the project root)
output: lingest_output.md

# Extra ignore globs, added to the built-in defaults
ignore:
  # - "**/*.snap"

# If set, only files matching these globs are ingested
include:
  # - "src/**"

# Skip the directory tree section
no_tree: false

# Apply the built-in ignore globs
use_default_ignores: true
"""

KNOWN_KEYS = {"output", "ignore", "include", "no_tree", "use_default_ignores"}


def get_config_path(root: str) -> Path:
    """Get the path to the project config file."""
    return Path(root) / PROJECT_CONFIG_FILENAME


def _as_glob_list(value: Any, key: str, path: Path) -> list[str]:
    """Accept a YAML list or a comma-separated string."""
    if value is None:
        return []
    if isinstance(value, str):
        return parse_glob_list(value)
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return [v for v in value if v.strip()]
    raise ConfigFileError(f"'{key}' must be a list of globs or a comma-separated string", str(path))


def load_yaml_config(root: str) -> dict:
    """
    Load configuration from <root>/.lingest.yaml.

    Args:
        root: Project root directory

    Returns:
        Normalized configuration dictionary (empty if the file doesn't exist)

    Raises:
        ConfigFileError: If the file is not valid YAML or not a mapping
    """
    config_path = get_config_path(root)
    if not config_path.is_file():
        return {}

    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigFileError(f"Invalid YAML: {e}", str(config_path)) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigFileError(f"Cannot read config file: {e}", str(config_path)) from e

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigFileError("Config file must contain a mapping", str(config_path))

    unknown = sorted(str(k) for k in raw if k not in KNOWN_KEYS)
    if unknown:
        logger.warning(f"Ignoring unknown config keys in {config_path}: {', '.join(unknown)}")

    config: dict = {}
    if raw.get("output") is not None:
        if not isinstance(raw["output"], str):
            raise ConfigFileError("'output' must be a string", str(config_path))
        config["output"] = raw["output"]
    if "ignore" in raw:
        config["ignore"] = _as_glob_list(raw["ignore"], "ignore", config_path)
    if "include" in raw:
        config["include"] = _as_glob_list(raw["include"], "include", config_path)
    for flag in ("no_tree", "use_default_ignores"):
        if raw.get(flag) is not None:
            if not isinstance(raw[flag], bool):
                raise ConfigFileError(f"'{flag}' must be true or false", str(config_path))
            config[flag] = raw[flag]

    logger.debug(f"Loaded project config from {config_path}")
    return config


def create_default_config(root: str) -> bool:
    """
    Create a default .lingest.yaml if it doesn't exist.

    Returns:
        True if file was created, False if it already exists
    """
    config_path = get_config_path(root)
    if config_path.exists():
        return False

    try:
        config_path.write_text(DEFAULT_CONFIG_YAML, encoding="utf-8")
    except OSError as e:
        raise ConfigFileError(f"Cannot write config: {e}", str(config_path)) from e
    logger.info(f"Created {config_path}")
    return True

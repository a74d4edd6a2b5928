"""
Configuration loader — reads .suitegen.yml into the config model.

The file is optional.  When present it supplies defaults for the API
version, script type, module list and copyright file; CLI options
always win over it.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from suitegen.core.models.config import SuitegenConfig

logger = logging.getLogger(__name__)

# Default config filename
CONFIG_FILE = ".suitegen.yml"


class ConfigError(Exception):
    """Raised when the generator configuration is unreadable or invalid."""


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for .suitegen.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to .suitegen.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_config(path: Path | None = None) -> SuitegenConfig:
    """Load and validate generator configuration.

    Args:
        path: Explicit path to .suitegen.yml.  If None, searches upward
            from the cwd; if nothing is found, returns the empty config.

    Returns:
        Validated SuitegenConfig.

    Raises:
        ConfigError: If an explicit file is missing, or any file is invalid.
    """
    if path is None:
        path = find_config_file()
        if path is None:
            logger.debug("No %s found, using built-in defaults", CONFIG_FILE)
            return SuitegenConfig()

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        config = SuitegenConfig.model_validate(data)
    except Exception as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e

    config.root = path.parent.resolve()
    logger.info("Loaded config from %s", path)
    return config

"""
Config check use case — validate .suitegen.yml and report issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from suitegen.core.config.loader import ConfigError, find_config_file, load_config
from suitegen.core.models.config import SuitegenConfig
from suitegen.core.services.validation import (
    ValidationError,
    validate_api_version,
    validate_copyright_path,
    validate_modules,
    validate_script_type,
)


@dataclass
class ConfigCheckResult:
    """Result of configuration validation."""

    valid: bool = False
    config: SuitegenConfig | None = None
    config_path: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "defaults": self.config.defaults.model_dump() if self.config else None,
        }


def check_config(config_path: Path | None = None) -> ConfigCheckResult:
    """Validate generator configuration and report issues.

    The default values are run through the same validators as CLI input,
    so a bad default fails here instead of on the next ``suitegen new``.

    Args:
        config_path: Optional explicit path to .suitegen.yml.

    Returns:
        ConfigCheckResult with validation status and any issues.
    """
    result = ConfigCheckResult()

    if config_path is None:
        config_path = find_config_file()

    if config_path is None:
        result.errors.append("No .suitegen.yml found.")
        return result

    result.config_path = config_path

    try:
        config = load_config(config_path)
        result.config = config
    except ConfigError as e:
        result.errors.append(str(e))
        return result

    defaults = config.defaults
    checks = [
        ("script_type", validate_script_type, defaults.script_type),
        ("modules", validate_modules, defaults.modules),
        ("copyright", validate_copyright_path, defaults.copyright),
    ]
    if defaults.api_version is not None:
        checks.append(("api_version", validate_api_version, defaults.api_version))

    for key, check, value in checks:
        try:
            check(value)
        except ValidationError as e:
            result.errors.append(f"defaults.{key}: {e}")

    copyright_path = config.copyright_path()
    if copyright_path and not Path(copyright_path).is_file():
        result.warnings.append(f"Copyright file does not exist: {copyright_path}")

    if defaults.api_version is None:
        result.warnings.append("No default api_version set; the built-in default will be used.")

    result.valid = len(result.errors) == 0
    return result

"""
Config check use case — validate voschema.yml and report issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from voschema.core.config.loader import CONFIG_FILE, ConfigError, find_config_file, load_config
from voschema.core.models.config import (
    GeneratorConfig,
    SchemaGeneration,
    effective_schema_generation,
)


@dataclass
class ConfigCheckResult:
    """Result of configuration validation."""

    valid: bool = False
    config: GeneratorConfig | None = None
    config_path: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        selector = effective_schema_generation(self.config) if self.config else None
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "swashbuckle_schema_generation": str(selector) if selector else None,
        }


def check_config(config_path: Path | None = None) -> ConfigCheckResult:
    """Validate generator configuration and report issues.

    Args:
        config_path: Optional explicit path to voschema.yml.

    Returns:
        ConfigCheckResult with validation status and any issues.
    """
    result = ConfigCheckResult()

    if config_path is None:
        config_path = find_config_file()

    if config_path is None:
        result.warnings.append(
            f"No {CONFIG_FILE} found. Swashbuckle schema generation is disabled by default."
        )
    result.config_path = config_path

    try:
        config = load_config(config_path)
    except ConfigError as e:
        result.errors.append(str(e))
        return result

    result.config = config

    if (
        config_path is not None
        and config.swashbuckle_schema_generation is None
    ):
        result.warnings.append(
            "swashbuckle_schema_generation is not set; using "
            f"'{SchemaGeneration.DO_NOT_GENERATE}'."
        )

    result.valid = len(result.errors) == 0
    return result

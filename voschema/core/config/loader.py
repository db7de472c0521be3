"""
Configuration loader — reads voschema.yml and generator inputs.

Reads YAML, validates against Pydantic schemas, and returns typed
domain objects. JSON input works too, since YAML is a superset.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from voschema.core.models.compilation import Compilation
from voschema.core.models.config import DEFAULT_CONFIG, GeneratorConfig
from voschema.core.models.work_item import WorkItem

logger = logging.getLogger(__name__)

# Default config filename
CONFIG_FILE = "voschema.yml"


class ConfigError(Exception):
    """Raised when a configuration or input file is invalid or missing."""


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for voschema.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to voschema.yml, or None if not found.
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


def _read_yaml(path: Path) -> Any:
    if not path.is_file():
        raise ConfigError(f"File not found: {path}")

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e


def load_config(path: Path | None = None) -> GeneratorConfig:
    """Load the global generator configuration.

    Args:
        path: Explicit path to voschema.yml. If None, searches upward.

    Returns:
        Validated GeneratorConfig. ``DEFAULT_CONFIG`` when no file is
        found by the upward search or the file is empty.

    Raises:
        ConfigError: If an explicit path is missing, or the file is invalid.
    """
    if path is None:
        path = find_config_file()
        if path is None:
            logger.debug("No %s found, using defaults", CONFIG_FILE)
            return DEFAULT_CONFIG

    logger.debug("Loading generator config from %s", path)
    data = _read_yaml(path)

    if data is None:
        return DEFAULT_CONFIG

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # The YAML may wrap everything under a "voschema" key or be flat
    if "voschema" in data:
        data = data["voschema"] or {}
        if not isinstance(data, dict):
            raise ConfigError(f"Expected a mapping under 'voschema' in {path}")

    try:
        config = GeneratorConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid generator configuration in {path}: {e}") from e

    logger.info(
        "Loaded generator config: swashbuckle_schema_generation=%s",
        config.swashbuckle_schema_generation,
    )
    return config


def load_work_items(path: Path) -> list[WorkItem]:
    """Load discovered value objects from a YAML/JSON list.

    Accepts either a bare list or a mapping with a ``work_items`` key.
    Order is preserved and duplicates are kept.

    Raises:
        ConfigError: If the file is missing or malformed.
    """
    data = _read_yaml(path)

    if data is None:
        return []

    if isinstance(data, dict):
        if "work_items" not in data:
            raise ConfigError(f"Expected a list or a 'work_items' key in {path}")
        data = data["work_items"]
        if data is None:
            return []

    if not isinstance(data, list):
        raise ConfigError(f"Expected a list of work items in {path}, got {type(data).__name__}")

    items: list[WorkItem] = []
    for index, entry in enumerate(data):
        try:
            items.append(WorkItem.model_validate(entry))
        except ValidationError as e:
            raise ConfigError(f"Invalid work item #{index} in {path}: {e}") from e

    logger.info("Loaded %d work items from %s", len(items), path)
    return items


def load_compilation(path: Path) -> Compilation:
    """Load a compilation's referenced-type list.

    Raises:
        ConfigError: If the file is missing or malformed.
    """
    data = _read_yaml(path)

    if data is None:
        return Compilation()

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        compilation = Compilation.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid compilation description in {path}: {e}") from e

    logger.debug(
        "Loaded compilation '%s' with %d referenced types",
        compilation.assembly_name,
        len(compilation.referenced_types),
    )
    return compilation

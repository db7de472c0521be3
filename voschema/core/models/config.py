"""
Generator configuration — the global emission strategy.

Loaded from voschema.yml by the config loader. An absent file, or an
absent field, falls back to ``DEFAULT_CONFIG``.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class SchemaGeneration(StrEnum):
    """Which Swashbuckle artifact to emit, if any."""

    DO_NOT_GENERATE = "do-not-generate"
    GENERATE_SCHEMA_FILTER = "generate-schema-filter"
    GENERATE_EXTENSION_METHOD = "generate-extension-method"


class GeneratorConfig(BaseModel):
    """Global generator configuration (one per compilation)."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    swashbuckle_schema_generation: SchemaGeneration | None = None


DEFAULT_CONFIG = GeneratorConfig(
    swashbuckle_schema_generation=SchemaGeneration.DO_NOT_GENERATE,
)


def effective_schema_generation(config: GeneratorConfig | None) -> SchemaGeneration:
    """Resolve the selector, using the default when config or field is absent."""
    if config is not None and config.swashbuckle_schema_generation is not None:
        return config.swashbuckle_schema_generation
    assert DEFAULT_CONFIG.swashbuckle_schema_generation is not None
    return DEFAULT_CONFIG.swashbuckle_schema_generation

"""
Domain models — Pydantic types for the schema synthesizer.

All models are re-exported here for convenient access:

    from voschema.core.models import Artifact, Compilation, GeneratorConfig, WorkItem
"""

from voschema.core.models.artifact import Artifact
from voschema.core.models.compilation import Compilation
from voschema.core.models.config import (
    DEFAULT_CONFIG,
    GeneratorConfig,
    SchemaGeneration,
    effective_schema_generation,
)
from voschema.core.models.work_item import WorkItem

__all__ = [
    # artifact.py
    "Artifact",
    # compilation.py
    "Compilation",
    # config.py
    "DEFAULT_CONFIG",
    "GeneratorConfig",
    "SchemaGeneration",
    # work_item.py
    "WorkItem",
    "effective_schema_generation",
]

"""
Synthesizer — decide which Swashbuckle artifact, if any, to emit.

    selector ─┬─ do-not-generate            → nothing
              ├─ generate-schema-filter     → probe → schema filter
              └─ generate-extension-method  → probe → MapVogenTypes extension

A failed capability probe yields nothing in either branch. Every input
maps to a result; nothing here raises.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from voschema.core.models.artifact import Artifact
from voschema.core.models.config import (
    GeneratorConfig,
    SchemaGeneration,
    effective_schema_generation,
)
from voschema.core.models.work_item import WorkItem
from voschema.core.services.capability import SymbolTable, has_schema_framework
from voschema.core.services.generators.schema_extensions import generate_schema_extensions
from voschema.core.services.generators.schema_filter import generate_schema_filter
from voschema.core.services.sink import SourceSink

logger = logging.getLogger(__name__)


def synthesize(
    config: GeneratorConfig | None,
    compilation: SymbolTable,
    work_items: Iterable[WorkItem],
) -> Artifact | None:
    """Produce the artifact selected by ``config``.

    Args:
        config: Global configuration, or None to use the default.
        compilation: Symbol table of the compilation being generated for.
        work_items: Discovered value objects, in declaration order.

    Returns:
        The artifact, or None when generation is disabled or Swashbuckle
        is not referenced.
    """
    selector = effective_schema_generation(config)

    match selector:
        case SchemaGeneration.GENERATE_SCHEMA_FILTER:
            if not has_schema_framework(compilation):
                return None
            artifact = generate_schema_filter()
        case SchemaGeneration.GENERATE_EXTENSION_METHOD:
            if not has_schema_framework(compilation):
                return None
            artifact = generate_schema_extensions(work_items)
        case _:
            return None

    logger.debug("Synthesized %s (%s)", artifact.name, selector)
    return artifact


def write_if_needed(
    config: GeneratorConfig | None,
    sink: SourceSink,
    compilation: SymbolTable,
    work_items: Iterable[WorkItem],
) -> Artifact | None:
    """Synthesize and hand the result, if any, to ``sink``."""
    artifact = synthesize(config, compilation, work_items)
    if artifact is not None:
        sink.add_source(artifact.name, artifact.content, artifact.reason)
    return artifact

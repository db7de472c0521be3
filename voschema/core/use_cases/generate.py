"""
Generate use case — load inputs, synthesize, hand off the artifact.

Ties together config loading, the synthesizer, and the source sink.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from voschema.core.config.loader import (
    ConfigError,
    load_compilation,
    load_config,
    load_work_items,
)
from voschema.core.models.artifact import Artifact
from voschema.core.models.config import SchemaGeneration, effective_schema_generation
from voschema.core.services.capability import has_schema_framework
from voschema.core.services.sink import SourceSink
from voschema.core.services.synthesizer import write_if_needed

logger = logging.getLogger(__name__)


@dataclass
class GenerateResult:
    """Result of the generate use case."""

    selector: SchemaGeneration | None = None
    framework_referenced: bool = False
    work_item_count: int = 0
    artifact: Artifact | None = None
    written: list[dict] = field(default_factory=list)
    error: str | None = None

    def to_dict(self) -> dict:
        result: dict = {}
        if self.error:
            result["error"] = self.error
            return result

        result["selector"] = str(self.selector) if self.selector else None
        result["framework_referenced"] = self.framework_referenced
        result["work_items"] = self.work_item_count
        result["artifact"] = self.artifact.model_dump() if self.artifact else None
        if self.written:
            result["written"] = self.written
        return result


def run_generate(
    config_path: Path | None,
    work_items_path: Path,
    compilation_path: Path,
    output_dir: Path | None = None,
    overwrite: bool = False,
) -> GenerateResult:
    """Run one synthesis pass from files on disk.

    Args:
        config_path: Optional explicit path to voschema.yml.
        work_items_path: YAML/JSON list of discovered value objects.
        compilation_path: YAML/JSON description of referenced types.
        output_dir: Where to write the artifact, if anywhere.
        overwrite: Replace an existing artifact file in ``output_dir``.

    Returns:
        GenerateResult. Loader failures are reported in ``error``.
    """
    result = GenerateResult()

    try:
        config = load_config(config_path)
        work_items = load_work_items(work_items_path)
        compilation = load_compilation(compilation_path)
    except ConfigError as e:
        result.error = str(e)
        return result

    result.selector = effective_schema_generation(config)
    result.framework_referenced = has_schema_framework(compilation)
    result.work_item_count = len(work_items)

    sink = SourceSink()
    result.artifact = write_if_needed(config, sink, compilation, work_items)

    if output_dir is not None and len(sink):
        result.written = sink.write_to(output_dir, overwrite=overwrite)

    return result

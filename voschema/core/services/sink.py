"""
Source sink — the host's "add generated source" channel.

Collects artifacts for one generation run under their hint names and
optionally writes them to an output directory.
"""

from __future__ import annotations

import logging
from pathlib import Path

from voschema.core.models.artifact import Artifact

logger = logging.getLogger(__name__)


class DuplicateSourceError(ValueError):
    """Raised when a hint name is added twice in the same run."""


class SourceSink:
    """Ordered, write-once collection of generated sources."""

    def __init__(self) -> None:
        self._sources: dict[str, Artifact] = {}

    def add_source(self, name: str, content: str, reason: str = "") -> None:
        """Record a generated source under ``name``.

        Raises:
            DuplicateSourceError: If ``name`` was already added.
        """
        if name in self._sources:
            raise DuplicateSourceError(f"Source already added: {name}")
        self._sources[name] = Artifact(name=name, content=content, reason=reason)
        logger.debug("Added source %s (%d chars)", name, len(content))

    @property
    def artifacts(self) -> list[Artifact]:
        return list(self._sources.values())

    def __len__(self) -> int:
        return len(self._sources)

    def __contains__(self, name: object) -> bool:
        return name in self._sources

    def get(self, name: str) -> str | None:
        artifact = self._sources.get(name)
        return artifact.content if artifact else None

    def write_to(self, directory: Path, *, overwrite: bool = False) -> list[dict]:
        """Write every source into ``directory``.

        Existing files are left untouched unless ``overwrite`` is set.

        Returns:
            One ``{"path", "written"}`` dict per source, plus ``"error"``
            for files that were skipped.
        """
        directory.mkdir(parents=True, exist_ok=True)
        results: list[dict] = []

        for name, artifact in self._sources.items():
            target = directory / name
            if target.exists() and not overwrite:
                results.append({
                    "path": str(target),
                    "written": False,
                    "error": f"File already exists: {name} (use overwrite to replace)",
                })
                continue

            target.write_text(artifact.content, encoding="utf-8")
            logger.info("Wrote generated source: %s", target)
            results.append({"path": str(target), "written": True})

        return results

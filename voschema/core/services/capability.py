"""
Capability probe — is Swashbuckle referenced by the compilation?

Both Swashbuckle artifacts only compile against a project that
references the schema-filter interface, so synthesis is skipped
entirely when the symbol does not resolve.
"""

from __future__ import annotations

from typing import Protocol

SCHEMA_FILTER_INTERFACE = "Swashbuckle.AspNetCore.SwaggerGen.ISchemaFilter"


class SymbolTable(Protocol):
    """Anything that can resolve a fully qualified metadata name."""

    def get_type_by_metadata_name(self, name: str) -> object | None: ...


def has_schema_framework(compilation: SymbolTable) -> bool:
    """True when the schema-filter interface resolves in ``compilation``."""
    return compilation.get_type_by_metadata_name(SCHEMA_FILTER_INTERFACE) is not None

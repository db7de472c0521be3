"""
Compilation model — the symbol table the capability probe queries.

Only fully qualified metadata names are tracked. A type "resolves"
when its name is among the compilation's referenced types.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Compilation(BaseModel):
    """Referenced-type view of one compilation."""

    model_config = ConfigDict(frozen=True)

    assembly_name: str = ""
    referenced_types: frozenset[str] = Field(default_factory=frozenset)

    def get_type_by_metadata_name(self, name: str) -> str | None:
        """Resolve a fully qualified type name, or None if not referenced."""
        if name in self.referenced_types:
            return name
        return None

"""
Type mapper — underlying primitive → JSON-schema type keyword.

Keys are CLR canonical names as reported by the declaration scanner.
Anything not in the table maps to ``object`` so an unusual primitive
never fails the compilation.
"""

from __future__ import annotations

from types import MappingProxyType

FALLBACK_KEYWORD = "object"

_JSON_SCHEMA_TYPES = MappingProxyType({
    "System.Int32": "integer",
    "System.Single": "number",
    "System.Decimal": "number",
    "System.Double": "number",
    "System.String": "string",
    "System.Boolean": "boolean",
})


def map_underlying_type_to_json_schema(primitive_type: str) -> str:
    """Return the JSON-schema ``type`` keyword for a primitive type name."""
    return _JSON_SCHEMA_TYPES.get(primitive_type, FALLBACK_KEYWORD)


def supported_types() -> list[str]:
    """Return primitive type names with an explicit mapping."""
    return sorted(_JSON_SCHEMA_TYPES.keys())


def json_schema_keywords() -> tuple[str, ...]:
    """Every keyword the mapper can return, fallback last."""
    seen = dict.fromkeys(_JSON_SCHEMA_TYPES.values())
    return (*seen, FALLBACK_KEYWORD)

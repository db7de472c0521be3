"""
Schema extensions generator — explicit MapType registrations.

Produces ``VogenSwashbuckleExtensions.MapVogenTypes``, an extension
method on ``SwaggerGenOptions`` that registers one schema per value
object and returns the options for chaining.

Registration lines follow the order of the work items. Duplicates are
kept: registering the same mapping twice is harmless.
"""

from __future__ import annotations

from collections.abc import Iterable

from voschema.core.models.artifact import Artifact
from voschema.core.models.work_item import WorkItem
from voschema.core.services.generators.preamble import PREAMBLE
from voschema.core.services.type_mapper import map_underlying_type_to_json_schema

SCHEMA_EXTENSIONS_HINT_NAME = "SwashbuckleSchemaExtensions_g.cs"

_BODY_INDENT = " " * 8


def _registration_line(item: WorkItem) -> str:
    """One MapType call binding the value object to its schema type."""
    keyword = map_underlying_type_to_json_schema(item.underlying_type_name)
    return (
        "global::Microsoft.Extensions.DependencyInjection.SwaggerGenOptionsExtensions"
        f".MapType<{item.type_name}>(o, () => new global::Microsoft.OpenApi.Models.OpenApiSchema"
        f' {{ Type = "{keyword}" }});'
    )


def format_work_items(work_items: Iterable[WorkItem]) -> str:
    """Render the registration lines for ``MapVogenTypes``.

    Each line is indented to the method body and newline-terminated.
    An empty input gives an empty string.
    """
    return "".join(
        f"{_BODY_INDENT}{_registration_line(item)}\n" for item in work_items
    )


def generate_schema_extensions(work_items: Iterable[WorkItem]) -> Artifact:
    """Generate the ``VogenSwashbuckleExtensions`` source file.

    Args:
        work_items: Discovered value objects, in the order to register them.

    Returns:
        Artifact named ``SwashbuckleSchemaExtensions_g.cs``.
    """
    items = list(work_items)
    registrations = format_work_items(items)

    content = f"""\

{PREAMBLE}

public static class VogenSwashbuckleExtensions
{{
    public static global::Swashbuckle.AspNetCore.SwaggerGen.SwaggerGenOptions MapVogenTypes(this global::Swashbuckle.AspNetCore.SwaggerGen.SwaggerGenOptions o)
    {{
{registrations}
        return o;
    }}
}}
"""

    return Artifact(
        name=SCHEMA_EXTENSIONS_HINT_NAME,
        content=content,
        reason=f"Generated Swashbuckle type mappings for {len(items)} value object(s)",
    )

"""
Schema filter generator — a reflection-based Swashbuckle ISchemaFilter.

The emitted filter does its work when the consuming application builds
its OpenAPI document, not at synthesis time, so the output does not
depend on the discovered value objects:

1. Types without ``[ValueObject<T>]`` are left alone.
2. For ``[ValueObject<T>]`` types, a schema is generated for ``T``.
3. Every public instance property of that schema is copied onto the
   value object's own schema (same-reference schemas are left as they are).

A destination property with no same-named property on the source
schema throws ``InvalidOperationException`` at the application's
runtime. Synthesis cannot detect that case.
"""

from __future__ import annotations

from voschema.core.models.artifact import Artifact
from voschema.core.services.generators.preamble import PREAMBLE

SCHEMA_FILTER_HINT_NAME = "SwashbuckleSchemaFilter_g.cs"

_SCHEMA_FILTER_BODY = """\
using System.Reflection;

public class VogenSchemaFilter : global::Swashbuckle.AspNetCore.SwaggerGen.ISchemaFilter
{
    private const BindingFlags _flags = BindingFlags.Public | BindingFlags.Instance;

    public void Apply(global::Microsoft.OpenApi.Models.OpenApiSchema schema, global::Swashbuckle.AspNetCore.SwaggerGen.SchemaFilterContext context)
    {
        if (context.Type.GetCustomAttribute<Vogen.ValueObjectAttribute>() is not { } attribute)
            return;

        var type = attribute.GetType();
        if (!type.IsGenericType || type.GenericTypeArguments.Length != 1)
        {
            return;
        }

        var schemaValueObject = context.SchemaGenerator.GenerateSchema(
            type.GenericTypeArguments[0],
            context.SchemaRepository,
            context.MemberInfo, context.ParameterInfo);

        TryCopyPublicProperties(schemaValueObject, schema);
    }

    private static void TryCopyPublicProperties<T>(T oldObject, T newObject) where T : class
    {
        if (ReferenceEquals(oldObject, newObject))
        {
            return;
        }

        var type = typeof(T);

        var propertyList = type.GetProperties(_flags);

        if (propertyList.Length <= 0)
        {
            return;
        }

        foreach (var newObjProp in propertyList)
        {
            var oldProp = type.GetProperty(newObjProp.Name, _flags)
                ?? throw new global::System.InvalidOperationException(
                    $"Cannot copy schema property '{newObjProp.Name}': no public instance property with that name on {type.FullName}.");

            if (!oldProp.CanRead || !newObjProp.CanWrite)
            {
                continue;
            }

            var value = oldProp.GetValue(oldObject);
            newObjProp.SetValue(newObject, value);
        }
    }
}
"""


def generate_schema_filter() -> Artifact:
    """Generate the ``VogenSchemaFilter`` source file.

    Returns:
        Artifact named ``SwashbuckleSchemaFilter_g.cs``.
    """
    content = "\n" + PREAMBLE + "\n\n" + _SCHEMA_FILTER_BODY

    return Artifact(
        name=SCHEMA_FILTER_HINT_NAME,
        content=content,
        reason="Generated Swashbuckle schema filter for value objects",
    )

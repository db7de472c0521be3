"""
Shared header prepended to every generated source file.
"""

PREAMBLE = """\
// ------------------------------------------------------------------------------
// <auto-generated>
//     This code was generated by a source generator named Vogen.
//
//     Changes to this file may cause incorrect behavior and will be lost if
//     the code is regenerated.
// </auto-generated>
// ------------------------------------------------------------------------------

// Suppress warnings about [Obsolete] member usage in generated code.
#pragma warning disable CS0618

// Suppress warnings for 'Override methods on comparable types'.
#pragma warning disable CA1036

// Suppress warning for nullable annotations outside a '#nullable' context.
#pragma warning disable CS8669

// Suppress warnings about missing XML comments on public members.
#pragma warning disable CS1591"""

"""
voschema — CLI entrypoint.

Usage:
    python -m voschema.main --help
    python -m voschema.main generate --work-items items.yml --compilation refs.yml
    python -m voschema.main config check
    python -m voschema.main map-type System.Int32
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from voschema import __version__
from voschema.core.observability.logging_config import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="voschema")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to voschema.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """Swashbuckle schema synthesizer for value objects."""
    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("VOSCHEMA_LOG_LEVEL", "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get("VOSCHEMA_LOG_FILE"),
        log_file_level=os.environ.get("VOSCHEMA_LOG_FILE_LEVEL"),
    )


@cli.command()
@click.option(
    "--work-items",
    "-w",
    "work_items_path",
    type=click.Path(exists=False, dir_okay=False),
    required=True,
    help="YAML/JSON list of discovered value objects.",
)
@click.option(
    "--compilation",
    "compilation_path",
    type=click.Path(exists=False, dir_okay=False),
    required=True,
    help="YAML/JSON list of the compilation's referenced types.",
)
@click.option(
    "--out",
    "-o",
    "output_dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Write the artifact into this directory instead of printing it.",
)
@click.option("--overwrite", is_flag=True, help="Replace an existing artifact file.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def generate(
    ctx: click.Context,
    work_items_path: str,
    compilation_path: str,
    output_dir: str | None,
    overwrite: bool,
    as_json: bool,
) -> None:
    """Synthesize the configured Swashbuckle artifact."""
    from voschema.core.models.config import SchemaGeneration
    from voschema.core.use_cases.generate import run_generate

    result = run_generate(
        config_path=ctx.obj.get("config_path"),
        work_items_path=Path(work_items_path),
        compilation_path=Path(compilation_path),
        output_dir=Path(output_dir) if output_dir else None,
        overwrite=overwrite,
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        write_failed = any(not entry.get("written") for entry in result.written)
        sys.exit(1 if result.error or write_failed else 0)

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    quiet = ctx.obj.get("quiet", False)
    artifact = result.artifact

    if artifact is None:
        if not quiet:
            reason = (
                "generation disabled"
                if result.selector == SchemaGeneration.DO_NOT_GENERATE
                else "Swashbuckle not referenced"
            )
            click.secho(f"⏭️  Nothing generated ({reason})", fg="yellow", err=True)
        return

    if output_dir is None:
        click.echo(artifact.content, nl=False)
        return

    failed = False
    for entry in result.written:
        if entry.get("written"):
            if not quiet:
                click.secho(f"✅ Wrote {entry['path']}", fg="green")
        else:
            failed = True
            click.secho(f"❌ {entry.get('error')}", fg="red")

    if failed:
        sys.exit(1)


@cli.group()
def config() -> None:
    """Generator configuration commands."""


@config.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_check(ctx: click.Context, as_json: bool) -> None:
    """Validate voschema.yml configuration."""
    from voschema.core.use_cases.config_check import check_config

    result = check_config(config_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)

    if result.valid:
        summary = result.to_dict()
        click.secho("✅ Configuration is valid", fg="green", bold=True)
        if result.config_path:
            click.echo(f"   File: {result.config_path}")
        click.echo(f"   Swashbuckle: {summary['swashbuckle_schema_generation']}")
    else:
        click.secho("❌ Configuration errors:", fg="red", bold=True)
        for err in result.errors:
            click.echo(f"   • {err}")

    if result.warnings:
        click.echo()
        click.secho("⚠️  Warnings:", fg="yellow")
        for warn in result.warnings:
            click.echo(f"   • {warn}")

    if not result.valid:
        sys.exit(1)


@cli.command("map-type")
@click.argument("type_names", nargs=-1, required=True)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def map_type(type_names: tuple[str, ...], as_json: bool) -> None:
    """Show the JSON-schema type each primitive maps to."""
    from voschema.core.services.type_mapper import map_underlying_type_to_json_schema

    mapping = {name: map_underlying_type_to_json_schema(name) for name in type_names}

    if as_json:
        click.echo(json.dumps(mapping, indent=2))
        return

    for name, keyword in mapping.items():
        click.echo(f"{name} → {keyword}")


if __name__ == "__main__":
    cli()

"""CLI entry point for metatype.

Invoked as::

    metatype [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m metatype.cli.main

Commands
--------
inspect     Annotate a meta query with property types
describe    Show the resolved kind of every property in a schema
version     Show version information
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

if TYPE_CHECKING:
    from metatype.query.params import MetaQuery
    from metatype.schema.model import Schema

console = Console()
err_console = Console(stderr=True)


def _load_schema_or_exit(path: str) -> "Schema":
    """Load a schema file, exiting on error."""
    from metatype.schema import SchemaFormatError, load_schema

    try:
        return load_schema(path)
    except FileNotFoundError:
        err_console.print(f"[red]Error:[/red] File not found: {path}")
        sys.exit(1)
    except OSError as exc:
        err_console.print(f"[red]Error:[/red] Cannot read {path}: {exc}")
        sys.exit(1)
    except SchemaFormatError as exc:
        err_console.print(f"[red]Schema error[/red] in {path}: {escape(str(exc))}")
        sys.exit(1)


def _load_query_or_exit(path: str) -> "MetaQuery":
    """Load a query file, exiting on error."""
    from metatype.query import QueryFormatError, load_query

    try:
        return load_query(path)
    except FileNotFoundError:
        err_console.print(f"[red]Error:[/red] File not found: {path}")
        sys.exit(1)
    except OSError as exc:
        err_console.print(f"[red]Error:[/red] Cannot read {path}: {exc}")
        sys.exit(1)
    except QueryFormatError as exc:
        err_console.print(f"[red]Query error[/red] in {path}: {escape(str(exc))}")
        sys.exit(1)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="metatype")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Type annotations for aggregate ("meta") queries over a schema."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from metatype import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]metatype[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# inspect command
# ---------------------------------------------------------------------------


@cli.command(name="inspect")
@click.argument("schema_file", type=click.Path(exists=False))
@click.argument("query_file", type=click.Path(exists=False))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"], case_sensitive=False),
    default="json",
    help="Output format",
)
@click.option("--output", "-o", default=None, help="Output file path (defaults to stdout)")
@click.option("--show-query", is_flag=True, default=False, help="Echo the parsed query first")
def inspect_command(
    schema_file: str,
    query_file: str,
    output_format: str,
    output: str | None,
    show_query: bool,
) -> None:
    """Annotate a meta query with property types.

    SCHEMA_FILE is the YAML/JSON schema; QUERY_FILE is the YAML/JSON
    meta query to annotate.
    """
    from metatype.core.documents import dump_document
    from metatype.inspector import TypeInspector
    from metatype.query import query_to_dict
    from metatype.sources import PropertyResolutionError, SchemaTypeSource

    schema = _load_schema_or_exit(schema_file)
    query = _load_query_or_exit(query_file)
    output_format = output_format.lower()

    if show_query:
        err_console.print(Syntax(dump_document(query_to_dict(query), output_format), output_format))

    try:
        annotations = TypeInspector(SchemaTypeSource(schema)).process(query)
    except PropertyResolutionError as exc:
        err_console.print(f"[red]Resolution error:[/red] {escape(str(exc))}")
        sys.exit(1)

    text = dump_document(annotations, output_format)
    if output:
        Path(output).write_text(text + "\n", encoding="utf-8")
        err_console.print(f"[green]Annotations written to[/green] {output}")
    else:
        click.echo(text)


# ---------------------------------------------------------------------------
# describe command
# ---------------------------------------------------------------------------


@cli.command(name="describe")
@click.argument("schema_file", type=click.Path(exists=False))
@click.argument("class_name", required=False, default=None)
def describe_command(schema_file: str, class_name: str | None) -> None:
    """Show the resolved kind of every property in a schema.

    SCHEMA_FILE is the YAML/JSON schema.  Pass CLASS_NAME to restrict
    the listing to one class.
    """
    from metatype.schema import CROSS_REF_TYPE, PrimitiveKind
    from metatype.sources import PropertyResolutionError, SchemaTypeSource

    schema = _load_schema_or_exit(schema_file)
    source = SchemaTypeSource(schema)

    if class_name is not None and schema.get_class(class_name) is None:
        err_console.print(f"[red]Error:[/red] Class {class_name!r} is not defined in {schema_file}")
        sys.exit(1)
    classes = [c for c in schema.classes if class_name is None or c.name == class_name]

    table = Table(title=f"Schema: {schema_file}", show_lines=True)
    table.add_column("Class", style="bold", min_width=10)
    table.add_column("Property", min_width=10)
    table.add_column("Type", min_width=8)
    table.add_column("Pointing to")

    failures = 0
    for cls in classes:
        for prop in cls.properties:
            try:
                kind = source.resolve_kind(cls.name, prop.name)
            except PropertyResolutionError as exc:
                failures += 1
                table.add_row(cls.name, prop.name, "[red]invalid[/red]", f"[dim]{escape(str(exc))}[/dim]")
                continue
            if isinstance(kind, PrimitiveKind):
                table.add_row(cls.name, prop.name, kind.data_type, "")
            else:
                table.add_row(cls.name, prop.name, CROSS_REF_TYPE, ", ".join(kind.targets))

    console.print(table)
    if failures:
        console.print(f"\n[bold]{failures}[/bold] property declaration(s) could not be resolved")
        sys.exit(1)


if __name__ == "__main__":
    cli()

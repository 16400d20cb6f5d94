"""Command-line interface for scalastruct code generation."""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import replace

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from scalastruct.generator import Generator, GoWriter, MappingConfig, load_config, resolve_signature
from scalastruct.generator.config import BoundaryMode
from scalastruct.generator.errors import GenerationError
from scalastruct.generator.generator import eligible_fields
from scalastruct.generator.source import ClassRegistry, DirectorySource
from scalastruct.generator.types import Blacklisted

logger = logging.getLogger("scalastruct")


def _fail(message: str) -> None:
    Console(stderr=True).print(f"[bold red]error:[/bold red] {message}", highlight=False)
    sys.exit(1)


def _mapping_config(
    config_file: str | None,
    blacklist_types: tuple[str, ...] = (),
    blacklist_fields: tuple[str, ...] = (),
    case_overrides: tuple[str, ...] = (),
    legacy_boundaries: bool = False,
) -> MappingConfig:
    """Load the config file, if any, and apply command-line additions."""
    config = load_config(config_file) if config_file else MappingConfig.build()
    config = config.extend(
        blacklist_types=blacklist_types,
        blacklist_fields=blacklist_fields,
        case_overrides=case_overrides,
    )
    if legacy_boundaries:
        config = replace(config, boundary_mode=BoundaryMode.CASE_ONLY)
    return config


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Go struct generator for compiled Scala case classes."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@cli.command()
@click.option("--input", "-i", "input_dir", required=True, help="Directory of class descriptors")
@click.option("--output", "-o", "output_file", required=True, help="Output Go file")
@click.option("--config", "-c", "config_file", default=None, help="JSON mapping configuration")
@click.option("--package", "-p", "package", default="models", help="Go package name")
@click.option(
    "--keep-going",
    is_flag=True,
    default=False,
    help="Skip classes that fail instead of aborting the run",
)
@click.option("--blacklist-type", "blacklist_types", multiple=True, help="Raw type to omit")
@click.option("--blacklist-field", "blacklist_fields", multiple=True, help="Field name to omit")
@click.option("--case-override", "case_overrides", multiple=True, help="Exact casing for a word")
@click.option(
    "--legacy-boundaries",
    is_flag=True,
    default=False,
    help="Split identifiers on lower-to-upper case changes only",
)
@click.argument("classes", nargs=-1)
def gen(
    input_dir: str,
    output_file: str,
    config_file: str | None,
    package: str,
    keep_going: bool,
    blacklist_types: tuple[str, ...],
    blacklist_fields: tuple[str, ...],
    case_overrides: tuple[str, ...],
    legacy_boundaries: bool,
    classes: tuple[str, ...],
) -> None:
    """Generate Go structs for CLASSES (default: every class in the input)."""
    try:
        config = _mapping_config(
            config_file, blacklist_types, blacklist_fields, case_overrides, legacy_boundaries
        )
        source = DirectorySource(input_dir)
        names = list(classes) if classes else source.names()
        generator = Generator(config, ClassRegistry.of(names))
        writer = GoWriter(package)
        report = generator.run(source, writer, names, keep_going=keep_going)
    except GenerationError as err:
        _fail(str(err))
        return

    with open(output_file, "w", encoding="utf-8") as f:
        f.write(writer.render())

    logger.info("generated %d structs into %s", len(report.generated), output_file)
    if not report.ok:
        _fail(f"{len(report.failed)} classes failed: {', '.join(sorted(report.failed))}")


@cli.command()
@click.argument("signature")
@click.option("--config", "-c", "config_file", default=None, help="JSON mapping configuration")
@click.option("--known", "known", multiple=True, help="Fully qualified name of a generated class")
def resolve(signature: str, config_file: str | None, known: tuple[str, ...]) -> None:
    """Print the Go type for a raw descriptor or generic signature."""
    try:
        config = _mapping_config(config_file).with_known_types(known)
        resolution = resolve_signature(signature, config)
    except GenerationError as err:
        _fail(str(err))
        return

    if isinstance(resolution, Blacklisted):
        click.echo(f"skipped ({resolution.reason})")
    else:
        click.echo(resolution.type)


@cli.command()
@click.option("--input", "-i", "input_dir", required=True, help="Directory of class descriptors")
@click.option("--config", "-c", "config_file", default=None, help="JSON mapping configuration")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def info(input_dir: str, config_file: str | None, output_json: bool) -> None:
    """Display the classes found in a descriptor directory."""
    try:
        config = _mapping_config(config_file)
        source = DirectorySource(input_dir)
        rows = []
        for name in source.names():
            with source.open(name) as descriptor:
                rows.append(
                    {
                        "name": name,
                        "fields": len(descriptor.fields),
                        "eligible_fields": len(eligible_fields(descriptor)),
                        "marker": descriptor.has_attribute(config.marker_attribute),
                    }
                )
    except GenerationError as err:
        _fail(str(err))
        return

    if output_json:
        print(json.dumps({"classes": rows}, indent=2))
        return

    console = Console()
    table = Table(show_header=True, box=None, padding=(0, 2, 0, 0))
    table.add_column("Class", style="white")
    table.add_column("Fields", style="yellow", justify="right")
    table.add_column("Eligible", style="yellow", justify="right")
    table.add_column(config.marker_attribute, style="green")
    for row in rows:
        table.add_row(
            row["name"],
            str(row["fields"]),
            str(row["eligible_fields"]),
            "yes" if row["marker"] else "[red]no[/red]",
        )
    console.print(table)


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()

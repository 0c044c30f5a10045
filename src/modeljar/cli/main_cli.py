"""
Top-level CLI: build a module JAR from an archive, or inspect what would go in it.
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from modeljar.core.config import get_settings
from modeljar.core.utils import configure_logging
from modeljar.exceptions import ModelJarError
from modeljar.packaging.assembler import model_output_path
from modeljar.pipeline import repackage, scan_source

logger = logging.getLogger(__name__)
console = Console()

main_app = typer.Typer(help="Repackage Alfresco content models into a module JAR")


@main_app.command("build")
def build_cmd(
    zip_file: Optional[str] = typer.Option(None, "--zip", "-z", help="Path to ZIP file to process"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output JAR file name [default: models.jar]"),
    built_by: Optional[str] = typer.Option(None, "--built-by", help="Built-By value for the manifest [default: $USER]"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """
    Extract content model XML files and package them as a module JAR with a bumped version.
    """
    configure_logging(verbose)
    try:
        settings = get_settings(built_by=built_by)
        result = repackage(zip_file, output, settings)
    except ModelJarError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(code=1)

    for source_path in result.dropped:
        console.print(f"[yellow]Dropped:[/yellow] {source_path}")
    typer.echo(
        f"Successfully created JAR file {result.output_path} with "
        f"{result.model_count} model files (version {result.module.version})"
    )


@main_app.command("inspect")
def inspect_cmd(
    archive_path: str = typer.Argument(..., help="Path to the archive to inspect"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """
    Show the module name, versions and content models without writing anything.
    """
    configure_logging(verbose)
    try:
        module, current, entries = scan_source(archive_path, get_settings())
    except ModelJarError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(code=1)

    console.print(f"[bold]Module:[/bold] {module.name}")
    console.print(f"[bold]Version:[/bold] {current} -> {module.version}")

    table = Table(title=f"Content models in {Path(archive_path).name}")
    table.add_column("Source", style="cyan")
    table.add_column("Packaged as", style="green")
    table.add_column("Bytes", style="magenta", justify="right")
    for entry in entries:
        table.add_row(
            entry.source_path,
            model_output_path(module.name, entry.base_name),
            str(len(entry.content)),
        )
    console.print(table)


def main():
    main_app()


if __name__ == "__main__":
    main()

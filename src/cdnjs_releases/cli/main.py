import json
import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from ..config import get_registry_url, get_timeout, set_registry_url
from ..domain.errors import DatasourceFailure
from ..domain.models import ReleaseResult
from ..registry.cdnjs import CdnjsRegistry
from ..resolution.resolver import ReleaseResolver

app = typer.Typer()
console = Console()

def configure_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )

def render_result(lookup_name: str, result: ReleaseResult):
    if not result.releases:
        console.print(f"[yellow]No versions of '{lookup_name}' found.[/yellow]")
    else:
        table = Table(title=f"Releases: {lookup_name}")
        table.add_column("Version", style="cyan")
        for release in result.releases:
            table.add_row(release.version)
        console.print(table)

    grid = Table.grid(expand=True)
    grid.add_column(style="bold cyan", justify="right")
    grid.add_column(style="white")
    if result.homepage:
        grid.add_row("Homepage:", result.homepage)
    if result.source_url:
        grid.add_row("Source:", result.source_url)
    if grid.row_count:
        console.print(Panel(grid, border_style="cyan"))

@app.command()
def lookup(
    lookup_name: str = typer.Argument(..., help="<package> or <package>/<asset path>"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """list the cdnjs versions of a library that ship the given file."""
    configure_logging(verbose)

    with CdnjsRegistry(get_registry_url(), timeout=get_timeout()) as registry:
        resolver = ReleaseResolver(registry)
        try:
            result = resolver.get_pkg_releases(lookup_name)
        except DatasourceFailure as e:
            console.print(f"[red]Registry unavailable:[/red] {e}")
            raise typer.Exit(2)

    if result is None:
        console.print(f"[red]No result for '{lookup_name}'.[/red]")
        raise typer.Exit(1)

    if as_json:
        console.print_json(json.dumps(result.to_dict()))
        return

    render_result(lookup_name, result)

@app.command("config-url")
def config_url(url: Optional[str] = typer.Argument(None, help="New registry base URL")):
    """show or set the registry base URL."""
    if url is None:
        console.print(get_registry_url())
        return

    try:
        set_registry_url(url)
    except RuntimeError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    console.print(f"[green]Registry URL set to {url}[/green]")

if __name__ == "__main__":
    app()

"""Teleport CLI — load plugins and inspect the resulting registry."""

import logging

import click
from rich.console import Console
from rich.table import Table

from teleport import Teleport, __version__
from teleport.errors import TeleportError

console = Console()


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Log registrations and downloads")
def main(verbose: bool):
    """Teleport — compose element libraries, mappings and generators.

    Every SOURCE is a plugin file (JSON or YAML) or an http(s) URL. Sources
    are loaded in the order given.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _load(sources: tuple[str, ...]) -> Teleport:
    teleport = Teleport()
    try:
        teleport.use_sync(list(sources))
    except TeleportError as e:
        console.print(f"[red]Failed to load plugins:[/] {e}")
        raise SystemExit(1)
    return teleport


# ── Inspect ──────────────────────────────────────────────────────────


@main.command()
@click.argument("sources", nargs=-1, required=True)
def inspect(sources: tuple[str, ...]):
    """Load SOURCES and print what ended up in the registry."""
    teleport = _load(sources)

    if not teleport.libraries:
        console.print("[yellow]No libraries loaded.[/]")
    else:
        table = Table(title=f"Libraries ({len(teleport.libraries)})")
        table.add_column("Name", style="cyan")
        table.add_column("Version")
        table.add_column("Elements", justify="right")
        table.add_column("Mappings")
        table.add_column("GUIs")
        for lib in teleport.libraries.values():
            table.add_row(
                lib.name,
                lib.version,
                str(len(lib.elements)),
                ", ".join(lib.mappings),
                ", ".join(lib.guis),
            )
        console.print(table)

    if teleport.targets:
        table = Table(title=f"Targets ({len(teleport.targets)})")
        table.add_column("Name", style="cyan")
        table.add_column("Mappings")
        table.add_column("Generator", style="green")
        for target in teleport.targets.values():
            table.add_row(
                target.name,
                ", ".join(target.mappings),
                target.generator.name if target.generator else "-",
            )
        console.print(table)

    if teleport.publishers:
        console.print(f"\n[bold]Publishers:[/] {', '.join(teleport.publishers)}")


# ── Map ──────────────────────────────────────────────────────────────


@main.command(name="map")
@click.argument("target")
@click.argument("source")
@click.argument("element_type")
@click.option("--plugin", "-p", "plugins", multiple=True, required=True, help="Plugin source")
def map_element(target: str, source: str, element_type: str, plugins: tuple[str, ...]):
    """Resolve ELEMENT_TYPE of library SOURCE for TARGET."""
    teleport = _load(plugins)

    rule = teleport.map(target, source, element_type)
    if rule is None:
        console.print(f"[yellow]No mapping for {source}/{element_type} on {target}.[/]")
        raise SystemExit(1)

    console.print_json(data=rule, default=str)

"""CLI for pokedeck.

Usage:
    python -m pokedeck list                  # Show saved cards, speed masked
    python -m pokedeck list --show           # Show saved cards with speed
    python -m pokedeck add 25                # Search, preview, confirm
    python -m pokedeck add pikachu --yes     # Search and add without prompting
    python -m pokedeck remove 25             # Remove an entry
    python -m pokedeck shell                 # Interactive session
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

import typer
from rich.console import Console
from rich.markup import escape

from pokedeck.app import CatalogApp
from pokedeck.config import Settings, load_settings
from pokedeck.logging_config import setup_logging
from pokedeck.render import render_candidate, render_cards, render_notice

app = typer.Typer(
    name="pokedeck",
    help="Keep a local deck of PokeAPI entries",
    no_args_is_help=True,
)
console = Console(stderr=True)

# Swapped out in tests to avoid real storage and network.
app_factory: Callable[[Settings], CatalogApp] = CatalogApp.create

SHELL_HELP = """Commands:
  search <id|name>   look up a candidate
  add                add the current candidate
  show / hide        reveal or mask speed on every card
  toggle <id>        reveal or mask speed on one card
  remove <id>        remove an entry
  list               show the cards
  refresh            fetch every entry again
  help               this text
  quit               leave"""


def _open(ctx: typer.Context, fetch: bool = True) -> CatalogApp:
    """Build and start the app for the settings chosen in the callback.

    Commands that never render cards pass ``fetch=False`` so editing the
    collection makes no lookups for the entries already saved.
    """
    catalog = app_factory(ctx.obj)
    catalog.on_notice(lambda n, msg: render_notice(n, msg, console))
    catalog.start(fetch=fetch)
    return catalog


@app.callback()
def main(
    ctx: typer.Context,
    data_file: Optional[Path] = typer.Option(None, "--data-file", help="Storage file (default: ~/.pokedeck/storage.json)"),
    api_url: Optional[str] = typer.Option(None, "--api-url", help="Pokemon endpoint base URL"),
    ephemeral: bool = typer.Option(False, "--ephemeral", help="Keep the collection in memory only"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log lookups and storage writes"),
) -> None:
    """Keep a local deck of PokeAPI entries."""
    setup_logging(verbose)
    ctx.obj = load_settings(api_url=api_url, data_file=data_file, ephemeral=ephemeral)


@app.command("list")
def cmd_list(
    ctx: typer.Context,
    show: bool = typer.Option(False, "--show", "-s", help="Reveal speed on every card"),
) -> None:
    """Show the saved collection as cards."""
    catalog = _open(ctx)
    try:
        if show:
            catalog.display.show_all()
        render_cards(catalog.display, console, saved=len(catalog.store))
    finally:
        catalog.close()


@app.command("add")
def cmd_add(
    ctx: typer.Context,
    query: str = typer.Argument(help="Pokemon id or name (e.g., '25' or 'pikachu')"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Add without asking for confirmation"),
) -> None:
    """Search for a pokemon and add it to the collection."""
    if not query.strip():
        console.print("[red]Enter an id or a name.[/red]")
        raise typer.Exit(1)

    catalog = _open(ctx, fetch=False)
    try:
        candidate = catalog.search(query)
        if candidate is None:
            raise typer.Exit(1)

        render_candidate(candidate, console)
        if not yes and not typer.confirm(f"Add #{candidate.id}?", default=True):
            catalog.resolver.clear()
            console.print("[dim]Cancelled.[/dim]")
            return

        if not catalog.confirm():
            raise typer.Exit(1)
    finally:
        catalog.close()


@app.command("remove")
def cmd_remove(
    ctx: typer.Context,
    item_id: int = typer.Argument(help="Id of the entry to remove"),
) -> None:
    """Remove an entry from the collection."""
    catalog = _open(ctx, fetch=False)
    try:
        if not catalog.remove(item_id):
            console.print(f"[yellow]#{item_id} is not in the collection.[/yellow]")
            raise typer.Exit(1)
    finally:
        catalog.close()


def _parse_id(arg: str) -> Optional[int]:
    try:
        return int(arg)
    except ValueError:
        console.print(f"[red]Not an id: {escape(repr(arg))}[/red]")
        return None


def run_shell_command(catalog: CatalogApp, line: str) -> bool:
    """Run one shell command. Returns False when the session should end."""
    parts = line.strip().split(maxsplit=1)
    if not parts:
        return True
    command, arg = parts[0].lower(), (parts[1] if len(parts) > 1 else "")

    if command in ("quit", "exit", "q"):
        return False
    if command == "help":
        console.print(SHELL_HELP)
    elif command == "search":
        if catalog.search(arg) is not None:
            render_candidate(catalog.candidate, console)
    elif command == "add":
        if catalog.candidate is None:
            console.print("[dim]No candidate. Search first.[/dim]")
        elif catalog.confirm():
            render_cards(catalog.display, console, saved=len(catalog.store))
    elif command == "show":
        catalog.display.show_all()
        render_cards(catalog.display, console, saved=len(catalog.store))
    elif command == "hide":
        catalog.display.hide_all()
        render_cards(catalog.display, console, saved=len(catalog.store))
    elif command == "toggle":
        item_id = _parse_id(arg)
        if item_id is not None:
            if catalog.display.toggle(item_id):
                render_cards(catalog.display, console, saved=len(catalog.store))
            else:
                console.print(f"[yellow]No card #{item_id}.[/yellow]")
    elif command == "remove":
        item_id = _parse_id(arg)
        if item_id is not None:
            if catalog.remove(item_id):
                render_cards(catalog.display, console, saved=len(catalog.store))
            else:
                console.print(f"[yellow]#{item_id} is not in the collection.[/yellow]")
    elif command == "list":
        render_candidate(catalog.candidate, console)
        render_cards(catalog.display, console, saved=len(catalog.store))
    elif command == "refresh":
        catalog.refresh()
        render_cards(catalog.display, console, saved=len(catalog.store))
    else:
        console.print(f"[red]Unknown command: {escape(command)}[/red]. Type 'help'.")
    return True


@app.command("shell")
def cmd_shell(ctx: typer.Context) -> None:
    """Interactive session: search, add, toggle speed, remove."""
    catalog = _open(ctx)
    try:
        render_cards(catalog.display, console, saved=len(catalog.store))
        console.print("[dim]Type 'help' for commands.[/dim]")
        while True:
            try:
                line = console.input("pokedeck> ")
            except (EOFError, KeyboardInterrupt):
                console.print()
                break
            if not run_shell_command(catalog, line):
                break
    finally:
        catalog.close()


if __name__ == "__main__":
    app()

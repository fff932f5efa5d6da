"""Rich rendering for cards, the candidate slot, and notices."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pokedeck.display import DisplayList
from pokedeck.models import Candidate, Notice

_NOTICE_STYLES = {
    Notice.NOT_FOUND: "red",
    Notice.DUPLICATE: "yellow",
    Notice.ADDED: "green",
    Notice.REMOVED: "cyan",
}


def render_notice(notice: Notice, message: str, console: Console) -> None:
    style = _NOTICE_STYLES.get(notice, "white")
    console.print(f"[{style}]{escape(message)}[/{style}]")


def render_candidate(candidate: Optional[Candidate], console: Console) -> None:
    """Render the one-slot candidate preview."""
    if candidate is None:
        console.print("[dim]No candidate[/dim]")
        return
    image = escape(candidate.image_url) or "[dim]no image[/dim]"
    console.print(f"Candidate: [bold]ID: {candidate.id}[/bold]  {image}")


def render_cards(display: DisplayList, console: Console, saved: int = 0) -> None:
    """Render the collection as a table, one row per card.

    ``saved`` is the number of ids in the collection; when it exceeds the
    number of cards, the difference failed to resolve and is reported.
    """
    if not len(display):
        if saved:
            console.print(f"[yellow]None of the {saved} saved entries could be fetched.[/yellow]")
        else:
            console.print("[yellow]Collection is empty. Add one with 'pokedeck add <id>'.[/yellow]")
        return

    table = Table(title="Collection", show_header=True, header_style="bold")
    table.add_column("ID", style="green", justify="right")
    table.add_column("Name", min_width=12)
    table.add_column("Image", style="dim")
    table.add_column("Speed", justify="right")

    for record in display:
        speed = record.speed_label
        if record.visible:
            speed = f"[bold]{speed}[/bold]"
        table.add_row(str(record.id), escape(record.name), escape(record.image_url) or "--", speed)

    console.print()
    console.print(table)
    missing = saved - len(display)
    if missing > 0:
        console.print(f"[dim]{missing} saved entr{'y' if missing == 1 else 'ies'} could not be fetched.[/dim]")
    console.print()

from __future__ import annotations

import logging
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from booklisting.config import get_settings
from booklisting.services.book_lookup import search_books
from booklisting.services.listing import to_rows

app = typer.Typer(
    name="booklisting",
    help="Search Google Books from your terminal.",
    no_args_is_help=True,
)
console = Console()


def _configure_logging(level: str | int) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logging")] = False,
) -> None:
    """Search Google Books from your terminal."""
    try:
        settings = get_settings()
    except ValidationError as e:
        console.print(f"[red]Invalid configuration:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    _configure_logging(logging.DEBUG if verbose else settings.log_level)


# ── search ───────────────────────────────────────────────────────────

@app.command()
def search(
    term: Annotated[str, typer.Argument(help="Search term (title, author, topic)")],
    links: Annotated[bool, typer.Option("--links", help="Also show preview links")] = False,
    as_json: Annotated[bool, typer.Option("--json", help="Print the books as JSON")] = False,
) -> None:
    """Search Google Books and list the matches."""
    settings = get_settings()

    with console.status("Searching..."):
        books = search_books(term, settings=settings) or []

    if as_json:
        console.print_json(data=[book.model_dump() for book in books])
        return

    if not books:
        console.print("[dim]No books found.[/dim]")
        return

    table = Table(title=f"Books matching '{escape(term)}'", show_lines=True)
    table.add_column("Title", style="bold")
    table.add_column("Author")
    table.add_column("Year", justify="center")
    if links:
        table.add_column("Preview", overflow="fold")

    for book, row in zip(books, to_rows(books)):
        cells = [escape(row.title), escape(row.author), escape(row.year)]
        if links:
            cells.append(escape(book.url))
        table.add_row(*cells)

    console.print(table)


if __name__ == "__main__":
    app()

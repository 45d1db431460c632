"""
Note Commands.

Local notes. Nothing here talks to the booking service.
"""

import typer

from ntc_booking.cli.context import AppContext
from ntc_booking.cli.output import print_message
from ntc_booking.cli.runner import run_command


def add_note(
    ctx: typer.Context,
    content: str = typer.Argument(..., help="Note text"),
) -> None:
    """Add a note."""
    run_command(ctx, "Error adding note", _add_note, content)


async def _add_note(app: AppContext, content: str) -> None:
    app.note_store.add(content)
    print_message("Note added!")


def view_notes(ctx: typer.Context) -> None:
    """View all notes."""
    run_command(ctx, "Error viewing notes", _view_notes)


async def _view_notes(app: AppContext) -> None:
    notes = app.note_store.load()
    if not notes:
        print_message("No notes available.")
        return

    print_message("Notes:")
    for index, note in enumerate(notes, start=1):
        print_message(f"{index}. {note}")

"""
CLI Commands.

Organized by domain/feature area. Every command is registered at the top
level of the application, e.g. ``ntc-booking add-route``.
"""

import typer

from ntc_booking.cli.commands import admin, commuter, notes, schedules, users


def register_commands(app: typer.Typer) -> None:
    """Attach every booking command to ``app``."""
    app.command("register")(users.register)
    app.command("login")(users.login)

    app.command("add-route")(admin.add_route)
    app.command("routes", hidden=True)(admin.add_route)
    app.command("view-routes")(admin.view_routes)
    app.command("add-bus")(admin.add_bus)
    app.command("view-buses")(admin.view_buses)

    app.command("view-available-buses")(commuter.view_available_buses)
    app.command("book-bus")(commuter.book_bus)

    app.command("add-schedule")(schedules.add_schedule)
    app.command("update-schedule")(schedules.update_schedule)
    app.command("delete-schedule")(schedules.delete_schedule)
    app.command("view-schedules")(schedules.view_schedules)

    app.command("add-note")(notes.add_note)
    app.command("view-notes")(notes.view_notes)


__all__ = ["register_commands"]

"""
CLI Client Module.

Command-line client built with Typer for the NTC bus booking service.

Architecture:
- CLI is a thin presentation layer
- All entity validation and persistence live in the remote service
- CLI calls the service via HTTP (httpx), one request per command
- The logged-in session is read from a local file and passed explicitly
  through an AppContext attached to the Typer context

Usage:
    ntc-booking --help
    ntc-booking login ann@example.com secret
    ntc-booking view-routes
"""

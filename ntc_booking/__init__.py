"""
NTC Booking CLI.

- core/: Configuration, logging, exceptions
- schemas/: Pydantic request and session schemas
- storage/: Local session and note files
- services/: Remote booking service calls
- cli/: Typer command-line client
"""

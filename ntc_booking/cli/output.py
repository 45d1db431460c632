"""
Console Output.

Rendering of service responses and failures. Results go to stdout,
failures to stderr. Service data is printed without Rich markup so
brackets in names survive, and lines are never wrapped.
"""

from collections.abc import Callable
from typing import Any

from rich.console import Console

from ntc_booking.core.exceptions import (
    ApplicationError,
    ExternalServiceError,
    ServiceResponseError,
)

console = Console(soft_wrap=True, markup=False, highlight=False)
err_console = Console(stderr=True, soft_wrap=True, markup=False, highlight=False)


def field(item: Any, key: str) -> Any:
    """Read ``key`` from a response object, "N/A" when absent."""
    if isinstance(item, dict):
        value = item.get(key)
        if value is not None:
            return value
    return "N/A"


def _print_payload(target: Console, label: str, payload: Any) -> None:
    if isinstance(payload, (dict, list)):
        target.print(f"{label}:")
        target.print_json(data=payload)
    elif payload is None:
        target.print(f"{label}.")
    else:
        target.print(f"{label}: {payload}")


def print_result(label: str, payload: Any) -> None:
    """Print a success label followed by the full response payload."""
    _print_payload(console, label, payload)


def print_enumerated(title: str, items: Any, describe: Callable[[Any], str]) -> None:
    """
    Print a title and one 1-indexed line per item.

    Args:
        title: Heading line
        items: Response payload, expected to be a list
        describe: Formats one item as a line of text
    """
    if not isinstance(items, list):
        print_result(title.rstrip(":"), items)
        return

    console.print(title)
    for index, item in enumerate(items, start=1):
        console.print(f"{index}. {describe(item)}")


def print_message(message: str) -> None:
    console.print(message)


def print_failure(label: str, error: ApplicationError) -> None:
    """
    Print a failure.

    Service error responses show the service's payload under ``label``,
    transport failures the low-level message. Local failures such as a
    missing login are shown as ``Error: <message>``.
    """
    if isinstance(error, ServiceResponseError):
        _print_payload(err_console, label, error.payload)
    elif isinstance(error, ExternalServiceError):
        err_console.print(f"{label}: {error.message}")
    else:
        err_console.print(f"Error: {error.message}")

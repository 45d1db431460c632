"""
Note Store.

Free-text notes kept on the local machine only. Never sent to the
booking service.
"""

from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from ntc_booking.core.exceptions import StorageError
from ntc_booking.core.logging import get_logger, log_with_source

logger = get_logger(__name__)

_notes_adapter = TypeAdapter(list[str])


class NoteStore:
    """JSON file holding an ordered list of notes."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> list[str]:
        """Return stored notes in insertion order; empty when missing or malformed."""
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except (OSError, UnicodeDecodeError) as e:
            log_with_source(logger, "storage", "warning", "Notes file unreadable", path=str(self.path), error=str(e))
            return []

        try:
            return _notes_adapter.validate_json(raw)
        except ValidationError:
            log_with_source(logger, "storage", "info", "Ignoring malformed notes file", path=str(self.path))
            return []

    def save(self, notes: list[str]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_bytes(_notes_adapter.dump_json(notes, indent=2))
        except OSError as e:
            raise StorageError(f"Could not save notes to {self.path}: {e}") from e

    def add(self, content: str) -> list[str]:
        """
        Append a note and persist the list.

        Args:
            content: Note text

        Returns:
            The full list after appending
        """
        notes = self.load()
        notes.append(content)
        self.save(notes)
        log_with_source(logger, "storage", "debug", "Note added", path=str(self.path), count=len(notes))
        return notes

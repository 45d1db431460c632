"""
Session Store.

Persists the identity returned by a successful login in a JSON file so
later invocations can authenticate. One identity at a time, no expiry.

Usage:
    store = SessionStore(Path("~/.ntc-booking/session.json").expanduser())
    store.save(Session(name="Ann", email="ann@example.com", role="Admin", token="t"))
    session = store.load()   # None when missing or unreadable
"""

from pathlib import Path

from pydantic import ValidationError

from ntc_booking.core.exceptions import StorageError
from ntc_booking.core.logging import get_logger, log_with_source
from ntc_booking.schemas.session import Session

logger = get_logger(__name__)


class SessionStore:
    """JSON file holding the current session."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> Session | None:
        """
        Read the stored session.

        Returns:
            The session, or None if the file is missing or malformed.
            Never raises.
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            log_with_source(logger, "storage", "warning", "Session file unreadable", path=str(self.path), error=str(e))
            return None

        try:
            return Session.model_validate_json(raw)
        except ValidationError as e:
            log_with_source(
                logger,
                "storage",
                "info",
                "Ignoring malformed session file",
                path=str(self.path),
                errors=e.error_count(),
            )
            return None

    def save(self, session: Session) -> None:
        """Overwrite the stored session with ``session``."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(session.model_dump_json(indent=2), encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Could not save session to {self.path}: {e}") from e
        log_with_source(logger, "storage", "debug", "Session saved", path=str(self.path), role=session.role)


def is_admin(session: Session | None) -> bool:
    """True iff a session is present and its role is exactly "Admin"."""
    return session is not None and session.is_admin

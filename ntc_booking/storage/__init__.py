"""
Local Storage.

File-backed stores for state the client keeps between invocations.
The session and the notes live in separate files.
"""

from ntc_booking.storage.notes import NoteStore
from ntc_booking.storage.session import SessionStore, is_admin

__all__ = ["NoteStore", "SessionStore", "is_admin"]

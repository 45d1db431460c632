"""
Invocation Context.

Everything a command needs for one run: the local stores, the remote
service settings and the session read from disk. Built once in the
Typer callback and passed to commands through ``typer.Context.obj``.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field

import httpx

from ntc_booking.cli.client import APIClient
from ntc_booking.core.config import get_api_settings, get_app_config, get_storage_paths
from ntc_booking.core.exceptions import AuthenticationError, AuthorizationError
from ntc_booking.schemas.session import Session
from ntc_booking.services.booking import BookingService
from ntc_booking.storage import NoteStore, SessionStore, is_admin


@dataclass
class AppContext:
    """Per-invocation state shared by every command."""

    session_store: SessionStore
    note_store: NoteStore
    base_url: str
    timeout: float
    exit_nonzero_on_error: bool = True
    transport: httpx.AsyncBaseTransport | None = None
    _session: Session | None = field(default=None, init=False, repr=False)
    _session_loaded: bool = field(default=False, init=False, repr=False)

    @classmethod
    def from_config(cls) -> "AppContext":
        """Build the context from config/settings and environment overrides."""
        session_path, notes_path = get_storage_paths()
        base_url, timeout = get_api_settings()
        return cls(
            session_store=SessionStore(session_path),
            note_store=NoteStore(notes_path),
            base_url=base_url,
            timeout=timeout,
            exit_nonzero_on_error=get_app_config().application.cli.exit_nonzero_on_error,
        )

    @property
    def session(self) -> Session | None:
        """The stored session, read from disk on first access."""
        if not self._session_loaded:
            self._session = self.session_store.load()
            self._session_loaded = True
        return self._session

    def save_session(self, session: Session) -> None:
        self.session_store.save(session)
        self._session = session
        self._session_loaded = True

    def require_session(self, action: str) -> Session:
        """
        Return the stored session or fail before any request is made.

        Args:
            action: What the user tried to do, for the error message

        Raises:
            AuthenticationError: If nobody is logged in
        """
        session = self.session
        if session is None or not session.token:
            raise AuthenticationError(f"You must be logged in to {action}.")
        return session

    def require_admin(self, action: str) -> Session:
        """
        Return the stored session if its role is Admin.

        Raises:
            AuthorizationError: If nobody is logged in or the role is not Admin
        """
        session = self.session
        if not is_admin(session):
            raise AuthorizationError(f"You must be an admin to {action}.")
        return session

    @asynccontextmanager
    async def service(self, session: Session | None = None) -> AsyncIterator[BookingService]:
        """
        Open a booking service bound to ``session``'s token.

        Usage:
            async with app.service(session) as service:
                routes = await service.list_routes()
        """
        client = APIClient(
            base_url=self.base_url,
            timeout=self.timeout,
            token=session.token if session else None,
            transport=self.transport,
        )
        try:
            yield BookingService(client)
        finally:
            await client.close()

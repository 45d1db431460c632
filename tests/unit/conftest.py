"""
Unit Test Fixtures.

Fixtures for unit tests - the booking service is replaced by an
httpx.MockTransport and local state lives under tmp_path. Unit tests
never touch the network or the user's home directory.
"""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import httpx
import pytest

from ntc_booking.cli.context import AppContext
from ntc_booking.schemas import Session
from ntc_booking.storage import NoteStore, SessionStore

BASE_URL = "http://booking.test/api"
API_PREFIX = "/api"


class ServiceStub:
    """
    In-memory stand-in for the booking service.

    Records every request and answers from canned responses keyed by
    (method, path). Unmatched requests get 200 with an empty JSON object.

    Usage:
        stub.respond("GET", "/admin/routes", json=[{"routeNumber": "R1"}])
        stub.fail("GET", "/schedules", httpx.ConnectError("Connection refused"))
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responses: dict[tuple[str, str], Callable[[httpx.Request], httpx.Response]] = {}

    def respond(
        self,
        method: str,
        path: str,
        status_code: int = 200,
        json: Any = None,
        text: str | None = None,
    ) -> None:
        def _reply(request: httpx.Request) -> httpx.Response:
            if text is not None:
                return httpx.Response(status_code, text=text)
            if json is None:
                return httpx.Response(status_code)
            return httpx.Response(status_code, json=json)

        self._responses[(method, path)] = _reply

    def fail(self, method: str, path: str, error: Exception) -> None:
        def _raise(request: httpx.Request) -> httpx.Response:
            raise error

        self._responses[(method, path)] = _raise

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix(API_PREFIX)
        reply = self._responses.get((request.method, path))
        if reply is None:
            return httpx.Response(200, json={})
        return reply(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)


@pytest.fixture
def service_stub() -> ServiceStub:
    return ServiceStub()


@pytest.fixture
def session_path(tmp_path: Path) -> Path:
    return tmp_path / "state" / "session.json"


@pytest.fixture
def notes_path(tmp_path: Path) -> Path:
    return tmp_path / "state" / "notes.json"


@pytest.fixture
def make_context(session_path: Path, notes_path: Path, service_stub: ServiceStub) -> Callable[..., AppContext]:
    """
    Build a fresh AppContext over the same files, as a new process would.

    Usage:
        runner.invoke(app, ["view-routes"], obj=make_context())
    """

    def _make(exit_nonzero_on_error: bool = True) -> AppContext:
        return AppContext(
            session_store=SessionStore(session_path),
            note_store=NoteStore(notes_path),
            base_url=BASE_URL,
            timeout=5.0,
            exit_nonzero_on_error=exit_nonzero_on_error,
            transport=service_stub.transport,
        )

    return _make


@pytest.fixture
def store_session(session_path: Path) -> Callable[[str], Session]:
    """Persist a session with the given role, as a previous login would."""

    def _store(role: str = "Admin", token: str = "tok-123") -> Session:
        session = Session(name="Ann Perera", email="ann@example.com", role=role, token=token)
        SessionStore(session_path).save(session)
        return session

    return _store

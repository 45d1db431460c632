"""
Integration Tests for cli.py.

Runs the CLI as a separate process, the way a user would. Only local
commands and precondition failures are exercised, so no request ever
reaches the booking service.
"""

import os
import subprocess
import sys
from pathlib import Path

import pytest

# Project root for running commands
PROJECT_ROOT = Path(__file__).parent.parent.parent


@pytest.fixture
def run_cli(tmp_path):
    """Run cli.py with its state directory under tmp_path."""
    env = {**os.environ, "NTC_BOOKING_HOME": str(tmp_path / "state")}

    def _run(*args: str) -> subprocess.CompletedProcess:
        return subprocess.run(
            [sys.executable, "cli.py", *args],
            cwd=PROJECT_ROOT,
            capture_output=True,
            text=True,
            env=env,
        )

    return _run


class TestCLIEntry:
    """Integration tests for the cli.py entry point."""

    def test_help_returns_zero_exit_code(self, run_cli):
        result = run_cli("--help")

        assert result.returncode == 0
        assert "Usage:" in result.stdout
        assert "view-schedules" in result.stdout

    def test_version(self, run_cli):
        result = run_cli("--version")

        assert result.returncode == 0
        assert result.stdout.strip() == "1.0.0"

    def test_notes_persist_between_processes(self, run_cli, tmp_path):
        assert run_cli("add-note", "first").returncode == 0
        assert run_cli("add-note", "second").returncode == 0

        result = run_cli("view-notes")

        assert result.returncode == 0
        assert result.stdout.splitlines() == ["Notes:", "1. first", "2. second"]
        assert (tmp_path / "state" / "notes.json").is_file()
        assert not (tmp_path / "state" / "session.json").exists()

    def test_admin_command_without_login_fails(self, run_cli):
        result = run_cli("view-buses")

        assert result.returncode == 1
        assert result.stdout == ""
        assert "Error: You must be an admin to view buses and their routes." in result.stderr

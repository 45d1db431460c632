#!/usr/bin/env python3
"""
NTC Booking CLI.

Entry point when running from a checkout without installing:

    python cli.py --help
    python cli.py login ann@example.com secret
    python cli.py view-schedules

Installed, the same application is available as ``ntc-booking``.
"""

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ntc_booking.cli.main import app

if __name__ == "__main__":
    app()

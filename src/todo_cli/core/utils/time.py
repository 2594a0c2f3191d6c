"""Shared date helpers."""

from __future__ import annotations

from datetime import date


def local_today() -> date:
    """Return today's date in local time."""
    return date.today()

"""Upcoming-window record."""

from __future__ import annotations

from datetime import datetime

from indycar.models._base import OutputModel


class UpcomingRace(OutputModel):
    name: str | None = None
    date: str | None = None
    days_until: int


class UpcomingWindow(OutputModel):
    days_window: int
    upcoming_count: int
    races: list[UpcomingRace]
    fetched_at: datetime

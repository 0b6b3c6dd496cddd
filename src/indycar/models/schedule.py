"""Full season schedule record."""

from __future__ import annotations

from datetime import datetime

from indycar.models._base import OutputModel


class ScheduledRace(OutputModel):
    name: str | None = None
    date: str | None = None
    end_date: str | None = None


class Schedule(OutputModel):
    season: int | None = None
    total_races: int
    races: list[ScheduledRace]
    fetched_at: datetime

"""Season overview record (free entrypoint)."""

from __future__ import annotations

from datetime import datetime

from indycar.models._base import OutputModel


class SeasonInfo(OutputModel):
    year: int | None = None
    name: str | None = None
    abbreviation: str | None = None


class NextEvent(OutputModel):
    """First event in upstream order, as ESPN lists it."""

    id: str | None = None
    name: str | None = None
    date: str | None = None
    status: str | None = None
    broadcast: str | None = None


class Overview(OutputModel):
    season: SeasonInfo
    next_race: NextEvent | None = None
    upcoming_count: int
    total_races: int
    fetched_at: datetime
    data_source: str

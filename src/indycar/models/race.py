"""Race search result record."""

from __future__ import annotations

from datetime import datetime

from indycar.models._base import OutputModel


class RaceMatch(OutputModel):
    """Calendar entry matching the query, joined to at most one event."""

    name: str | None = None
    date: str | None = None
    event_id: str | None = None
    status: str | None = None
    broadcast: str | None = None
    venue: str | None = None


class RaceSearch(OutputModel):
    query: str
    match_count: int
    races: list[RaceMatch]
    fetched_at: datetime

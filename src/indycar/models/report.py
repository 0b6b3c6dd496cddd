"""Composite season report record."""

from __future__ import annotations

from datetime import datetime

from indycar.models._base import OutputModel


class SeasonProgress(OutputModel):
    year: int | None = None
    name: str | None = None
    total_races: int
    completed_races: int
    remaining_races: int


class NextRace(OutputModel):
    name: str | None = None
    date: str | None = None
    days_until: int | None = None  # None when the start date is unknown


class RaceDate(OutputModel):
    name: str | None = None
    date: str | None = None


class SplitSchedule(OutputModel):
    completed: list[RaceDate]
    upcoming: list[RaceDate]


class NewsItem(OutputModel):
    headline: str | None = None
    description: str | None = None
    published: str | None = None
    url: str | None = None


class Report(OutputModel):
    season: SeasonProgress
    next_race: NextRace | None = None
    schedule: SplitSchedule
    latest_news: list[NewsItem]
    generated_at: datetime
    data_sources: list[str]

"""Scoreboard payload models (league, calendar, events)."""

from __future__ import annotations

from typing import Annotated

from pydantic import WrapValidator

from indycar.models._base import UpstreamModel, blank_on_mismatch


class LeagueSeason(UpstreamModel):
    year: int | None = None


class CalendarEntry(UpstreamModel):
    """One race weekend on the league calendar."""

    label: str | None = None
    startDate: str | None = None
    endDate: str | None = None


class League(UpstreamModel):
    name: str | None = None
    abbreviation: str | None = None
    season: LeagueSeason | None = None
    calendar: list[Annotated[CalendarEntry, WrapValidator(blank_on_mismatch)]] | None = None


class StatusType(UpstreamModel):
    description: str | None = None


class CompetitionStatus(UpstreamModel):
    type: StatusType | None = None


class Venue(UpstreamModel):
    fullName: str | None = None


class Competition(UpstreamModel):
    status: CompetitionStatus | None = None
    broadcast: str | None = None
    venue: Venue | None = None


class Event(UpstreamModel):
    """Scheduled or completed race event with competition details."""

    id: str | None = None
    name: str | None = None
    date: str | None = None
    competitions: list[Annotated[Competition, WrapValidator(blank_on_mismatch)]] | None = None


class Scoreboard(UpstreamModel):
    """Top-level ``/scoreboard`` payload."""

    leagues: list[Annotated[League, WrapValidator(blank_on_mismatch)]] | None = None
    events: list[Annotated[Event, WrapValidator(blank_on_mismatch)]] | None = None

    def summary(self) -> str:
        races = sum(len(lg.calendar or []) for lg in self.leagues or [])
        return f"{races} calendar entries, {len(self.events or [])} events"

"""Pure projections from raw ESPN payloads to the published records.

Each function takes the current time explicitly and stamps it on the record,
so composite calls share one timestamp and tests stay deterministic.
"""

from __future__ import annotations

import math
from datetime import datetime, timedelta

from indycar import accessors
from indycar.models.digest import Headline, NewsDigest
from indycar.models.news import NewsFeed
from indycar.models.overview import NextEvent, Overview, SeasonInfo
from indycar.models.race import RaceMatch, RaceSearch
from indycar.models.report import (
    NewsItem,
    NextRace,
    RaceDate,
    Report,
    SeasonProgress,
    SplitSchedule,
)
from indycar.models.schedule import Schedule, ScheduledRace
from indycar.models.scoreboard import CalendarEntry, Scoreboard
from indycar.models.upcoming import UpcomingRace, UpcomingWindow

DAY = timedelta(days=1)
OVERVIEW_SAMPLE_SIZE = 3

OVERVIEW_SOURCE = "ESPN IndyCar API (live)"
REPORT_SOURCES = ("ESPN IndyCar Scoreboard API", "ESPN IndyCar News API")


def days_until(start: datetime, now: datetime) -> int:
    """Whole days from *now* to *start*, rounded up."""
    return math.ceil((start - now) / DAY)


def _starts_after(entry: CalendarEntry, now: datetime) -> bool:
    start = accessors.start_time(entry)
    return start is not None and start > now


def _starts_before(entry: CalendarEntry, now: datetime) -> bool:
    start = accessors.start_time(entry)
    return start is not None and start < now


def build_overview(scoreboard: Scoreboard, now: datetime) -> Overview:
    lg = accessors.league(scoreboard)
    cal = accessors.calendar(scoreboard)
    evts = accessors.events(scoreboard)

    next_race = None
    if evts:
        # Upstream order decides the "next" event; no date check here.
        first = evts[0]
        next_race = NextEvent(
            id=first.id,
            name=first.name,
            date=first.date,
            status=accessors.event_status(first),
            broadcast=accessors.event_broadcast(first),
        )

    upcoming = [race for race in cal if _starts_after(race, now)][:OVERVIEW_SAMPLE_SIZE]

    return Overview(
        season=SeasonInfo(
            year=accessors.season_year(scoreboard),
            name=lg.name if lg else None,
            abbreviation=lg.abbreviation if lg else None,
        ),
        next_race=next_race,
        upcoming_count=len(upcoming),
        total_races=len(cal),
        fetched_at=now,
        data_source=OVERVIEW_SOURCE,
    )


def build_schedule(scoreboard: Scoreboard, now: datetime, year: int | None = None) -> Schedule:
    """Map every calendar entry to a schedule row.

    *year* is accepted but does not filter: the scoreboard only ever carries
    the current season.
    """
    races = [
        ScheduledRace(name=race.label, date=race.startDate, end_date=race.endDate)
        for race in accessors.calendar(scoreboard)
    ]
    return Schedule(
        season=accessors.season_year(scoreboard),
        total_races=len(races),
        races=races,
        fetched_at=now,
    )


def search_races(scoreboard: Scoreboard, query: str, now: datetime) -> RaceSearch:
    """Case-insensitive substring search over calendar labels.

    Each hit is joined to the first event (in upstream order) whose name
    matches the query and contains the calendar label.
    """
    needle = query.lower()
    matching_races = [
        race for race in accessors.calendar(scoreboard)
        if race.label is not None and needle in race.label.lower()
    ]
    matching_events = [
        event for event in accessors.events(scoreboard)
        if event.name is not None and needle in event.name.lower()
    ]

    results: list[RaceMatch] = []
    for race in matching_races:
        label = race.label.lower()  # type: ignore[union-attr]
        event = next(
            (e for e in matching_events if label in e.name.lower()),  # type: ignore[union-attr]
            None,
        )
        results.append(RaceMatch(
            name=race.label,
            date=race.startDate,
            event_id=event.id if event else None,
            status=accessors.event_status(event) if event else None,
            broadcast=accessors.event_broadcast(event) if event else None,
            venue=accessors.event_venue(event) if event else None,
        ))

    return RaceSearch(
        query=query,
        match_count=len(results),
        races=results,
        fetched_at=now,
    )


def build_news_digest(feed: NewsFeed, limit: int, now: datetime) -> NewsDigest:
    headlines = [
        Headline(
            id=article.id,
            headline=article.headline,
            description=article.description,
            published=article.published,
            url=accessors.article_url(article),
            image_url=accessors.article_image_url(article),
        )
        for article in accessors.articles(feed)[:limit]
    ]
    return NewsDigest(total_articles=len(headlines), articles=headlines, fetched_at=now)


def build_upcoming_window(
    scoreboard: Scoreboard, days: int, limit: int, now: datetime,
) -> UpcomingWindow:
    """Races starting after *now* and no later than *days* ahead, in calendar order."""
    cutoff = now + days * DAY
    races: list[UpcomingRace] = []
    for race in accessors.calendar(scoreboard):
        start = accessors.start_time(race)
        if start is None or not (now < start <= cutoff):
            continue
        races.append(UpcomingRace(
            name=race.label,
            date=race.startDate,
            days_until=days_until(start, now),
        ))
    races = races[:limit]
    return UpcomingWindow(
        days_window=days,
        upcoming_count=len(races),
        races=races,
        fetched_at=now,
    )


def split_calendar(
    calendar: list[CalendarEntry], now: datetime,
) -> tuple[list[CalendarEntry], list[CalendarEntry]]:
    """Split into (completed, upcoming).

    Completed races started strictly before *now*; everything else, including
    entries without a usable start date, is upcoming.
    """
    completed = [race for race in calendar if _starts_before(race, now)]
    upcoming = [race for race in calendar if not _starts_before(race, now)]
    return completed, upcoming


def build_report(
    scoreboard: Scoreboard, feed: NewsFeed, news_limit: int, now: datetime,
) -> Report:
    lg = accessors.league(scoreboard)
    cal = accessors.calendar(scoreboard)
    completed, upcoming = split_calendar(cal, now)

    next_race = None
    if upcoming:
        first = upcoming[0]
        start = accessors.start_time(first)
        next_race = NextRace(
            name=first.label,
            date=first.startDate,
            days_until=days_until(start, now) if start is not None else None,
        )

    news = [
        NewsItem(
            headline=article.headline,
            description=article.description,
            published=article.published,
            url=accessors.article_url(article),
        )
        for article in accessors.articles(feed)[:news_limit]
    ]

    return Report(
        season=SeasonProgress(
            year=accessors.season_year(scoreboard),
            name=lg.name if lg else None,
            total_races=len(cal),
            completed_races=len(completed),
            remaining_races=len(upcoming),
        ),
        next_race=next_race,
        schedule=SplitSchedule(
            completed=[RaceDate(name=r.label, date=r.startDate) for r in completed],
            upcoming=[RaceDate(name=r.label, date=r.startDate) for r in upcoming],
        ),
        latest_news=news,
        generated_at=now,
        data_sources=list(REPORT_SOURCES),
    )

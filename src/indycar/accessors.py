"""Null-safe readers over the partial ESPN schema.

Every accessor returns ``None`` for a missing path segment and an empty list
for a missing collection, so callers can filter and map without guards.
"""

from __future__ import annotations

from datetime import UTC, datetime

from indycar.models.news import Article, NewsFeed
from indycar.models.scoreboard import (
    CalendarEntry,
    Competition,
    Event,
    League,
    LeagueSeason,
    Scoreboard,
)


def league(scoreboard: Scoreboard) -> League | None:
    """Return the first league on the scoreboard."""
    return scoreboard.leagues[0] if scoreboard.leagues else None


def season(scoreboard: Scoreboard) -> LeagueSeason | None:
    lg = league(scoreboard)
    return lg.season if lg is not None else None


def season_year(scoreboard: Scoreboard) -> int | None:
    s = season(scoreboard)
    return s.year if s is not None else None


def calendar(scoreboard: Scoreboard) -> list[CalendarEntry]:
    lg = league(scoreboard)
    if lg is None or lg.calendar is None:
        return []
    return list(lg.calendar)


def events(scoreboard: Scoreboard) -> list[Event]:
    return list(scoreboard.events or [])


def articles(feed: NewsFeed) -> list[Article]:
    return list(feed.articles or [])


def _competition(event: Event) -> Competition | None:
    return event.competitions[0] if event.competitions else None


def event_status(event: Event) -> str | None:
    """Return the human status of the event's first competition, e.g. "Scheduled"."""
    comp = _competition(event)
    if comp is None or comp.status is None or comp.status.type is None:
        return None
    return comp.status.type.description


def event_broadcast(event: Event) -> str | None:
    comp = _competition(event)
    return comp.broadcast if comp is not None else None


def event_venue(event: Event) -> str | None:
    comp = _competition(event)
    if comp is None or comp.venue is None:
        return None
    return comp.venue.fullName


def article_url(article: Article) -> str | None:
    if article.links is None or article.links.web is None:
        return None
    return article.links.web.href


def article_image_url(article: Article) -> str | None:
    return article.images[0].url if article.images else None


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse an ESPN timestamp ("2025-03-02T17:30Z" or "2025-03-02").

    Values without an offset are read as UTC. Unparseable values are None.
    """
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def start_time(entry: CalendarEntry) -> datetime | None:
    return parse_timestamp(entry.startDate)

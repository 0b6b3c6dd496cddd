"""Async service layer: fetch from ESPN, then project.

``now`` defaults to the wall clock read after the upstream data arrived;
tests pass it explicitly.
"""

from __future__ import annotations

import asyncio
from datetime import UTC, datetime

from indycar import projections
from indycar.api_logging import log_service_call
from indycar.client import AsyncIndyCarClient
from indycar.models.digest import NewsDigest
from indycar.models.overview import Overview
from indycar.models.race import RaceSearch
from indycar.models.report import Report
from indycar.models.schedule import Schedule
from indycar.models.upcoming import UpcomingWindow


def utc_now() -> datetime:
    return datetime.now(UTC)


@log_service_call
async def overview(client: AsyncIndyCarClient, now: datetime | None = None) -> Overview:
    board = await client.scoreboard()
    return projections.build_overview(board, now or utc_now())


@log_service_call
async def schedule(
    client: AsyncIndyCarClient, year: int | None = None, now: datetime | None = None,
) -> Schedule:
    board = await client.scoreboard()
    return projections.build_schedule(board, now or utc_now(), year=year)


@log_service_call
async def race(client: AsyncIndyCarClient, query: str, now: datetime | None = None) -> RaceSearch:
    board = await client.scoreboard()
    return projections.search_races(board, query, now or utc_now())


@log_service_call
async def news(client: AsyncIndyCarClient, limit: int = 10, now: datetime | None = None) -> NewsDigest:
    feed = await client.news()
    return projections.build_news_digest(feed, limit, now or utc_now())


@log_service_call
async def upcoming(
    client: AsyncIndyCarClient, days: int = 30, limit: int = 5, now: datetime | None = None,
) -> UpcomingWindow:
    board = await client.scoreboard()
    return projections.build_upcoming_window(board, days, limit, now or utc_now())


@log_service_call
async def report(client: AsyncIndyCarClient, news_limit: int = 5, now: datetime | None = None) -> Report:
    """Fetch scoreboard and news concurrently; either failure fails the report."""
    board, feed = await asyncio.gather(client.scoreboard(), client.news())
    return projections.build_report(board, feed, news_limit, now or utc_now())

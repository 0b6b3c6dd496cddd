"""Entrypoint registrations: key, description, input schema, price, handler."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable

from pydantic import BaseModel

from indycar import service
from indycar.client import AsyncIndyCarClient
from indycar.models._base import OutputModel
from indycar.models.inputs import (
    NewsInput,
    OverviewInput,
    RaceInput,
    ReportInput,
    ScheduleInput,
    UpcomingInput,
)

Handler = Callable[[AsyncIndyCarClient, Any], Awaitable[OutputModel]]


@dataclass(frozen=True)
class Entrypoint:
    key: str
    description: str
    input_model: type[BaseModel]
    price: int  # smallest currency unit; 0 means free
    handler: Handler

    def describe(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "description": self.description,
            "price": self.price,
            "inputSchema": self.input_model.model_json_schema(by_alias=True),
        }


async def _overview(client: AsyncIndyCarClient, _: OverviewInput) -> OutputModel:
    return await service.overview(client)


async def _schedule(client: AsyncIndyCarClient, params: ScheduleInput) -> OutputModel:
    return await service.schedule(client, year=params.year)


async def _race(client: AsyncIndyCarClient, params: RaceInput) -> OutputModel:
    return await service.race(client, params.query)


async def _news(client: AsyncIndyCarClient, params: NewsInput) -> OutputModel:
    return await service.news(client, limit=params.limit)


async def _upcoming(client: AsyncIndyCarClient, params: UpcomingInput) -> OutputModel:
    return await service.upcoming(client, days=params.days, limit=params.limit)


async def _report(client: AsyncIndyCarClient, params: ReportInput) -> OutputModel:
    return await service.report(client, news_limit=params.news_limit)


ENTRYPOINTS: dict[str, Entrypoint] = {
    ep.key: ep
    for ep in (
        Entrypoint(
            key="overview",
            description="Free overview of current IndyCar season and next race - try before you buy",
            input_model=OverviewInput,
            price=0,
            handler=_overview,
        ),
        Entrypoint(
            key="schedule",
            description="Full IndyCar season schedule with all race dates and venues",
            input_model=ScheduleInput,
            price=1000,
            handler=_schedule,
        ),
        Entrypoint(
            key="race",
            description="Detailed info for a specific race by name search",
            input_model=RaceInput,
            price=2000,
            handler=_race,
        ),
        Entrypoint(
            key="news",
            description="Latest IndyCar news headlines and articles",
            input_model=NewsInput,
            price=2000,
            handler=_news,
        ),
        Entrypoint(
            key="upcoming",
            description="Get upcoming races within a time window",
            input_model=UpcomingInput,
            price=2000,
            handler=_upcoming,
        ),
        Entrypoint(
            key="report",
            description="Comprehensive IndyCar report: season overview, full schedule, and latest news",
            input_model=ReportInput,
            price=5000,
            handler=_report,
        ),
    )
}

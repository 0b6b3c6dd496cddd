"""Validated input schemas for each entrypoint."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class EntrypointInput(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class OverviewInput(EntrypointInput):
    pass


class ScheduleInput(EntrypointInput):
    # Accepted for compatibility; the schedule is never filtered by year.
    year: int | None = None


class RaceInput(EntrypointInput):
    query: str = Field(
        description='Race name to search for (e.g., "Indianapolis 500", "Long Beach")',
    )


class NewsInput(EntrypointInput):
    limit: int = Field(10, ge=1, le=25)


class UpcomingInput(EntrypointInput):
    days: int = Field(30, ge=1, le=365)
    limit: int = Field(5, ge=1, le=20)


class ReportInput(EntrypointInput):
    news_limit: int = Field(5, ge=1, le=10)

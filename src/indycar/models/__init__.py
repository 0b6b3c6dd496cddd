"""IndyCar data models."""

from indycar.models.digest import Headline, NewsDigest
from indycar.models.inputs import (
    NewsInput,
    OverviewInput,
    RaceInput,
    ReportInput,
    ScheduleInput,
    UpcomingInput,
)
from indycar.models.news import Article, NewsFeed
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
from indycar.models.scoreboard import CalendarEntry, Event, League, Scoreboard
from indycar.models.upcoming import UpcomingRace, UpcomingWindow

__all__ = [
    "Article",
    "CalendarEntry",
    "Event",
    "Headline",
    "League",
    "NewsDigest",
    "NewsFeed",
    "NewsInput",
    "NewsItem",
    "NextEvent",
    "NextRace",
    "Overview",
    "OverviewInput",
    "RaceDate",
    "RaceInput",
    "RaceMatch",
    "RaceSearch",
    "Report",
    "ReportInput",
    "Schedule",
    "ScheduleInput",
    "ScheduledRace",
    "Scoreboard",
    "SeasonInfo",
    "SeasonProgress",
    "SplitSchedule",
    "UpcomingInput",
    "UpcomingRace",
    "UpcomingWindow",
]

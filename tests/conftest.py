"""Shared test fixtures and sample ESPN responses."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

import pytest

BASE_URL = "https://site.api.espn.com/apis/site/v2/sports/racing/irl"

SAMPLE_SCOREBOARD = {
    "leagues": [
        {
            "id": "2040",
            "name": "IndyCar Series",
            "abbreviation": "IRL",
            "season": {"year": 2024, "type": 2},
            "calendar": [
                {
                    "label": "Firestone Grand Prix of St. Petersburg",
                    "startDate": "2024-03-10T16:30Z",
                    "endDate": "2024-03-10T19:30Z",
                },
                {
                    "label": "Indianapolis 500",
                    "startDate": "2024-05-26T16:45Z",
                    "endDate": "2024-05-26T20:00Z",
                },
                {
                    "label": "Grand Prix of Long Beach",
                    "startDate": "2024-06-10T20:00Z",
                    "endDate": "2024-06-10T23:00Z",
                },
                {
                    "label": "Music City Grand Prix",
                    "startDate": "2024-09-15T19:00Z",
                    "endDate": "2024-09-15T22:00Z",
                },
            ],
        }
    ],
    "events": [
        {
            "id": "401650001",
            "name": "108th Indianapolis 500",
            "date": "2024-05-26T16:45Z",
            "competitions": [
                {
                    "id": "401650001",
                    "status": {"type": {"name": "STATUS_SCHEDULED", "description": "Scheduled"}},
                    "broadcast": "NBC",
                    "venue": {"id": "1", "fullName": "Indianapolis Motor Speedway"},
                }
            ],
        },
        {
            "id": 401650002,
            "name": "Acura Grand Prix of Long Beach",
            "date": "2024-06-10T20:00Z",
            "competitions": [
                {
                    "status": {"type": {"description": "Scheduled"}},
                    "broadcast": "NBC",
                    "venue": {"fullName": "Streets of Long Beach"},
                }
            ],
        },
    ],
}

SAMPLE_NEWS = {
    "header": "IndyCar News",
    "articles": [
        {
            "id": 40001 + i,
            "headline": f"Headline {i}",
            "description": f"Story {i}",
            "published": f"2024-05-{i + 1:02d}T12:00:00Z",
            "links": {"web": {"href": f"https://www.espn.com/racing/story/{i}"}},
            "images": [{"url": f"https://a.espncdn.com/photo/{i}.jpg"}],
        }
        for i in range(30)
    ],
}

NOW = datetime(2024, 6, 1, tzinfo=UTC)


def _make_race(label: str | None, start: str | None, end: str | None = None) -> dict:
    race: dict = {}
    if label is not None:
        race["label"] = label
    if start is not None:
        race["startDate"] = start
    if end is not None:
        race["endDate"] = end
    return race


def _make_scoreboard(calendar: list[dict], events: list[dict] | None = None, year: int = 2024) -> dict:
    return {
        "leagues": [
            {
                "name": "IndyCar Series",
                "abbreviation": "IRL",
                "season": {"year": year},
                "calendar": calendar,
            }
        ],
        "events": events or [],
    }


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def scoreboard_payload() -> dict:
    return SAMPLE_SCOREBOARD


@pytest.fixture
def news_payload() -> dict:
    return SAMPLE_NEWS


@pytest.fixture
def make_race():
    """Factory fixture for creating calendar entry dicts."""
    return _make_race


@pytest.fixture
def make_scoreboard():
    """Factory fixture for creating scoreboard payload dicts."""
    return _make_scoreboard


@pytest.fixture(autouse=True)
def _isolated_api_log(tmp_path):
    """Send the API call log to tmp_path and drop the cached logger afterwards."""
    import indycar.api_logging as mod

    old_logger = mod._logger
    old_dir = mod._LOG_DIR
    old_file = mod._LOG_FILE

    named_logger = logging.getLogger(mod.LOGGER_NAME)
    named_logger.handlers.clear()

    mod._logger = None
    mod.configure(str(tmp_path))

    yield tmp_path

    for h in named_logger.handlers[:]:
        h.close()
        named_logger.removeHandler(h)
    mod._logger = old_logger
    mod._LOG_DIR = old_dir
    mod._LOG_FILE = old_file

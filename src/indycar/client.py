"""Public client classes for the ESPN IndyCar API."""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from indycar._http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, AsyncTransport, SyncTransport
from indycar.api_logging import log_api_call
from indycar.exceptions import UpstreamMalformedError
from indycar.models.news import NewsFeed
from indycar.models.scoreboard import Scoreboard

SCOREBOARD_PATH = "/scoreboard"
NEWS_PATH = "/news"

T = TypeVar("T", bound=BaseModel)


def _validate(model_type: type[T], data: dict[str, Any]) -> T:
    """Validate a payload against one of the partial schema models."""
    try:
        return model_type.model_validate(data)
    except ValidationError as exc:
        raise UpstreamMalformedError(
            f"Failed to read {model_type.__name__} response: {exc}"
        ) from exc


class IndyCarClient:
    """Synchronous client for the ESPN IndyCar API.

    Usage:
        with IndyCarClient() as espn:
            board = espn.scoreboard()
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._transport = SyncTransport(base_url=base_url, timeout=timeout)

    def __enter__(self) -> IndyCarClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    @log_api_call
    def scoreboard(self) -> Scoreboard:
        """Get the league, its season calendar and current events."""
        return _validate(Scoreboard, self._transport.get(SCOREBOARD_PATH))

    @log_api_call
    def news(self) -> NewsFeed:
        """Get the latest IndyCar news articles."""
        return _validate(NewsFeed, self._transport.get(NEWS_PATH))


class AsyncIndyCarClient:
    """Asynchronous client for the ESPN IndyCar API.

    Usage:
        async with AsyncIndyCarClient() as espn:
            board, feed = await asyncio.gather(espn.scoreboard(), espn.news())
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._transport = AsyncTransport(base_url=base_url, timeout=timeout)

    async def __aenter__(self) -> AsyncIndyCarClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection."""
        await self._transport.close()

    @log_api_call
    async def scoreboard(self) -> Scoreboard:
        """Get the league, its season calendar and current events."""
        return _validate(Scoreboard, await self._transport.get(SCOREBOARD_PATH))

    @log_api_call
    async def news(self) -> NewsFeed:
        """Get the latest IndyCar news articles."""
        return _validate(NewsFeed, await self._transport.get(NEWS_PATH))

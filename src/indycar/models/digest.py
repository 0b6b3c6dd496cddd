"""News digest record."""

from __future__ import annotations

from datetime import datetime

from indycar.models._base import OutputModel


class Headline(OutputModel):
    id: str | None = None
    headline: str | None = None
    description: str | None = None
    published: str | None = None
    url: str | None = None
    image_url: str | None = None


class NewsDigest(OutputModel):
    total_articles: int
    articles: list[Headline]
    fetched_at: datetime

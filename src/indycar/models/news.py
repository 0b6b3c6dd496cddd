"""News payload models."""

from __future__ import annotations

from typing import Annotated

from pydantic import WrapValidator

from indycar.models._base import UpstreamModel, blank_on_mismatch


class WebLink(UpstreamModel):
    href: str | None = None


class ArticleLinks(UpstreamModel):
    web: WebLink | None = None


class ArticleImage(UpstreamModel):
    url: str | None = None


class Article(UpstreamModel):
    """News article as published by ESPN."""

    id: str | None = None
    headline: str | None = None
    description: str | None = None
    published: str | None = None
    links: ArticleLinks | None = None
    images: list[Annotated[ArticleImage, WrapValidator(blank_on_mismatch)]] | None = None


class NewsFeed(UpstreamModel):
    """Top-level ``/news`` payload."""

    articles: list[Annotated[Article, WrapValidator(blank_on_mismatch)]] | None = None

    def summary(self) -> str:
        return f"{len(self.articles or [])} articles"

"""News article model returned by the news proxy."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class NewsArticle(BaseModel):
    """Simplified NewsAPI article."""

    model_config = ConfigDict(populate_by_name=True)

    title: str
    url: str
    source: str
    published_at: str = Field(alias="publishedAt")

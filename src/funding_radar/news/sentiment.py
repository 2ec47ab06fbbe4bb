"""Headline tone — keyword counts over article titles."""

from __future__ import annotations

from collections.abc import Iterable

from funding_radar.models import NewsArticle

BULLISH_WORDS = ("bullish", "gain", "rise", "surge", "breakout")
BEARISH_WORDS = ("bearish", "fall", "drop", "crash", "sell-off")


def headline_tone(articles: Iterable[NewsArticle]) -> str:
    positive = negative = 0
    for article in articles:
        title = article.title.lower()
        if any(w in title for w in BULLISH_WORDS):
            positive += 1
        if any(w in title for w in BEARISH_WORDS):
            negative += 1

    if positive > negative * 2:
        return "Bullish News"
    if negative > positive * 2:
        return "Bearish News"
    if positive > negative:
        return "Slightly Bullish News"
    if negative > positive:
        return "Slightly Bearish News"
    return "Neutral News"

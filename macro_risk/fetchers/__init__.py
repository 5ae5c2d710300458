"""News fetching layer."""

from .newsapi import NewsAPIError, fetch_latest_news

__all__ = ["NewsAPIError", "fetch_latest_news"]

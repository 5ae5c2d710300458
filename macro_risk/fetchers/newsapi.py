from __future__ import annotations

import os
from typing import Any, Dict, List, Optional

import requests

from ..models import RawArticle
from ..processors import batch_normalize
from ..utils.config_loader import NewsQuery
from ..utils.logging import get_logger

logger = get_logger("mr.fetchers.newsapi")

_DEFAULT_HEADERS: Dict[str, str] = {"User-Agent": "EventIntelligencePlatform/1.0"}

# NewsAPI replaces articles pulled by the publisher with this placeholder
_REMOVED_TITLE = "[Removed]"


class NewsAPIError(RuntimeError):
    """Raised when NewsAPI cannot be reached or rejects the request."""


def _is_usable(entry: Dict[str, Any]) -> bool:
    title = entry.get("title")
    return bool(title) and title != _REMOVED_TITLE and bool(entry.get("url"))


def fetch_latest_news(
    query: NewsQuery | None = None,
    *,
    api_key: Optional[str] = None,
    session: Optional[requests.Session] = None,
    timeout: int = 30,
) -> List[RawArticle]:
    """Fetch the latest macro-relevant articles from NewsAPI.

    Keywords are combined with OR logic. Removed or incomplete articles are
    dropped and at most ``query.page_size`` articles are returned, with
    titles and descriptions cleaned of markup.
    """
    query = query or NewsQuery()
    key = api_key or os.environ.get("NEWS_API_KEY")
    if not key:
        raise NewsAPIError("NEWS_API_KEY is not set in environment.")

    params = {
        "q": query.query_string,
        "language": query.language,
        "sortBy": query.sort_by,
        "pageSize": str(query.page_size),
        "apiKey": key,
    }
    http = session or requests.Session()
    logger.debug("Fetching NewsAPI articles from %s (q=%s)", query.endpoint, params["q"])
    try:
        resp = http.get(query.endpoint, params=params, headers=_DEFAULT_HEADERS, timeout=timeout)
    except requests.RequestException as exc:
        logger.warning("NewsAPI request error for %s: %s", query.endpoint, exc)
        raise

    if resp.status_code >= 400:
        body = resp.text or ""
        logger.warning("NewsAPI fetch failed (%s)", resp.status_code)
        raise NewsAPIError(f"NewsAPI HTTP {resp.status_code}: {body[:200]}")

    try:
        data = resp.json()
    except ValueError as exc:
        raise NewsAPIError(f"NewsAPI returned a non-JSON body: {exc}") from exc

    if data.get("status") != "ok":
        raise NewsAPIError(f"NewsAPI error: {data.get('message') or data.get('status')}")

    entries = [e for e in (data.get("articles") or []) if isinstance(e, dict) and _is_usable(e)]
    articles = batch_normalize(RawArticle.from_mapping(e) for e in entries)
    articles = articles[: query.page_size]
    logger.info("Fetched %d NewsAPI article(s) (%d returned by API)", len(articles), len(data.get("articles") or []))
    return articles

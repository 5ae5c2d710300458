from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple
from urllib.parse import urlparse

import yaml


class ConfigError(Exception):
    """Raised when the configuration file is invalid or missing required fields."""


DEFAULT_ENDPOINT = "https://newsapi.org/v2/everything"

# Macro-relevant search terms; quoted phrases are sent verbatim to NewsAPI
DEFAULT_KEYWORDS: Tuple[str, ...] = (
    "war",
    "oil",
    "inflation",
    '"interest rates"',
    '"central bank"',
    '"supply chain"',
    "geopolitical",
)

MAX_PAGE_SIZE = 100


@dataclass(slots=True)
class NewsQuery:
    """Search parameters for the NewsAPI ``everything`` endpoint."""

    endpoint: str = DEFAULT_ENDPOINT
    keywords: List[str] = field(default_factory=lambda: list(DEFAULT_KEYWORDS))
    language: str = "en"
    sort_by: str = "publishedAt"
    page_size: int = 20

    @property
    def query_string(self) -> str:
        return " OR ".join(self.keywords)


def _validate_newsapi_dict(entry: dict) -> None:
    """Validate the ``newsapi`` mapping from YAML.

    All fields are optional:
      - endpoint: absolute http(s) URL
      - keywords: non-empty list[str]
      - language, sort_by: str
      - page_size: int in 1..100
    """
    if "endpoint" in entry and entry["endpoint"] is not None:
        url_str = str(entry["endpoint"]).strip()
        parsed = urlparse(url_str)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ConfigError(f"Invalid endpoint '{url_str}'. Must be absolute http(s) URL.")

    if "keywords" in entry and entry["keywords"] is not None:
        kws = entry["keywords"]
        if not isinstance(kws, list) or not all(isinstance(k, str) for k in kws):
            raise ConfigError("'keywords' must be a list of strings if provided")
        if not [k for k in kws if k.strip()]:
            raise ConfigError("'keywords' must contain at least one non-empty term")

    for key in ("language", "sort_by"):
        if key in entry and entry[key] is not None and not isinstance(entry[key], str):
            raise ConfigError(f"'{key}' must be a string if provided")

    if "page_size" in entry and entry["page_size"] is not None:
        size = entry["page_size"]
        # bool is an int subclass; reject it explicitly
        if isinstance(size, bool) or not isinstance(size, int):
            raise ConfigError("'page_size' must be an integer")
        if not 1 <= size <= MAX_PAGE_SIZE:
            raise ConfigError(f"'page_size' must be between 1 and {MAX_PAGE_SIZE}, got {size}")


def _coerce_query(entry: dict) -> NewsQuery:
    defaults = NewsQuery()
    keywords = entry.get("keywords") or defaults.keywords
    return NewsQuery(
        endpoint=str(entry.get("endpoint") or defaults.endpoint).strip(),
        keywords=[k.strip() for k in keywords if k.strip()],
        language=str(entry.get("language") or defaults.language).strip(),
        sort_by=str(entry.get("sort_by") or defaults.sort_by).strip(),
        page_size=int(entry.get("page_size") or defaults.page_size),
    )


def load_news_config(path: Path | str) -> NewsQuery:
    """Load ``news.yaml`` into a typed ``NewsQuery``.

    YAML structure:
      - Top-level mapping
      - Key ``newsapi``: mapping with optional fields
          - endpoint, keywords, language, sort_by, page_size

    A missing ``newsapi`` key yields the defaults. Unknown keys are ignored
    for forward compatibility.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    with config_path.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError("Top-level YAML must be a mapping")

    section = data.get("newsapi") or {}
    if not isinstance(section, dict):
        raise ConfigError("'newsapi' must be a mapping in the YAML configuration")

    _validate_newsapi_dict(section)
    return _coerce_query(section)

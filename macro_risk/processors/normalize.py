from __future__ import annotations

import html
import re
import unicodedata
from dataclasses import replace
from typing import Iterable, List

from bs4 import BeautifulSoup

from ..models import RawArticle
from ..utils.logging import get_logger

_whitespace_re = re.compile(r"\s+")
_control_chars_re = re.compile(r"[\u0000-\u0008\u000B\u000C\u000E-\u001F\u007F]")
# NewsAPI truncates long bodies with a trailer like "[+1234 chars]"
_truncation_marker_re = re.compile(r"\s*\[\+\d+ chars\]\s*$")

_PUNCT_TRANSLATION = {
    ord("\u2018"): "'",  # left single quote
    ord("\u2019"): "'",  # right single quote
    ord("\u201C"): '"',  # left double quote
    ord("\u201D"): '"',  # right double quote
    ord("\u2013"): "-",  # en dash
    ord("\u2014"): "-",  # em dash
    ord("\u00A0"): " ",  # non-breaking space
}

_logger = get_logger("mr.processors.normalize")


def clean_html_to_text(raw_html: str | None) -> str:
    """Strip tags, unescape entities and collapse whitespace."""
    if not raw_html:
        return ""
    if "<" not in raw_html and "&" not in raw_html:
        return _whitespace_re.sub(" ", raw_html).strip()

    soup = BeautifulSoup(raw_html, "html.parser")
    text = html.unescape(soup.get_text(" "))
    return _whitespace_re.sub(" ", text).strip()


def normalize_plain_text(text: str | None) -> str:
    """Normalize plain text for keyword scanning.

    - Strip BOM
    - Replace curly quotes/dashes and non-breaking spaces
    - Unicode normalize (NFKC)
    - Remove control characters and collapse whitespace
    """
    if not text:
        return ""

    if text.startswith("\ufeff"):
        text = text.lstrip("\ufeff")

    text = text.translate(_PUNCT_TRANSLATION)
    text = unicodedata.normalize("NFKC", text)
    text = _control_chars_re.sub(" ", text)
    return _whitespace_re.sub(" ", text).strip()


def normalize_raw_article(article: RawArticle) -> RawArticle:
    """Return a copy of ``article`` with cleaned title and description.

    A description that cleans down to nothing becomes ``None``.
    """
    title = normalize_plain_text(clean_html_to_text(article.title))
    description = None
    if article.description:
        cleaned = _truncation_marker_re.sub("", clean_html_to_text(article.description))
        description = normalize_plain_text(cleaned) or None
    return replace(article, title=title, description=description)


def batch_normalize(articles: Iterable[RawArticle]) -> List[RawArticle]:
    """Normalize articles, skipping any that fail with a warning."""
    normalized: List[RawArticle] = []
    for a in articles:
        try:
            normalized.append(normalize_raw_article(a))
        except Exception as exc:  # noqa: BLE001 - one bad article must not sink the batch
            _logger.warning("Failed to normalize article '%s': %s", getattr(a, "title", "?"), exc)
    return normalized

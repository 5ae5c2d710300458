"""Deterministic macro-risk classifier.

Per article:
  1) keyword matching  -> risk category
  2) severity scan     -> severity boost
  3) score formula     -> weight x 60 + boost, clamped to 0-100

Per batch:
  4) weighted average  -> overall score
  5) threshold mapping -> impact level
  6) category counts   -> breakdown percentages and dominant category

Everything here is a pure function of its input; nothing is cached between
calls.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Union

from ..models import AssessmentResult, ClassifiedArticle, RawArticle
from .aggregate import aggregate
from .matcher import match_keywords, pick_category
from .scoring import score_article

ArticleInput = Union[RawArticle, Mapping[str, Any]]


def _as_raw(article: ArticleInput) -> RawArticle:
    if isinstance(article, RawArticle):
        return article
    return RawArticle.from_mapping(article)


def classify_article(article: ArticleInput) -> ClassifiedArticle:
    raw = _as_raw(article)
    text = raw.text
    matches = match_keywords(text)
    category = pick_category(matches)
    return ClassifiedArticle(
        title=raw.title or "",
        description=raw.description or "",
        source=raw.source or "Unknown",
        url=raw.url or "",
        published_at=raw.published_at,
        risk_category=category,
        article_score=score_article(category, text),
        keyword_matches=matches,
    )


def classify(articles: Iterable[ArticleInput]) -> AssessmentResult:
    """Classify a batch of raw articles into a full assessment.

    Accepts ``RawArticle`` instances or NewsAPI-style mappings. The returned
    ``articles`` list has the same length and order as the input; an empty
    batch yields score 0, ``LOW`` and ``General``.
    """
    classified: List[ClassifiedArticle] = [classify_article(a) for a in articles]
    return aggregate(classified)

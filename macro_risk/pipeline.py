from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable, Optional

from .briefing import generate_executive_summary, summary_fallback_message
from .briefing.ai import AIClient
from .engine import classify
from .engine.classifier import ArticleInput
from .fetchers import fetch_latest_news
from .models import AssessmentResult
from .utils.config_loader import NewsQuery
from .utils.logging import get_logger

logger = get_logger("mr.pipeline")


class NoArticlesError(RuntimeError):
    """Raised when there is nothing to assess."""


@dataclass(slots=True)
class AnalysisReport:
    assessment: AssessmentResult
    ai_summary: Optional[str]
    generated_at: str


def run_analysis(
    *,
    articles: Optional[Iterable[ArticleInput]] = None,
    query: Optional[NewsQuery] = None,
    ai: Optional[AIClient] = None,
    summarize: bool = True,
    top_events: int = 5,
) -> AnalysisReport:
    """Fetch (unless ``articles`` is given), classify and brief one batch.

    A failing AI backend never fails the run: the summary falls back to an
    explanatory message and the scores are still returned.
    """
    if articles is None:
        batch = list(fetch_latest_news(query))
        if not batch:
            raise NoArticlesError("NewsAPI returned no articles. Verify your NEWS_API_KEY and daily quota.")
    else:
        batch = list(articles)
        if not batch:
            raise NoArticlesError("No articles supplied for assessment.")

    t0 = time.perf_counter()
    assessment = classify(batch)
    classify_ms = (time.perf_counter() - t0) * 1000
    logger.info(
        "Classified %d article(s): score=%d level=%s dominant=%s (%.1f ms)",
        assessment.article_count,
        assessment.overall_score,
        assessment.impact_level,
        assessment.dominant_category,
        classify_ms,
    )

    ai_summary: Optional[str] = None
    if summarize:
        t0 = time.perf_counter()
        try:
            ai_summary = generate_executive_summary(assessment, ai=ai, top_n=top_events)
        except Exception as exc:  # noqa: BLE001 - scoring must survive briefing failures
            logger.error("Executive summary failed: %s", exc)
            ai_summary = summary_fallback_message(exc)
        logger.info("Summary step finished in %.1f ms", (time.perf_counter() - t0) * 1000)

    return AnalysisReport(
        assessment=assessment,
        ai_summary=ai_summary,
        generated_at=datetime.now(timezone.utc).isoformat(timespec="seconds"),
    )

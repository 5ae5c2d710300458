from __future__ import annotations

from typing import List

from ..models import AssessmentResult
from .ai import AIClient, create_ai_client
from .ai.retry import generate_with_retry
from ..utils.logging import get_logger

logger = get_logger("mr.briefing.summary")

DESCRIPTION_CHARS = 150


def _format_breakdown(assessment: AssessmentResult) -> str:
    # Stable sort: equal percentages keep canonical category order
    ranked = sorted(
        ((cat, pct) for cat, pct in assessment.category_breakdown.items() if pct > 0),
        key=lambda kv: kv[1],
        reverse=True,
    )
    return " | ".join(f"{cat} {pct}%" for cat, pct in ranked)


def _format_top_events(assessment: AssessmentResult, *, top_n: int) -> str:
    top = sorted(assessment.articles, key=lambda a: a.article_score, reverse=True)[:top_n]
    blocks: List[str] = []
    for idx, art in enumerate(top, start=1):
        block = f"{idx}. [{art.risk_category} | Score {art.article_score}] {art.title}"
        if art.description:
            block += f"\n   {art.description[:DESCRIPTION_CHARS]}"
        blocks.append(block)
    return "\n\n".join(blocks)


def build_briefing_prompt(assessment: AssessmentResult, *, top_n: int = 5) -> str:
    """Build the analyst prompt from the snapshot, distribution and top-scoring events."""
    return (
        "You are a senior macroeconomic intelligence analyst briefing a C-suite audience.\n\n"
        "CURRENT RISK SNAPSHOT\n"
        "---------------------\n"
        f"Impact Score    : {assessment.overall_score} / 100\n"
        f"Impact Level    : {assessment.impact_level}\n"
        f"Dominant Risk   : {assessment.dominant_category}\n"
        f"Risk Distribution: {_format_breakdown(assessment)}\n"
        f"Articles Scanned: {assessment.article_count}\n\n"
        "TOP DRIVING EVENTS\n"
        "------------------\n"
        f"{_format_top_events(assessment, top_n=top_n)}\n\n"
        "TASK\n"
        "----\n"
        "Write a 150-200 word executive intelligence brief. Structure it as three tight paragraphs:\n"
        "1. What is happening and what is driving the risk level\n"
        "2. Which asset classes or markets face the greatest near-term exposure\n"
        "3. One concrete action implication for senior decision-makers\n\n"
        "Rules:\n"
        "- Direct declarative sentences only. No hedging, no passive voice.\n"
        "- No bullet points. Pure prose.\n"
        '- Do not start with "I" or refer to yourself.\n'
        "- Do not repeat the score or level verbatim in the text."
    )


def generate_executive_summary(
    assessment: AssessmentResult,
    *,
    ai: AIClient | None = None,
    top_n: int = 5,
) -> str:
    """Generate a prose executive brief for ``assessment`` via the configured AI backend.

    Raises whatever the backend raises once retries are exhausted, and
    ``ValueError`` when the backend answers with nothing.
    """
    if ai is None:
        ai = create_ai_client()

    prompt = build_briefing_prompt(assessment, top_n=top_n)
    text = (generate_with_retry(ai, prompt) or "").strip()
    if not text:
        raise ValueError("AI backend returned an empty executive summary")
    logger.debug("Generated executive summary (%d words)", len(text.split()))
    return text


def summary_fallback_message(exc: BaseException) -> str:
    """Map a briefing failure to a message safe to show next to the scores."""
    msg = str(exc).lower()
    if "api_key_invalid" in msg or "api key not valid" in msg:
        return (
            "AI summary unavailable: GEMINI_API_KEY is invalid. Generate a new key in "
            "Google AI Studio and update your environment."
        )
    if "not found" in msg and "models/" in msg:
        return (
            "AI summary unavailable: GEMINI_MODEL is unavailable for this API key. "
            "Update GEMINI_MODEL in your environment."
        )
    if "quota" in msg or "rate limit" in msg:
        return (
            "AI summary unavailable: Gemini quota/rate limit reached. Retry later; "
            "risk scoring is unaffected."
        )
    return (
        "AI summary temporarily unavailable. The risk scoring above is unaffected. "
        "Check GEMINI_API_KEY, GEMINI_MODEL, and Gemini API access."
    )

from __future__ import annotations

from typing import Dict, Sequence

from ..models import (
    CATEGORIES,
    CATEGORY_WEIGHT,
    AssessmentResult,
    ClassifiedArticle,
    RiskCategory,
)
from .scoring import clamp, round_half_up, to_impact_level


def weighted_overall_score(articles: Sequence[ClassifiedArticle]) -> int:
    """Average article scores weighted by each article's category weight.

    Geopolitical articles pull the batch score harder than General ones.
    Returns 0 for an empty batch.
    """
    weighted_sum = 0.0
    total_weight = 0.0
    for art in articles:
        w = CATEGORY_WEIGHT[art.risk_category]
        weighted_sum += art.article_score * w
        total_weight += w
    if total_weight <= 0:
        return 0
    return clamp(round_half_up(weighted_sum / total_weight))


def category_counts(articles: Sequence[ClassifiedArticle]) -> Dict[RiskCategory, int]:
    counts: Dict[RiskCategory, int] = {c: 0 for c in CATEGORIES}
    for art in articles:
        counts[art.risk_category] += 1
    return counts


def category_breakdown(counts: Dict[RiskCategory, int], total: int) -> Dict[RiskCategory, int]:
    """Percentage of articles per category, computed from counts, not scores."""
    denominator = total or 1
    return {c: round_half_up(counts.get(c, 0) / denominator * 100) for c in CATEGORIES}


def dominant_category(counts: Dict[RiskCategory, int]) -> RiskCategory:
    """Category with the greatest ``count x weight``; General when nothing scored."""
    best: RiskCategory = "General"
    best_score = 0.0
    for category in CATEGORIES:
        score = counts.get(category, 0) * CATEGORY_WEIGHT[category]
        if score > best_score:
            best_score = score
            best = category
    return best


def aggregate(articles: Sequence[ClassifiedArticle]) -> AssessmentResult:
    overall = weighted_overall_score(articles)
    counts = category_counts(articles)
    return AssessmentResult(
        overall_score=overall,
        impact_level=to_impact_level(overall),
        dominant_category=dominant_category(counts),
        category_breakdown=category_breakdown(counts, len(articles)),
        articles=list(articles),
    )

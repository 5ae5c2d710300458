from __future__ import annotations

import math

from ..models import CATEGORY_WEIGHT, ImpactLevel, RiskCategory
from .keywords import (
    BASELINE_BOOST,
    CATEGORY_SCALE,
    LOW_IMPACT_MAX,
    MEDIUM_IMPACT_MAX,
    SCORE_MAX,
    SCORE_MIN,
    SEVERITY_TIERS,
)


def round_half_up(value: float) -> int:
    # Python's round() is banker's rounding; scores use .5 -> up
    return int(math.floor(value + 0.5))


def clamp(value: int, lo: int = SCORE_MIN, hi: int = SCORE_MAX) -> int:
    return max(lo, min(hi, value))


def severity_boost(text: str | None) -> int:
    """Return the boost of the first severity tier with a hit, else the baseline."""
    lower = (text or "").lower()
    for boost, words in SEVERITY_TIERS:
        if any(w in lower for w in words):
            return boost
    return BASELINE_BOOST


def score_article(category: RiskCategory, text: str | None) -> int:
    """Score one article: ``clamp(round(weight x 60 + severity), 0, 100)``.

    The category contributes 18-60 points and severity language 5-40, so any
    non-General article lands in 47-100.
    """
    base = CATEGORY_WEIGHT[category] * CATEGORY_SCALE
    return clamp(round_half_up(base + severity_boost(text)))


def to_impact_level(score: float) -> ImpactLevel:
    if score <= LOW_IMPACT_MAX:
        return "LOW"
    if score <= MEDIUM_IMPACT_MAX:
        return "MEDIUM"
    return "HIGH"

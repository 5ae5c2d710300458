"""Classification and scoring engine: keyword matching, severity, aggregation."""

from .aggregate import aggregate
from .classifier import classify, classify_article
from .matcher import match_keywords, pick_category
from .scoring import round_half_up, score_article, severity_boost, to_impact_level

__all__ = [
    "aggregate",
    "classify",
    "classify_article",
    "match_keywords",
    "pick_category",
    "round_half_up",
    "score_article",
    "severity_boost",
    "to_impact_level",
]

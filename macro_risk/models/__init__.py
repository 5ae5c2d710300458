"""Typed models used across the application."""

from .article import RawArticle, ClassifiedArticle
from .assessment import (
    CATEGORIES,
    CATEGORY_WEIGHT,
    AssessmentResult,
    ImpactLevel,
    RiskCategory,
)

__all__ = [
    "RawArticle",
    "ClassifiedArticle",
    "CATEGORIES",
    "CATEGORY_WEIGHT",
    "AssessmentResult",
    "ImpactLevel",
    "RiskCategory",
]

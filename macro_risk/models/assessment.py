from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Literal, Mapping, Tuple

from .article import ClassifiedArticle

RiskCategory = Literal["Geopolitical", "Monetary", "Commodity", "SupplyChain", "General"]
ImpactLevel = Literal["LOW", "MEDIUM", "HIGH"]

# Canonical enumeration order. Every tie between categories resolves to the
# one listed first here.
CATEGORIES: Tuple[RiskCategory, ...] = (
    "Geopolitical",
    "Monetary",
    "Commodity",
    "SupplyChain",
    "General",
)

CATEGORY_WEIGHT: Mapping[RiskCategory, float] = MappingProxyType(
    {
        "Geopolitical": 1.00,
        "Monetary": 0.90,
        "Commodity": 0.80,
        "SupplyChain": 0.70,
        "General": 0.30,
    }
)


@dataclass(frozen=True, slots=True)
class AssessmentResult:
    """Batch-level outcome of classifying a list of articles."""

    overall_score: int
    impact_level: ImpactLevel
    dominant_category: RiskCategory
    category_breakdown: Dict[RiskCategory, int]
    articles: List[ClassifiedArticle] = field(default_factory=list)

    @property
    def article_count(self) -> int:
        return len(self.articles)

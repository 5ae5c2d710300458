from __future__ import annotations

from typing import Dict, List, Mapping, Sequence

from ..models import CATEGORIES, CATEGORY_WEIGHT, RiskCategory
from .keywords import CATEGORY_KEYWORDS


def match_keywords(text: str | None) -> Dict[RiskCategory, List[str]]:
    """Return matched keywords per category for ``text``.

    Matching is plain substring containment on the lower-cased text, with no
    word boundaries ("war" matches inside "warranty"). Categories without a
    match are omitted, so ``General`` never appears.
    """
    lower = (text or "").lower()
    result: Dict[RiskCategory, List[str]] = {}
    for category in CATEGORIES:
        matched = [kw for kw in CATEGORY_KEYWORDS[category] if kw in lower]
        if matched:
            result[category] = matched
    return result


def pick_category(matches: Mapping[RiskCategory, Sequence[str]]) -> RiskCategory:
    """Pick the category with the highest ``match count x weight``.

    Ties go to the category seen first in ``CATEGORIES`` order; an empty
    mapping yields ``General``.
    """
    best: RiskCategory = "General"
    best_score = -1.0
    for category in CATEGORIES:
        words = matches.get(category)
        if not words:
            continue
        score = len(words) * CATEGORY_WEIGHT[category]
        if score > best_score:
            best_score = score
            best = category
    return best

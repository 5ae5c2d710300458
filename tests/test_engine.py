"""
Tests for the deterministic classification engine.

Tests cover:
- Keyword matching (substring semantics, ordering, General never matched)
- Category picking and severity tiers
- Article scoring and impact thresholds
- Batch aggregation and the public classify() contract
"""

import pytest

from macro_risk import classify, to_impact_level
from macro_risk.engine import (
    aggregate,
    classify_article,
    match_keywords,
    pick_category,
    round_half_up,
    score_article,
    severity_boost,
)
from macro_risk.engine.aggregate import dominant_category
from macro_risk.engine.keywords import CATEGORY_KEYWORDS
from macro_risk.models import CATEGORIES, RawArticle


# =============================================================
# TEST: Keyword Matcher
# =============================================================

class TestMatchKeywords:
    """Test match_keywords()."""

    def test_matches_multiple_categories(self):
        matches = match_keywords("Oil prices rise as war escalates")
        assert matches == {"Geopolitical": ["war"], "Commodity": ["oil"]}

    def test_substring_semantics_without_word_boundaries(self):
        """'war' is found inside 'warranty'."""
        assert match_keywords("Extended warranty offers") == {"Geopolitical": ["war"]}

    def test_case_insensitive(self):
        assert match_keywords("NATO MISSILE test") == {"Geopolitical": ["nato", "missile"]}

    def test_preserves_dictionary_order(self):
        matches = match_keywords("missile troops nato")
        assert matches["Geopolitical"] == ["nato", "troops", "missile"]

    def test_empty_text_matches_nothing(self):
        assert match_keywords("") == {}
        assert match_keywords(None) == {}

    def test_general_never_present(self):
        text = " ".join(w for words in CATEGORY_KEYWORDS.values() for w in words)
        matches = match_keywords(text)
        assert "General" not in matches
        assert set(matches) == {"Geopolitical", "Monetary", "Commodity", "SupplyChain"}


# =============================================================
# TEST: Category Picker
# =============================================================

class TestPickCategory:
    """Test pick_category()."""

    def test_empty_mapping_is_general(self):
        assert pick_category({}) == "General"

    def test_weighted_count_wins(self):
        # 2 x 0.7 = 1.4 beats 1 x 1.0
        matches = {"Geopolitical": ["war"], "SupplyChain": ["tariff", "shipping"]}
        assert pick_category(matches) == "SupplyChain"

    def test_higher_weight_wins_equal_counts(self):
        matches = {"Commodity": ["oil"], "Monetary": ["inflation"]}
        assert pick_category(matches) == "Monetary"

    def test_mapping_order_does_not_matter(self):
        a = {"Commodity": ["oil", "gold"], "Geopolitical": ["war"]}
        b = {"Geopolitical": ["war"], "Commodity": ["oil", "gold"]}
        assert pick_category(a) == pick_category(b) == "Commodity"

    def test_equal_scores_go_to_first_category_in_order(self):
        # 10 x 0.9 == 9 x 1.0
        matches = {"Monetary": ["inflation"] * 10, "Geopolitical": ["war"] * 9}
        assert pick_category(matches) == "Geopolitical"


# =============================================================
# TEST: Severity Scanner
# =============================================================

class TestSeverityBoost:
    """Test severity_boost()."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Markets crash", 40),
            ("MELTDOWN feared", 40),
            ("Prices surge", 25),
            ("Tension builds", 12),
            ("Quiet day", 5),
            ("", 5),
        ],
    )
    def test_tiers(self, text, expected):
        assert severity_boost(text) == expected

    def test_first_tier_wins_not_additive(self):
        assert severity_boost("crash and surge amid tension") == 40

    def test_substring_in_longer_word(self):
        # "ban" inside "bank"
        assert severity_boost("bank holiday") == 25


# =============================================================
# TEST: Article Scorer
# =============================================================

class TestScoring:
    """Test score_article(), round_half_up() and to_impact_level()."""

    def test_round_half_up_differs_from_bankers_rounding(self):
        assert round_half_up(22.5) == 23
        assert round_half_up(0.5) == 1
        assert round_half_up(2.4) == 2

    def test_general_baseline(self):
        assert score_article("General", "nothing here") == 23

    def test_geopolitical_tier_one_is_capped_at_100(self):
        assert score_article("Geopolitical", "war") == 100

    def test_supply_chain_tier_three(self):
        # 0.7 x 60 + 12 = 54
        assert score_article("SupplyChain", "risk") == 54

    @pytest.mark.parametrize(
        "score,level",
        [(0, "LOW"), (30, "LOW"), (31, "MEDIUM"), (70, "MEDIUM"), (71, "HIGH"), (100, "HIGH")],
    )
    def test_impact_thresholds(self, score, level):
        assert to_impact_level(score) == level


# =============================================================
# TEST: Per-article classification
# =============================================================

class TestClassifyArticle:
    """Test classify_article()."""

    def test_war_invasion_collapse_scores_100(self, war_article):
        result = classify_article(war_article)
        assert result.risk_category == "Geopolitical"
        assert result.article_score == 100
        assert result.keyword_matches == {"Geopolitical": ["war", "invasion"]}

    def test_unmatched_article_is_general_23(self, quiet_article):
        result = classify_article(quiet_article)
        assert result.risk_category == "General"
        assert result.article_score == 23
        assert result.keyword_matches == {}
        assert result.description == ""

    def test_bank_article(self, bank_article):
        result = classify_article(bank_article)
        assert result.risk_category == "Monetary"
        assert result.article_score == 79

    def test_accepts_newsapi_mapping(self):
        result = classify_article(
            {
                "title": "Oil prices rise",
                "description": None,
                "source": {"id": None, "name": "Reuters"},
                "url": "https://example.com/oil",
                "publishedAt": "2024-01-01T00:00:00Z",
            }
        )
        assert result.source == "Reuters"
        assert result.published_at == "2024-01-01T00:00:00Z"
        assert result.risk_category == "Commodity"
        # 0.8 x 60 + 12
        assert result.article_score == 60

    def test_missing_fields_use_defaults(self):
        result = classify_article({"title": None})
        assert result.title == ""
        assert result.source == "Unknown"
        assert result.url == ""
        assert result.risk_category == "General"


# =============================================================
# TEST: Batch aggregation and classify()
# =============================================================

class TestClassifyBatch:
    """Test classify() and aggregate()."""

    def test_empty_batch(self):
        result = classify([])
        assert result.overall_score == 0
        assert result.impact_level == "LOW"
        assert result.dominant_category == "General"
        assert result.category_breakdown == {c: 0 for c in CATEGORIES}
        assert result.articles == []

    def test_aggregate_of_empty_list_matches_classify(self):
        assert aggregate([]) == classify([])

    def test_weighted_overall_score(self, war_article, quiet_article):
        result = classify([war_article, quiet_article])
        # (100 x 1.0 + 23 x 0.3) / 1.3 = 82.23
        assert result.overall_score == 82
        assert result.impact_level == "HIGH"
        assert result.dominant_category == "Geopolitical"
        assert result.category_breakdown == {
            "Geopolitical": 50,
            "Monetary": 0,
            "Commodity": 0,
            "SupplyChain": 0,
            "General": 50,
        }

    def test_breakdown_uses_counts_and_keeps_category_order(self, war_article, quiet_article, bank_article):
        result = classify([quiet_article, quiet_article, war_article, bank_article])
        assert list(result.category_breakdown) == list(CATEGORIES)
        assert result.category_breakdown["General"] == 50
        assert result.category_breakdown["Geopolitical"] == 25
        assert result.category_breakdown["Monetary"] == 25

    def test_breakdown_sums_to_100_within_rounding(self, war_article, quiet_article, bank_article):
        result = classify([war_article, quiet_article, bank_article])
        assert result.category_breakdown["Geopolitical"] == 33
        assert abs(sum(result.category_breakdown.values()) - 100) <= len(CATEGORIES) - 1

    def test_dominant_category_weights_counts(self, war_article, quiet_article):
        # 3 x 0.3 = 0.9 loses to 1 x 1.0
        result = classify([quiet_article, quiet_article, quiet_article, war_article])
        assert result.dominant_category == "Geopolitical"
        # 4 x 0.3 = 1.2 beats 1 x 1.0
        result = classify([quiet_article] * 4 + [war_article])
        assert result.dominant_category == "General"

    def test_dominant_tie_goes_to_first_category_in_order(self, war_article, bank_article):
        # 9 x 1.0 == 10 x 0.9
        assert dominant_category({"Monetary": 10, "Geopolitical": 9}) == "Geopolitical"
        result = classify([bank_article] * 10 + [war_article] * 9)
        assert result.dominant_category == "Geopolitical"

    def test_dominant_near_tie_float_products(self):
        # 7 x 0.8 evaluates to 5.6000000000000005, 8 x 0.7 to 5.6
        assert dominant_category({"SupplyChain": 8, "Commodity": 7}) == "Commodity"
        assert dominant_category({}) == "General"

    def test_preserves_length_and_order(self, war_article, quiet_article, bank_article):
        inputs = [bank_article, war_article, quiet_article, war_article]
        result = classify(inputs)
        assert [a.title for a in result.articles] == [a.title for a in inputs]
        assert result.article_count == 4

    def test_scores_always_in_range(self):
        texts = [
            "war nuclear invasion crash collapse",
            "",
            "tariff shipping port freight manufacturing inventory",
            "inflation currency treasury slowdown",
            "gold silver copper wheat",
        ]
        result = classify([RawArticle(title=t) for t in texts])
        assert 0 <= result.overall_score <= 100
        assert all(0 <= a.article_score <= 100 for a in result.articles)

    def test_idempotent(self, war_article, quiet_article, bank_article):
        batch = [war_article, quiet_article, bank_article]
        assert classify(batch) == classify(batch)

    def test_accepts_generator_input(self, war_article):
        result = classify(a for a in [war_article])
        assert result.article_count == 1

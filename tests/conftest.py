"""Shared fixtures for the macro-risk test suite."""

from typing import List

import pytest

from macro_risk.briefing.ai import AIClient
from macro_risk.models import RawArticle


class FakeAI(AIClient):
    """AI client double that records prompts and replays a canned answer."""

    def __init__(self, answer: str = "Markets face elevated risk.", error: Exception | None = None):
        self.answer = answer
        self.error = error
        self.prompts: List[str] = []

    def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.answer


@pytest.fixture
def make_ai():
    """Factory for FakeAI doubles."""
    return FakeAI


@pytest.fixture
def no_retry_sleep(monkeypatch):
    """Make retries immediate."""
    monkeypatch.delenv("AI_RETRIES", raising=False)
    monkeypatch.delenv("AI_BACKOFF", raising=False)
    monkeypatch.setattr("macro_risk.briefing.ai.retry.time.sleep", lambda _s: None)


@pytest.fixture
def war_article():
    # Geopolitical (war, invasion) with tier-1 severity -> 100
    return RawArticle(
        title="Invasion fears as war looms",
        description="Markets brace for collapse",
        source="Reuters",
        url="https://example.com/war",
        published_at="2024-03-01T08:00:00Z",
    )


@pytest.fixture
def quiet_article():
    # No category or severity keywords -> General, 23
    return RawArticle(
        title="Local bakery opens new shop",
        description=None,
        source="Town Gazette",
        url="https://example.com/bakery",
    )


@pytest.fixture
def bank_article():
    # Monetary (central bank, rate hike); "ban" inside "bank" hits tier 2 -> 79
    return RawArticle(
        title="Central bank signals rate hike",
        description=None,
        source="FT",
        url="https://example.com/bank",
    )

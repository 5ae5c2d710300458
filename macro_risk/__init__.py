"""Top-level package for the macro-risk news assessment tool.

This package contains the deterministic classification engine that scores
news articles against a macro-risk taxonomy, plus the thin collaborators
around it: a NewsAPI fetcher, an AI executive briefing and report output.
"""

from .engine import classify, to_impact_level

__all__ = ["classify", "to_impact_level"]

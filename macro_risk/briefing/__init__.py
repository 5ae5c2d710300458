"""Executive briefing generated from an assessment by an AI backend."""

from .summary import build_briefing_prompt, generate_executive_summary, summary_fallback_message

__all__ = ["build_briefing_prompt", "generate_executive_summary", "summary_fallback_message"]

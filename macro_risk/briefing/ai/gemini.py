from __future__ import annotations

import os
from typing import List, Optional

import requests

from .base import AIClient
from ...utils.logging import get_logger

logger = get_logger("mr.ai.gemini")

_API_BASE = "https://generativelanguage.googleapis.com/v1beta/models"

DEFAULT_MODELS = (
    "gemini-1.5-flash-latest",
    "gemini-1.5-flash",
    "gemini-1.5-pro-latest",
    "gemini-1.5-pro",
)


class GeminiError(RuntimeError):
    """Raised for a non-successful Gemini API response."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def _clean_env(value: Optional[str]) -> str:
    # .env files often wrap values in quotes
    return (value or "").strip().strip("'\"")


def build_model_candidates() -> List[str]:
    """Ordered, de-duplicated model names: GEMINI_MODEL, GEMINI_MODEL_CANDIDATES, defaults."""
    from_env = _clean_env(os.environ.get("GEMINI_MODEL"))
    listed = [m.strip() for m in _clean_env(os.environ.get("GEMINI_MODEL_CANDIDATES")).split(",")]
    ordered = [from_env, *listed, *DEFAULT_MODELS]
    unique: List[str] = []
    for model in ordered:
        if model and model not in unique:
            unique.append(model)
    return unique


def should_try_next_model(exc: BaseException) -> bool:
    """True when the error means "this model is unavailable", not a credential problem."""
    msg = str(exc).lower()
    if "api_key_invalid" in msg or "api key not valid" in msg:
        return False
    if "forbidden" in msg or "permission" in msg:
        return False
    if isinstance(exc, GeminiError) and exc.status_code == 404:
        return True
    return (
        "not found" in msg
        or "not supported for generatecontent" in msg
        or "supported methods" in msg
    )


class GeminiClient(AIClient):
    """HTTP client for Gemini via the Google AI Studio API.

    Environment:
      - GEMINI_API_KEY, or GOOGLE_API_KEY (required)
      - GEMINI_MODEL, GEMINI_MODEL_CANDIDATES (optional model preference)
    """

    def __init__(self, *, session: requests.Session | None = None) -> None:
        self.api_key = _clean_env(os.environ.get("GEMINI_API_KEY") or os.environ.get("GOOGLE_API_KEY"))
        if not self.api_key:
            raise RuntimeError("GEMINI_API_KEY is not set in environment.")
        self.models = build_model_candidates()
        self.session = session or requests.Session()

    def _generate_with(self, model: str, prompt: str, *, temperature: float, timeout: int) -> str:
        url = f"{_API_BASE}/{model}:generateContent"
        payload = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {"temperature": temperature},
        }
        # Key goes in a header so it never ends up in logged URLs
        headers = {"x-goog-api-key": self.api_key}
        resp = self.session.post(url, json=payload, headers=headers, timeout=timeout)
        if resp.status_code >= 400:
            try:
                error = resp.json().get("error") or {}
            except ValueError:
                error = {}
            reasons = [d.get("reason", "") for d in error.get("details") or [] if isinstance(d, dict)]
            detail = " ".join(filter(None, [error.get("message"), *reasons])) or resp.reason or ""
            raise GeminiError(
                f"Gemini HTTP {resp.status_code} for models/{model}: {detail}",
                status_code=resp.status_code,
            )
        candidates = resp.json().get("candidates") or []
        if not candidates:
            return ""
        parts = candidates[0].get("content", {}).get("parts") or []
        return "".join(p.get("text", "") for p in parts).strip()

    def generate(self, prompt: str, *, temperature: float = 0.4, timeout: int = 60) -> str:
        last_error: BaseException | None = None
        for model in self.models:
            try:
                text = self._generate_with(model, prompt, temperature=temperature, timeout=timeout)
            except GeminiError as exc:
                if should_try_next_model(exc):
                    logger.info("Gemini model %s unavailable; trying next candidate", model)
                    last_error = exc
                    continue
                raise
            if not text:
                raise ValueError(f'Gemini returned an empty response for model "{model}".')
            return text

        reason = str(last_error) if last_error else "Unknown model error."
        raise RuntimeError(
            "No compatible Gemini model available for this API key. "
            f"Tried: {', '.join(self.models)}. Last error: {reason}"
        )

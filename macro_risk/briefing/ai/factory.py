from __future__ import annotations

import os
from typing import Optional

from .base import AIClient


def create_ai_client(*, backend: Optional[str] = None) -> AIClient:
    """Create the client that writes the executive briefing.

    The backend only turns a finished assessment into prose; scoring never
    depends on it. Selected by the ``PROCESSING_BACKEND`` env var or the
    explicit ``backend`` argument: "gemini" (hosted, default) or "ollama"
    (local model server).
    """
    selected = (backend or os.environ.get("PROCESSING_BACKEND", "gemini")).strip().lower()

    if selected == "gemini":
        from .gemini import GeminiClient  # lazy import

        return GeminiClient()
    if selected == "ollama":
        from .ollama import OllamaClient  # lazy import

        return OllamaClient()

    raise ValueError(
        f"Unsupported PROCESSING_BACKEND '{selected}'. Use 'gemini' or 'ollama'."
    )

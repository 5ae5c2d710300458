from __future__ import annotations

from abc import ABC, abstractmethod


class AIClient(ABC):
    """Abstract text-generation client used for executive briefings."""

    @abstractmethod
    def generate(self, prompt: str) -> str:
        """Return the model's text completion for ``prompt``."""

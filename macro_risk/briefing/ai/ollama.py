from __future__ import annotations

import os

import requests

from .base import AIClient


class OllamaClient(AIClient):
    """HTTP client for a local Ollama server.

    Environment:
      - OLLAMA_HOST (default: http://localhost:11434)
      - OLLAMA_MODEL (default: llama3.1:8b-instruct)
    """

    def __init__(self, *, session: requests.Session | None = None) -> None:
        self.host = os.environ.get("OLLAMA_HOST", "http://localhost:11434").rstrip("/")
        self.model = os.environ.get("OLLAMA_MODEL", "llama3.1:8b-instruct")
        self.session = session or requests.Session()

    def generate(self, prompt: str, *, temperature: float = 0.4, timeout: int = 120) -> str:
        payload = {
            "model": self.model,
            "prompt": prompt,
            "stream": False,
            "options": {"temperature": temperature},
        }
        resp = self.session.post(f"{self.host}/api/generate", json=payload, timeout=timeout)
        resp.raise_for_status()
        # Ollama returns {'response': '...'}
        return (resp.json().get("response") or "").strip()

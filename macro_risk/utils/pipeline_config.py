from __future__ import annotations

import os
from dataclasses import dataclass, field


def _env(name: str, default: str) -> str:
    return os.getenv(name, default)


@dataclass(slots=True)
class PipelineConfig:
    # Read on instantiation so a .env loaded by main() is honoured
    output_dir: str = field(default_factory=lambda: _env("ASSESSMENT_OUTPUT_DIR", "docs/assessments"))
    top_events: int = field(default_factory=lambda: int(_env("ASSESSMENT_TOP_EVENTS", "5")))
    summary_flag: str = field(default_factory=lambda: _env("ASSESSMENT_SUMMARY", "1"))
    output_format: str = field(default_factory=lambda: _env("ASSESSMENT_FORMAT", "json"))

    @property
    def summary_enabled(self) -> bool:
        return self.summary_flag.strip().lower() in {"1", "true", "yes"}

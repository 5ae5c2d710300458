from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional

if TYPE_CHECKING:
    from .assessment import RiskCategory


def _source_name(value: Any) -> str:
    # NewsAPI nests the outlet as {"id": ..., "name": ...}; other feeds use a plain string
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        name = value.get("name")
        if name:
            return str(name)
    return "Unknown"


@dataclass(frozen=True, slots=True)
class RawArticle:
    title: str
    description: Optional[str] = None
    source: str = "Unknown"
    url: str = ""
    published_at: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RawArticle":
        """Coerce a NewsAPI-style mapping into a ``RawArticle``.

        Missing fields are replaced with safe defaults rather than rejected.
        """
        description = data.get("description")
        published = data.get("publishedAt", data.get("published_at"))
        return cls(
            title=str(data.get("title") or ""),
            description=str(description) if description is not None else None,
            source=_source_name(data.get("source")),
            url=str(data.get("url") or ""),
            published_at=str(published) if published else None,
        )

    @property
    def text(self) -> str:
        """Text the classifier scans: title and description joined by a space."""
        return f"{self.title or ''} {self.description or ''}"


@dataclass(frozen=True, slots=True)
class ClassifiedArticle:
    title: str
    description: str
    source: str
    url: str
    published_at: Optional[str]
    risk_category: "RiskCategory"
    article_score: int
    keyword_matches: Dict["RiskCategory", List[str]] = field(default_factory=dict)

"""Text normalization applied to fetched articles before classification."""

from .normalize import (
    batch_normalize,
    clean_html_to_text,
    normalize_plain_text,
    normalize_raw_article,
)

__all__ = [
    "batch_normalize",
    "clean_html_to_text",
    "normalize_plain_text",
    "normalize_raw_article",
]

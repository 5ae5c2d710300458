from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Literal

from ..models import AssessmentResult, ClassifiedArticle
from ..pipeline import AnalysisReport

ReportFormat = Literal["json", "markdown"]
REPORT_FORMATS = ("json", "markdown")


def _article_to_dict(article: ClassifiedArticle, *, include_matches: bool) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "title": article.title,
        "description": article.description,
        "source": article.source,
        "url": article.url,
        "publishedAt": article.published_at,
        "riskCategory": article.risk_category,
        "articleScore": article.article_score,
    }
    if include_matches:
        payload["keywordMatches"] = {k: list(v) for k, v in article.keyword_matches.items()}
    return payload


def assessment_to_dict(assessment: AssessmentResult, *, include_matches: bool = False) -> Dict[str, Any]:
    """Serialize an assessment to the camelCase payload consumed by dashboards."""
    return {
        "overallScore": assessment.overall_score,
        "impactLevel": assessment.impact_level,
        "dominantCategory": assessment.dominant_category,
        "categoryBreakdown": dict(assessment.category_breakdown),
        "articleCount": assessment.article_count,
        "articles": [_article_to_dict(a, include_matches=include_matches) for a in assessment.articles],
    }


def report_to_json_str(report: AnalysisReport, *, include_matches: bool = True) -> str:
    payload = assessment_to_dict(report.assessment, include_matches=include_matches)
    payload["aiSummary"] = report.ai_summary
    payload["generatedAt"] = report.generated_at
    return json.dumps(payload, ensure_ascii=False, indent=2)


def _md_cell(text: str) -> str:
    return (text or "").replace("|", "\\|").replace("\n", " ")


def format_markdown(report: AnalysisReport) -> str:
    a = report.assessment
    lines: List[str] = []
    lines.append("# Macro Risk Assessment")
    lines.append("")
    lines.append(f"Generated: {report.generated_at}")
    lines.append("")
    lines.append(f"- Overall score: **{a.overall_score} / 100**")
    lines.append(f"- Impact level: **{a.impact_level}**")
    lines.append(f"- Dominant category: **{a.dominant_category}**")
    lines.append(f"- Articles scanned: {a.article_count}")
    lines.append("")
    lines.append("## Category Breakdown")
    lines.append("")
    lines.append("| Category | Share |")
    lines.append("| -------- | -----:|")
    for cat, pct in a.category_breakdown.items():
        lines.append(f"| {cat} | {pct}% |")
    lines.append("")
    lines.append("## Articles")
    lines.append("")
    lines.append("| # | Score | Category | Title | Source |")
    lines.append("| - | -----:| -------- | ----- | ------ |")
    for idx, art in enumerate(a.articles, start=1):
        title = _md_cell(art.title)
        title_md = f"[{title}]({art.url})" if art.url else title
        lines.append(f"| {idx} | {art.article_score} | {art.risk_category} | {title_md} | {_md_cell(art.source)} |")
    if report.ai_summary:
        lines.append("")
        lines.append("## Executive Summary")
        lines.append("")
        lines.append(report.ai_summary)
    return "\n".join(lines) + "\n"


def render_report(report: AnalysisReport, *, fmt: ReportFormat = "json") -> str:
    if fmt == "markdown":
        return format_markdown(report)
    if fmt == "json":
        return report_to_json_str(report)
    raise ValueError(f"Unsupported report format '{fmt}'. Use 'json' or 'markdown'.")


def write_report(
    report: AnalysisReport, *, out_dir: Path | str = "docs/assessments", fmt: ReportFormat = "json"
) -> Path:
    content = render_report(report, fmt=fmt)
    out_path = Path(out_dir)
    out_path.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    suffix = "md" if fmt == "markdown" else "json"
    file_path = out_path / f"assessment-{stamp}.{suffix}"
    file_path.write_text(content, encoding="utf-8")
    return file_path

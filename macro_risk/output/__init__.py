"""Report rendering and writing."""

from .report import (
    REPORT_FORMATS,
    assessment_to_dict,
    format_markdown,
    render_report,
    report_to_json_str,
    write_report,
)

__all__ = [
    "REPORT_FORMATS",
    "assessment_to_dict",
    "format_markdown",
    "render_report",
    "report_to_json_str",
    "write_report",
]

"""Application entrypoint for the macro-risk assessment tool.

This script orchestrates the high-level flow:
1) load configuration
2) fetch (or read) news articles and classify them
3) generate an executive summary and write the report
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, List, Optional, Sequence

from .output import REPORT_FORMATS, render_report, write_report
from .pipeline import run_analysis
from .utils.config_loader import load_news_config
from .utils.logging import configure_logging, get_logger
from .utils.pipeline_config import PipelineConfig


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Macro risk assessment - fetch news, score risk, brief executives"
    )
    parser.add_argument(
        "--config",
        default="config/news.yaml",
        help="Path to the NewsAPI query configuration file (YAML)",
    )
    parser.add_argument(
        "--input",
        default=None,
        help="Read articles from a JSON file instead of calling NewsAPI",
    )
    parser.add_argument(
        "--no-summary",
        action="store_true",
        help="Skip the AI executive summary",
    )
    parser.add_argument(
        "--format",
        default=None,
        choices=list(REPORT_FORMATS),
        help="Report format (defaults to ASSESSMENT_FORMAT or json)",
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory the report file is written to (defaults to ASSESSMENT_OUTPUT_DIR)",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the report instead of writing a file",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity (defaults to LOG_LEVEL or INFO)",
    )
    return parser.parse_args(argv)


def load_articles_file(path: Path | str) -> List[Any]:
    """Read a JSON list of articles, or a NewsAPI response with an ``articles`` key."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data.get("articles")
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a list of articles or an object with an 'articles' list")
    return [a for a in data if isinstance(a, dict)]


def main(argv: Optional[Sequence[str]] = None) -> int:
    # Optional: load .env from the working directory
    try:
        from dotenv import find_dotenv, load_dotenv  # type: ignore

        load_dotenv(find_dotenv(usecwd=True), override=False)
    except ImportError:
        pass
    args = parse_args(argv)
    # Logs must not interleave with a report printed to stdout
    configure_logging(level=args.log_level, stream=sys.stderr if args.stdout else None)
    logger = get_logger("mr.agent")

    try:
        cfg = PipelineConfig()
        fmt = args.format or cfg.output_format
        if fmt not in REPORT_FORMATS:
            raise ValueError(f"Unsupported report format '{fmt}'. Use 'json' or 'markdown'.")
        out_dir = args.output_dir or cfg.output_dir

        if args.input:
            logger.info("Reading articles from %s", args.input)
            articles = load_articles_file(args.input)
            query = None
        else:
            logger.info("Loading news configuration from %s", args.config)
            articles = None
            query = load_news_config(args.config)
        report = run_analysis(
            articles=articles,
            query=query,
            summarize=cfg.summary_enabled and not args.no_summary,
            top_events=cfg.top_events,
        )

        if args.stdout:
            print(render_report(report, fmt=fmt))
        else:
            path = write_report(report, out_dir=out_dir, fmt=fmt)
            logger.info("Wrote %s report to %s", fmt, path)
    except Exception as exc:  # noqa: BLE001 - top-level entrypoint guard
        logger.exception("Assessment failed: %s", exc)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover - script entrypoint
    raise SystemExit(main())

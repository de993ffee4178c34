#!/usr/bin/env python3
"""Turn Playwright JSON reporter output into console and HTML summaries.

One-shot pipeline: load -> aggregate -> (console, performance, HTML) -> exit.
A missing or unreadable results file stops everything before any output is
written. Each render step runs on its own, so one failing step does not keep
the others from producing their part of the report.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Callable, Sequence, TextIO

from .aggregator import aggregate_by_environment, build_summary
from .console_report import render_console_report, render_performance_report
from .html_report import render_html_report, write_html_report
from .performance import analyze_performance
from .report_loader import ReportLoadError, load_run_result
from .utils import configure_json_logging, default_html_report_path, default_results_path

logger = logging.getLogger("storefront-qa.report-generator")

EXIT_OK = 0
EXIT_LOAD_ERROR = 1
EXIT_RENDER_ERROR = 2

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def generate_report(
    results_path: str | Path,
    html_output: str | Path,
    *,
    out: TextIO | None = None,
    generated_at: datetime | None = None,
) -> int:
    """Run the whole pipeline and return the process exit code."""
    out = out or sys.stdout
    print("🚀 Generating Test Report...\n", file=out)

    try:
        run = load_run_result(results_path)
    except ReportLoadError as exc:
        logger.error("Aborting report generation: %s", exc)
        print(f"❌ Error loading test results: {exc}", file=sys.stderr)
        return EXIT_LOAD_ERROR

    print("✅ Test results loaded successfully\n", file=out)
    summary = build_summary(run)
    env_stats = aggregate_by_environment(run)
    stamp = generated_at or datetime.now()

    def console_step() -> None:
        print(render_console_report(run, summary, env_stats), file=out)

    def performance_step() -> None:
        print(render_performance_report(analyze_performance(run)), file=out)

    def html_step() -> None:
        path = write_html_report(render_html_report(run, summary, env_stats, stamp), html_output)
        print(f"📄 HTML report generated: {path}", file=out)

    steps: list[tuple[str, Callable[[], None]]] = [
        ("console report", console_step),
        ("performance insights", performance_step),
        ("HTML report", html_step),
    ]
    failed: list[str] = []
    for name, step in steps:
        try:
            step()
        except Exception:
            logger.exception("Failed to render %s", name)
            failed.append(name)

    if failed:
        print(f"\n⚠️ Report generation finished with errors in: {', '.join(failed)}", file=out)
        return EXIT_RENDER_ERROR

    print("\n✅ Report generation completed!", file=out)
    print("\n📁 Generated Files:", file=out)
    print("   • Console report (above)", file=out)
    print(f"   • HTML report: {html_output}", file=out)
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    env_level = os.environ.get("STOREFRONT_LOG_LEVEL", "INFO").upper()
    parser = argparse.ArgumentParser(
        prog="storefront-report",
        description="Summarize Playwright JSON test results on the console and as an HTML page",
    )
    parser.add_argument(
        "results",
        nargs="?",
        default=None,
        help="Path to the JSON results file (default: $STOREFRONT_RESULTS_DIR/results.json)",
    )
    parser.add_argument(
        "--html-output",
        default=None,
        help="Where to write the HTML report (default: $STOREFRONT_RESULTS_DIR/custom-report.html)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=env_level if env_level in LOG_LEVELS else "INFO",
        help="Log level for the JSON log stream on stderr",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_json_logging(args.log_level)

    results_path = Path(args.results) if args.results else default_results_path()
    html_output = Path(args.html_output) if args.html_output else default_html_report_path()
    return generate_report(results_path, html_output)


if __name__ == "__main__":
    sys.exit(main())

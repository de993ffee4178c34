"""Run-result reporting and shared configuration for the storefront E2E suite."""

from .aggregator import aggregate_by_environment, build_summary
from .console_report import render_console_report, render_performance_report
from .html_report import render_html_report, write_html_report
from .performance import analyze_performance
from .report_loader import (
    MalformedResultsError,
    ReportLoadError,
    ResultsFileNotFoundError,
    ResultsFileUnreadableError,
    load_run_result,
)
from .suite_walker import iter_attempts

__all__ = [
    "MalformedResultsError",
    "ReportLoadError",
    "ResultsFileNotFoundError",
    "ResultsFileUnreadableError",
    "aggregate_by_environment",
    "analyze_performance",
    "build_summary",
    "iter_attempts",
    "load_run_result",
    "render_console_report",
    "render_html_report",
    "render_performance_report",
    "write_html_report",
]

"""Plain-text report sections written to stdout."""

from __future__ import annotations

from datetime import datetime
from pathlib import PurePath
from typing import Mapping

from .report_schema import (
    STATUS_EXPECTED,
    STATUS_SKIPPED,
    STATUS_UNEXPECTED,
    EnvironmentStats,
    PerformanceReport,
    RunResult,
    RunSummary,
    Spec,
    format_rate,
)
from .suite_walker import iter_suite_nodes

RULE = "=" * 50
THIN_RULE = "-" * 30

STATUS_GLYPHS = {
    STATUS_EXPECTED: "✅",
    STATUS_UNEXPECTED: "❌",
    STATUS_SKIPPED: "⏭️",
}
DEFAULT_GLYPH = "🔄"


def seconds(duration_ms: float) -> str:
    return f"{duration_ms / 1000:.2f}"


def format_start_time(value: str) -> str:
    """Render an ISO timestamp with its zone, or echo it if unparsable."""
    if not value:
        return "unknown"
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return value
    return parsed.strftime("%Y-%m-%d %H:%M:%S %Z").rstrip()


def render_summary(run: RunResult, summary: RunSummary) -> str:
    config = run.config
    root_name = PurePath(config.root_dir).name if config.root_dir else "unknown"
    workers = config.workers if config.workers is not None else "unknown"
    lines = [
        "📊 TEST EXECUTION SUMMARY",
        RULE,
        f"🕐 Start Time: {format_start_time(run.stats.start_time)}",
        f"⏱️  Duration: {seconds(summary.duration)} seconds",
        f"🔧 Playwright Version: {config.version or 'unknown'}",
        f"👥 Workers: {workers}",
        f"📁 Test Directory: {root_name}",
        "",
        "📈 TEST RESULTS",
        THIN_RULE,
        f"✅ Expected (Passed): {summary.passed}",
        f"❌ Unexpected (Failed): {summary.failed}",
        f"⏭️  Skipped: {summary.skipped}",
        f"🔄 Flaky: {summary.flaky}",
        f"🧮 Total (excluding flaky): {summary.total_tests}",
        f"📊 Pass Rate: {format_rate(summary.pass_rate)}%",
    ]
    return "\n".join(lines)


def render_environment_breakdown(env_stats: Mapping[str, EnvironmentStats]) -> str:
    """Per-project counters; projects that ran nothing are left out."""
    lines = ["🌐 BROWSER-SPECIFIC RESULTS", RULE]
    for name, stats in env_stats.items():
        if stats.total <= 0:
            continue
        lines.extend(
            [
                "",
                f"🔍 {name.upper()}",
                f"   ✅ Passed: {stats.passed}",
                f"   ❌ Failed: {stats.failed}",
                f"   ⏭️  Skipped: {stats.skipped}",
                f"   🔄 Flaky: {stats.flaky}",
                f"   📊 Pass Rate: {format_rate(stats.pass_rate)}%",
                f"   ⏱️  Duration: {seconds(stats.duration)}s",
            ]
        )
    return "\n".join(lines)


def _render_spec(spec: Spec, indent: str) -> list[str]:
    lines = [f"{indent}{'✅' if spec.ok else '❌'} {spec.title}"]
    for attempt in spec.tests:
        glyph = STATUS_GLYPHS.get(attempt.status, DEFAULT_GLYPH)
        lines.append(f"{indent}  {glyph} {attempt.project_name}: {seconds(attempt.total_duration)}s")
        for entry in attempt.results:
            label = f"Error (retry {entry.retry})" if entry.retry else "Error"
            for message in entry.errors:
                lines.append(f"{indent}    ❌ {label}: {message}")
    return lines


def render_detailed_results(run: RunResult) -> str:
    lines = ["📋 DETAILED TEST RESULTS", RULE]
    for depth, suite in iter_suite_nodes(run.suites):
        indent = "  " * depth
        lines.append(f"{indent}📁 {suite.title}")
        for spec in suite.specs:
            lines.extend(_render_spec(spec, indent + "  "))
    return "\n".join(lines)


def render_console_report(
    run: RunResult,
    summary: RunSummary,
    env_stats: Mapping[str, EnvironmentStats],
) -> str:
    """Header, summary, per-project breakdown and the full result tree."""
    sections = [
        render_summary(run, summary),
        render_environment_breakdown(env_stats),
        render_detailed_results(run),
    ]
    return "\n\n".join(sections) + "\n"


def render_performance_report(report: PerformanceReport) -> str:
    lines = ["⚡ PERFORMANCE INSIGHTS", RULE]
    if report.average is None:
        lines.append("No test durations recorded.")
        return "\n".join(lines) + "\n"

    lines.extend(
        [
            f"📊 Average Test Duration: {seconds(report.average)}s",
            f"🐌 Slowest Test: {seconds(report.slowest)}s",
            f"🚀 Fastest Test: {seconds(report.fastest)}s",
        ]
    )
    if report.slow_tests:
        lines.extend(["", "🐌 SLOWEST TESTS:"])
        for index, test in enumerate(report.slow_tests, start=1):
            lines.append(f"{index}. {test.title} ({test.browser}): {seconds(test.duration)}s")
    return "\n".join(lines) + "\n"

"""Static, self-contained HTML summary of a run."""

from __future__ import annotations

import logging
from datetime import datetime
from html import escape
from pathlib import Path
from typing import Mapping

from .report_schema import EnvironmentStats, RunResult, RunSummary, format_rate

logger = logging.getLogger("storefront-qa.html-report")

_STYLE = """
        body { font-family: Arial, sans-serif; margin: 20px; background-color: #f5f5f5; }
        .container { max-width: 1200px; margin: 0 auto; background: white; padding: 20px; border-radius: 8px; }
        .header { text-align: center; margin-bottom: 30px; }
        .summary { display: grid; grid-template-columns: repeat(auto-fit, minmax(200px, 1fr)); gap: 20px; margin-bottom: 30px; }
        .card { background: #f8f9fa; padding: 20px; border-radius: 8px; text-align: center; }
        .card h3 { margin: 0 0 10px 0; color: #333; }
        .card .number { font-size: 2em; font-weight: bold; }
        .passed { color: #28a745; }
        .failed { color: #dc3545; }
        .skipped { color: #ffc107; }
        .flaky { color: #fd7e14; }
        .browser-card { background: #e9ecef; padding: 15px; margin: 10px 0; border-radius: 5px; }
        .progress-bar { background: #dee2e6; height: 20px; border-radius: 10px; overflow: hidden; margin: 10px 0; }
        .progress-fill { height: 100%; background: #28a745; }
"""


def _card(label: str, value: object, css_class: str = "") -> str:
    number_class = f"number {css_class}".strip()
    return (
        '            <div class="card">\n'
        f"                <h3>{escape(label)}</h3>\n"
        f'                <div class="{number_class}">{escape(str(value))}</div>\n'
        "            </div>"
    )


def _browser_card(name: str, stats: EnvironmentStats) -> str:
    rate = format_rate(stats.pass_rate)
    return (
        '            <div class="browser-card">\n'
        f"                <h3>{escape(name.upper())}</h3>\n"
        f"                <p>Passed: {stats.passed} | Failed: {stats.failed} | "
        f"Skipped: {stats.skipped} | Flaky: {stats.flaky} | Total: {stats.total}</p>\n"
        '                <div class="progress-bar">\n'
        f'                    <div class="progress-fill" style="width: {rate}%"></div>\n'
        "                </div>\n"
        f"                <p>Pass Rate: {rate}%</p>\n"
        "            </div>"
    )


def render_html_report(
    run: RunResult,
    summary: RunSummary,
    env_stats: Mapping[str, EnvironmentStats],
    generated_at: datetime,
) -> str:
    """Render the report document.

    ``generated_at`` is the only time-dependent input, so the same arguments
    always produce the same document.
    """
    cards = "\n".join(
        [
            _card("Total Tests", summary.total_tests),
            _card("Passed", summary.passed, "passed"),
            _card("Failed", summary.failed, "failed"),
            _card("Skipped", summary.skipped, "skipped"),
            _card("Flaky", summary.flaky, "flaky"),
            _card("Pass Rate", f"{format_rate(summary.pass_rate)}%"),
        ]
    )
    browsers = "\n".join(_browser_card(name, stats) for name, stats in env_stats.items() if stats.total > 0)
    version = escape(run.config.version or "unknown")

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Playwright Test Report</title>
    <style>{_STYLE}    </style>
</head>
<body>
    <div class="container">
        <div class="header">
            <h1>🧪 Playwright Test Report</h1>
            <p>Generated on {escape(generated_at.strftime("%Y-%m-%d %H:%M:%S"))}</p>
        </div>

        <div class="summary">
{cards}
        </div>

        <div class="browser-stats">
            <h2>🌐 Browser Results</h2>
{browsers}
        </div>

        <div class="test-list">
            <h2>📋 Test Details</h2>
            <p>Duration: {summary.duration / 1000:.2f} seconds</p>
            <p>Playwright Version: {version}</p>
        </div>
    </div>
</body>
</html>
"""


def write_html_report(document: str, output_path: str | Path) -> Path:
    """Write *document* to *output_path*, replacing any previous report."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(document, encoding="utf-8")
    logger.info("HTML report written to %s", path)
    return path

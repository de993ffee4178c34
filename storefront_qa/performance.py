"""Duration statistics and slow-test ranking."""

from __future__ import annotations

from .report_schema import PerformanceReport, RunResult, SlowTest
from .suite_walker import iter_attempts

SLOW_TEST_THRESHOLD_MS = 5_000
SLOW_TEST_LIMIT = 5


def analyze_performance(
    run: RunResult,
    *,
    threshold_ms: float = SLOW_TEST_THRESHOLD_MS,
    limit: int = SLOW_TEST_LIMIT,
) -> PerformanceReport:
    """Collect one duration sample per retry and rank the slow ones.

    Unlike the per-project counters, every retry counts here: an attempt
    retried three times contributes three samples.
    """
    durations: list[float] = []
    slow_tests: list[SlowTest] = []

    for spec, attempt in iter_attempts(run.suites):
        for entry in attempt.results:
            durations.append(entry.duration)
            if entry.duration > threshold_ms:
                slow_tests.append(SlowTest(title=spec.title, browser=attempt.project_name, duration=entry.duration))

    # sorted() is stable with reverse=True, so ties keep encounter order
    ranked = sorted(slow_tests, key=lambda test: test.duration, reverse=True)[:limit]
    return PerformanceReport(durations=tuple(durations), slow_tests=tuple(ranked))

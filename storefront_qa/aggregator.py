"""Fold a RunResult into overall and per-project statistics."""

from __future__ import annotations

import logging
from collections import Counter

from .report_schema import (
    KNOWN_STATUSES,
    STATUS_EXPECTED,
    STATUS_FLAKY,
    STATUS_SKIPPED,
    STATUS_UNEXPECTED,
    EnvironmentStats,
    RunResult,
    RunSummary,
    Spec,
    pass_rate,
)
from .suite_walker import iter_attempts, iter_specs

logger = logging.getLogger("storefront-qa.aggregator")

# report status -> EnvironmentStats counter
_STATUS_FIELDS = {
    STATUS_EXPECTED: "passed",
    STATUS_UNEXPECTED: "failed",
    STATUS_SKIPPED: "skipped",
    STATUS_FLAKY: "flaky",
}


def _spec_outcome(spec: Spec) -> str | None:
    statuses = [attempt.status for attempt in spec.tests if attempt.status in KNOWN_STATUSES]
    if not statuses:
        return None
    if STATUS_UNEXPECTED in statuses:
        return STATUS_UNEXPECTED
    if STATUS_FLAKY in statuses:
        return STATUS_FLAKY
    if all(status == STATUS_SKIPPED for status in statuses):
        return STATUS_SKIPPED
    return STATUS_EXPECTED


def count_statuses(run: RunResult) -> Counter:
    """Return status counts for the run.

    The reporter's own ``stats`` block wins when present; otherwise each spec
    is counted once with its combined outcome across projects.
    """
    stats = run.stats
    if stats.has_counts:
        return Counter(
            {
                STATUS_EXPECTED: stats.expected,
                STATUS_UNEXPECTED: stats.unexpected,
                STATUS_SKIPPED: stats.skipped,
                STATUS_FLAKY: stats.flaky,
            }
        )

    counts: Counter = Counter({status: 0 for status in KNOWN_STATUSES})
    for spec in iter_specs(run.suites):
        outcome = _spec_outcome(spec)
        if outcome is not None:
            counts[outcome] += 1
    return counts


def build_summary(run: RunResult) -> RunSummary:
    counts = count_statuses(run)
    passed = counts[STATUS_EXPECTED]
    total = passed + counts[STATUS_UNEXPECTED] + counts[STATUS_SKIPPED]
    return RunSummary(
        total_tests=total,
        passed=passed,
        failed=counts[STATUS_UNEXPECTED],
        skipped=counts[STATUS_SKIPPED],
        flaky=counts[STATUS_FLAKY],
        pass_rate=pass_rate(passed, total),
        duration=run.stats.duration,
    )


def aggregate_by_environment(run: RunResult) -> dict[str, EnvironmentStats]:
    """Count attempts per declared project.

    Every declared project gets an entry, even with no attempts. Attempts for
    undeclared projects or with an unrecognised status are not counted.
    """
    env_stats = {name: EnvironmentStats() for name in run.config.project_names}

    for spec, attempt in iter_attempts(run.suites):
        stats = env_stats.get(attempt.project_name)
        if stats is None:
            logger.debug("Skipping '%s': undeclared project '%s'", spec.title, attempt.project_name)
            continue
        counter = _STATUS_FIELDS.get(attempt.status)
        if counter is None:
            logger.debug("Skipping '%s' (%s): unknown status '%s'", spec.title, attempt.project_name, attempt.status)
            continue

        stats.total += 1
        setattr(stats, counter, getattr(stats, counter) + 1)
        stats.duration += attempt.total_duration

    return env_stats

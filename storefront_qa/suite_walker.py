"""Depth-first traversal of the suite tree.

A suite's own specs are visited before its nested suites, which matches the
order the reporter writes them in.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from .report_schema import Spec, Suite, TestAttempt


def iter_suite_nodes(suites: Iterable[Suite], depth: int = 0) -> Iterator[tuple[int, Suite]]:
    """Yield ``(depth, suite)`` for every suite, pre-order."""
    for suite in suites:
        yield depth, suite
        yield from iter_suite_nodes(suite.suites, depth + 1)


def iter_specs(suites: Iterable[Suite]) -> Iterator[Spec]:
    for _, suite in iter_suite_nodes(suites):
        yield from suite.specs


def iter_attempts(suites: Iterable[Suite]) -> Iterator[tuple[Spec, TestAttempt]]:
    """Flatten the tree into ``(spec, attempt)`` pairs."""
    for spec in iter_specs(suites):
        for attempt in spec.tests:
            yield spec, attempt

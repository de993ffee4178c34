"""Run-result schema for Playwright JSON reporter output."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

STATUS_EXPECTED = "expected"
STATUS_UNEXPECTED = "unexpected"
STATUS_SKIPPED = "skipped"
STATUS_FLAKY = "flaky"

KNOWN_STATUSES = (STATUS_EXPECTED, STATUS_UNEXPECTED, STATUS_SKIPPED, STATUS_FLAKY)


def _as_list(payload: dict[str, Any], key: str) -> list:
    """Return ``payload[key]`` as a list, treating absent/null as empty."""
    value = payload.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"'{key}' must be a list, got {type(value).__name__}")
    return value


def _as_number(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"'{name}' must be numeric, got {value!r}")
    return value


def _as_count(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"'{name}' must be a non-negative integer, got {value!r}")
    return value


def _as_optional_count(value: Any, name: str) -> int | None:
    return None if value is None else _as_count(value, name)


@dataclass(frozen=True)
class ResultEntry:
    """One retry of a test attempt."""

    duration: float
    errors: tuple[str, ...] = ()
    retry: int = 0

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "ResultEntry":
        messages = []
        for error in _as_list(payload, "errors"):
            if isinstance(error, dict):
                messages.append(str(error.get("message", "")))
            else:
                messages.append(str(error))
        return cls(
            duration=_as_number(payload.get("duration", 0), "duration"),
            errors=tuple(messages),
            retry=_as_count(payload.get("retry", 0) or 0, "retry"),
        )


@dataclass(frozen=True)
class TestAttempt:
    """One project's execution record for a spec."""

    __test__ = False

    project_name: str
    status: str
    results: tuple[ResultEntry, ...] = ()

    @property
    def total_duration(self) -> float:
        return sum(entry.duration for entry in self.results)

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "TestAttempt":
        return cls(
            project_name=payload.get("projectName", "") or "",
            status=payload.get("status", "") or "",
            results=tuple(ResultEntry.from_dict(item) for item in _as_list(payload, "results")),
        )


@dataclass(frozen=True)
class Spec:
    """A single named test case, possibly run under several projects."""

    title: str
    ok: bool
    tests: tuple[TestAttempt, ...] = ()

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "Spec":
        return cls(
            title=payload.get("title", "") or "",
            ok=bool(payload.get("ok", False)),
            tests=tuple(TestAttempt.from_dict(item) for item in _as_list(payload, "tests")),
        )


@dataclass(frozen=True)
class Suite:
    """A named grouping of specs and nested suites."""

    title: str
    specs: tuple[Spec, ...] = ()
    suites: tuple["Suite", ...] = ()

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "Suite":
        return cls(
            title=payload.get("title", "") or "",
            specs=tuple(Spec.from_dict(item) for item in _as_list(payload, "specs")),
            suites=tuple(cls.from_dict(item) for item in _as_list(payload, "suites")),
        )


@dataclass(frozen=True)
class RunStats:
    """Run-level metadata and, when the reporter emitted them, status counts."""

    start_time: str = ""
    duration: float = 0
    expected: int | None = None
    unexpected: int | None = None
    skipped: int | None = None
    flaky: int | None = None

    @property
    def has_counts(self) -> bool:
        return None not in (self.expected, self.unexpected, self.skipped, self.flaky)

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "RunStats":
        return cls(
            start_time=str(payload.get("startTime", "") or ""),
            duration=_as_number(payload.get("duration", 0), "stats.duration"),
            expected=_as_optional_count(payload.get("expected"), "stats.expected"),
            unexpected=_as_optional_count(payload.get("unexpected"), "stats.unexpected"),
            skipped=_as_optional_count(payload.get("skipped"), "stats.skipped"),
            flaky=_as_optional_count(payload.get("flaky"), "stats.flaky"),
        )


@dataclass(frozen=True)
class RunConfig:
    """Tool configuration captured by the reporter."""

    version: str = ""
    workers: int | None = None
    root_dir: str = ""
    project_names: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "RunConfig":
        projects = _as_list(payload, "projects")
        return cls(
            version=str(payload.get("version", "") or ""),
            workers=payload.get("workers"),
            root_dir=str(payload.get("rootDir", "") or ""),
            project_names=tuple(str(project.get("name", "")) for project in projects if isinstance(project, dict)),
        )


@dataclass(frozen=True)
class RunResult:
    """Top-level record of a finished test run."""

    config: RunConfig = field(default_factory=RunConfig)
    stats: RunStats = field(default_factory=RunStats)
    suites: tuple[Suite, ...] = ()

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "RunResult":
        """Build a RunResult from the decoded reporter JSON."""
        if not isinstance(payload, dict):
            raise ValueError(f"top-level record must be an object, got {type(payload).__name__}")
        config_payload = payload.get("config") or {}
        stats_payload = payload.get("stats") or {}
        if not isinstance(config_payload, dict) or not isinstance(stats_payload, dict):
            raise ValueError("'config' and 'stats' must be objects")
        return cls(
            config=RunConfig.from_dict(config_payload),
            stats=RunStats.from_dict(stats_payload),
            suites=tuple(Suite.from_dict(item) for item in _as_list(payload, "suites")),
        )


@dataclass
class EnvironmentStats:
    """Per-project counters produced by the aggregator."""

    passed: int = 0
    failed: int = 0
    skipped: int = 0
    flaky: int = 0
    total: int = 0
    duration: float = 0

    @property
    def pass_rate(self) -> float:
        return pass_rate(self.passed, self.total)


@dataclass(frozen=True)
class RunSummary:
    """Overall counts for a run; flaky tests are tracked but not in ``total_tests``."""

    total_tests: int
    passed: int
    failed: int
    skipped: int
    flaky: int
    pass_rate: float
    duration: float


@dataclass(frozen=True)
class SlowTest:
    title: str
    browser: str
    duration: float


@dataclass(frozen=True)
class PerformanceReport:
    """Duration statistics over every individual retry."""

    durations: tuple[float, ...] = ()
    slow_tests: tuple[SlowTest, ...] = ()

    @property
    def average(self) -> float | None:
        if not self.durations:
            return None
        return sum(self.durations) / len(self.durations)

    @property
    def slowest(self) -> float | None:
        return max(self.durations) if self.durations else None

    @property
    def fastest(self) -> float | None:
        return min(self.durations) if self.durations else None


def pass_rate(passed: int, total: int) -> float:
    """Percentage of passed over total, one decimal, 0 when nothing ran."""
    if total <= 0:
        return 0.0
    return round(passed / total * 100, 1)


def format_rate(rate: float) -> str:
    """Render a pass rate the same way in every report."""
    return f"{rate:.1f}"

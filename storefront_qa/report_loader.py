"""Load Playwright JSON reporter output from disk."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from .report_schema import RunResult

logger = logging.getLogger("storefront-qa.report-loader")


class ReportLoadError(Exception):
    """The run record could not be turned into a RunResult."""


class ResultsFileNotFoundError(ReportLoadError):
    """The results file does not exist."""


class ResultsFileUnreadableError(ReportLoadError):
    """The results file exists but could not be read."""


class MalformedResultsError(ReportLoadError):
    """The results file exists but is not a usable run record."""


def load_run_result(path: str | Path) -> RunResult:
    """Read and parse a results file.

    Raises
    ------
    ResultsFileNotFoundError
        When *path* does not exist.
    ResultsFileUnreadableError
        When the file exists but reading it fails.
    MalformedResultsError
        When the file is not valid JSON or does not have the reporter's shape.
    """
    results_path = Path(path)
    if not results_path.is_file():
        raise ResultsFileNotFoundError(f"Test results file not found: {results_path}")

    try:
        text = results_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedResultsError(f"Test results file is not valid JSON: {results_path} ({exc})") from exc
    except OSError as exc:
        raise ResultsFileUnreadableError(f"Cannot read test results file {results_path}: {exc}") from exc

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedResultsError(f"Test results file is not valid JSON: {results_path} ({exc})") from exc

    try:
        run = RunResult.from_dict(payload)
    except (ValueError, TypeError, AttributeError) as exc:
        raise MalformedResultsError(f"Unexpected test results structure in {results_path}: {exc}") from exc

    logger.info("Loaded run result from %s (%d top-level suites)", results_path, len(run.suites))
    return run

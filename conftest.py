"""Root conftest: shared run-result fixtures available to all test layers."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from tests.factories import make_attempt, make_spec


@pytest.fixture()
def sample_results() -> dict:
    """A two-file run across chromium and firefox; webkit is declared but idle."""
    return {
        "config": {
            "version": "1.54.1",
            "workers": 4,
            "rootDir": "/home/ci/storefront/tests",
            "projects": [{"name": "chromium"}, {"name": "firefox"}, {"name": "webkit"}],
        },
        "suites": [
            {
                "title": "login.spec.js",
                "file": "login.spec.js",
                "specs": [],
                "suites": [
                    {
                        "title": "Login Tests",
                        "specs": [
                            make_spec(
                                "should display login form elements",
                                True,
                                make_attempt("chromium", "expected", [1200]),
                                make_attempt("firefox", "expected", [1500]),
                            ),
                            make_spec(
                                "should login with valid credentials",
                                False,
                                make_attempt("chromium", "unexpected", [6000], {0: ["Timed out 5000ms waiting for expect"]}),
                                make_attempt("firefox", "expected", [800]),
                            ),
                        ],
                    }
                ],
            },
            {
                "title": "checkout.spec.js",
                "file": "checkout.spec.js",
                "specs": [
                    make_spec(
                        "should complete checkout process",
                        True,
                        make_attempt("chromium", "flaky", [7000, 5200], {0: ["locator.click: Target closed"]}),
                        make_attempt("firefox", "skipped", [0]),
                    ),
                ],
                "suites": [
                    {
                        "title": "Checkout errors",
                        "specs": [
                            make_spec(
                                "should display error message when first name is empty",
                                True,
                                make_attempt("chromium", "expected", [300]),
                                make_attempt("firefox", "expected", [400]),
                            ),
                        ],
                    }
                ],
            },
        ],
        "stats": {"startTime": "2026-10-15T09:30:00.000Z", "duration": 21450.5},
    }


@pytest.fixture()
def write_results(tmp_path: Path):
    """Return a helper that writes a payload to ``results.json`` and returns its path."""

    def _write(payload, name: str = "results.json") -> Path:
        path = tmp_path / name
        text = payload if isinstance(payload, str) else json.dumps(payload)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def results_file(sample_results, write_results) -> Path:
    return write_results(sample_results)

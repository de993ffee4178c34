"""Configuration for the storefront suite and its report generator."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://www.saucedemo.com"
DEFAULT_USERNAME = "standard_user"
DEFAULT_PASSWORD = "secret_sauce"
DEFAULT_BROWSER = "chromium"
SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")

DEFAULT_RESULTS_DIR = "test-results"
RESULTS_FILE_NAME = "results.json"
HTML_REPORT_FILE_NAME = "custom-report.html"

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(value: str | None, default: bool) -> bool:
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class StorefrontConfig:
    """Where the application lives and who logs in.

    Page objects receive this explicitly; nothing reads the environment
    behind their back.
    """

    base_url: str = DEFAULT_BASE_URL
    username: str = DEFAULT_USERNAME
    password: str = DEFAULT_PASSWORD
    browser: str = DEFAULT_BROWSER
    headless: bool = True

    def __post_init__(self) -> None:
        if self.browser not in SUPPORTED_BROWSERS:
            raise ValueError(f"Unsupported browser '{self.browser}', expected one of {SUPPORTED_BROWSERS}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "StorefrontConfig":
        """Build a config from environment variables (and ``.env`` when reading os.environ)."""
        if environ is None:
            load_dotenv()
            environ = os.environ

        return cls(
            base_url=(environ.get("BASE_URL") or DEFAULT_BASE_URL).strip().rstrip("/"),
            username=(environ.get("STOREFRONT_USERNAME") or DEFAULT_USERNAME).strip(),
            password=environ.get("STOREFRONT_PASSWORD") or DEFAULT_PASSWORD,
            browser=(environ.get("STOREFRONT_BROWSER") or DEFAULT_BROWSER).strip().lower(),
            headless=_env_flag(environ.get("STOREFRONT_HEADLESS"), True),
        )


def e2e_enabled(environ: Mapping[str, str] | None = None) -> bool:
    """Browser journeys only run when STOREFRONT_RUN_E2E is set."""
    environ = os.environ if environ is None else environ
    return _env_flag(environ.get("STOREFRONT_RUN_E2E"), False)


def get_directory_from_env(env_name: str, default_path: str) -> Path:
    """Return a directory path from env, ensuring it exists."""
    configured = os.environ.get(env_name, default_path)
    directory = Path(configured)
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def get_results_dir() -> Path:
    """Directory holding reporter output; not created here."""
    return Path(os.environ.get("STOREFRONT_RESULTS_DIR") or DEFAULT_RESULTS_DIR)


def default_results_path() -> Path:
    return get_results_dir() / RESULTS_FILE_NAME


def default_html_report_path() -> Path:
    return get_results_dir() / HTML_REPORT_FILE_NAME

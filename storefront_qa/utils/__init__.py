"""Utility helpers for configuration and logging."""

from .config import (
    StorefrontConfig,
    default_html_report_path,
    default_results_path,
    e2e_enabled,
    get_directory_from_env,
    get_results_dir,
)
from .logging_utils import configure_json_logging

__all__ = [
    "StorefrontConfig",
    "configure_json_logging",
    "default_html_report_path",
    "default_results_path",
    "e2e_enabled",
    "get_directory_from_env",
    "get_results_dir",
]

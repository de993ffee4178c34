"""Pytest configuration for browser journeys with Playwright.

Journeys need a real browser and network access to the storefront, so they
only run when STOREFRONT_RUN_E2E is set.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from playwright.sync_api import sync_playwright

from storefront_qa.utils.config import StorefrontConfig, e2e_enabled, get_directory_from_env

from .pages import LandingPage

logger = logging.getLogger("storefront-qa.e2e")

E2E_DIR = Path(__file__).parent


def pytest_collection_modifyitems(config, items):
    if e2e_enabled():
        return
    skip_e2e = pytest.mark.skip(reason="set STOREFRONT_RUN_E2E=1 to run browser journeys")
    for item in items:
        if E2E_DIR in Path(item.path).parents:
            item.add_marker(skip_e2e)


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)


@pytest.fixture(scope="session")
def storefront_config() -> StorefrontConfig:
    return StorefrontConfig.from_env()


@pytest.fixture(scope="session")
def browser(storefront_config):
    """Launch the configured browser engine once per session."""
    with sync_playwright() as p:
        browser_type = getattr(p, storefront_config.browser)
        browser = browser_type.launch(headless=storefront_config.headless)
        yield browser
        browser.close()


@pytest.fixture(scope="function")
def page(browser, request):
    """Create a new page for each test, keeping a screenshot when it fails."""
    context = browser.new_context(
        viewport={'width': 1920, 'height': 1080}
    )
    page = context.new_page()
    yield page

    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed:
        screenshots = get_directory_from_env("STOREFRONT_SCREENSHOTS_DIR", "test-results/screenshots")
        target = screenshots / f"{request.node.name}.png"
        page.screenshot(path=str(target), full_page=True)
        logger.warning("Saved failure screenshot to %s", target)

    page.close()
    context.close()


@pytest.fixture
def landing_page(page, storefront_config) -> LandingPage:
    landing = LandingPage(page, storefront_config)
    landing.navigate()
    return landing


@pytest.fixture
def logged_in_page(landing_page):
    """A page already past the login form, on the inventory."""
    landing_page.login_with_default_credentials()
    return landing_page.page

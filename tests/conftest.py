# ABOUTME: Shared fixtures for the framework tests
# ABOUTME: Isolates run environment variables and serves storefront HTML to browser tests

from pathlib import Path

import pytest
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

FIXTURES_DIR = Path(__file__).parent / "fixtures"
STOREFRONT_ORIGIN = "https://storefront.test"

RUN_ENV_VARS = (
    "COUNTRY",
    "BRANCH",
    "HEADLESS",
    "BASE_URL",
    "DEPLOY_PREVIEW_URL",
    "DEPLOY_PRIME_URL",
    "CONTEXT",
    "CI",
    "E2E_CONFIG",
)


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "browser: test drives a real browser against local HTML"
    )


def _chromium_installed() -> bool:
    try:
        with sync_playwright() as p:
            return Path(p.chromium.executable_path).exists()
    except PlaywrightError:
        return False


def pytest_collection_modifyitems(config, items):
    browser_items = [item for item in items if item.get_closest_marker("browser")]
    if browser_items and not _chromium_installed():
        skip = pytest.mark.skip(reason="Chromium not installed (run `playwright install chromium`)")
        for item in browser_items:
            item.add_marker(skip)


@pytest.fixture(autouse=True)
def clean_run_env(monkeypatch):
    """Start each test without run variables; restored afterwards."""
    for name in RUN_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def serve_storefront(page):
    """Serve HTML at the fake storefront origin and open a path on it."""

    def serve(html: str, path: str = "/"):
        page.route(
            f"{STOREFRONT_ORIGIN}/**",
            lambda route: route.fulfill(status=200, content_type="text/html", body=html),
        )
        page.goto(f"{STOREFRONT_ORIGIN}{path}")
        return page

    return serve


@pytest.fixture
def pdp_html():
    return (FIXTURES_DIR / "pdp.html").read_text()

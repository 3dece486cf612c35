# ABOUTME: Shared fixtures and global setup for the live storefront specs
# ABOUTME: Resolves the target once per run and loads the saved auth state into every context

import json
from pathlib import Path

import pytest
from playwright.sync_api import Page, expect

from storefront_e2e.analytics import AnalyticsFixture
from storefront_e2e.config import get_config
from storefront_e2e.env import env, load_env
from storefront_e2e.global_setup import global_setup
from storefront_e2e.pages import MiniCartPage, ProductDetailPage

SPECS_DIR = Path(__file__).parent
PDP_DATA_PATH = SPECS_DIR / "test_data" / "pdp_data.json"

MARKERS = (
    "storefront: test runs against the live storefront",
    "pdp: product detail page behaviour",
    "cart: cart integration",
    "analytics: analytics and consent tags",
    "smoke: smoke suite",
    "regression: regression suite",
)


def pytest_addoption(parser):
    parser.addoption(
        "--skip-global-setup",
        action="store_true",
        default=False,
        help="Resolve BASE_URL but reuse the existing auth state file",
    )


def pytest_configure(config):
    """Register markers and apply run configuration to pytest-playwright."""
    for marker in MARKERS:
        config.addinivalue_line("markers", marker)

    load_env()
    run_config = get_config()
    expect.set_options(timeout=run_config.expect_timeout_ms)

    if not env.HEADLESS:
        config.option.headed = True
    if getattr(config.option, "screenshot", "off") == "off":
        config.option.screenshot = "only-on-failure"
    if getattr(config.option, "output", None) == "test-results":
        config.option.output = run_config.test_results_dir


@pytest.hookimpl(tryfirst=True)
def pytest_sessionstart(session):
    """Run global setup once, before any test; failures abort the run."""
    # Runs before pytest-xdist starts workers; they inherit BASE_URL from the environment
    if hasattr(session.config, "workerinput"):
        return

    global_setup(bootstrap=not session.config.getoption("skip_global_setup"))


def pytest_collection_modifyitems(items):
    for item in items:
        if SPECS_DIR in item.path.parents:
            item.add_marker(pytest.mark.storefront)


@pytest.fixture(scope="session")
def run_config():
    return get_config()


@pytest.fixture(scope="session")
def base_url():
    return env.BASE_URL


@pytest.fixture(scope="session")
def browser_context_args(browser_context_args, run_config):
    return {
        **browser_context_args,
        "storage_state": run_config.auth_state_path,
    }


@pytest.fixture
def page(page: Page, run_config) -> Page:
    page.set_default_timeout(run_config.action_timeout_ms)
    page.set_default_navigation_timeout(run_config.navigation_timeout_ms)
    return page


@pytest.fixture(scope="session")
def pdp_data():
    with open(PDP_DATA_PATH, "r") as f:
        return json.load(f)


@pytest.fixture(scope="session")
def default_product(pdp_data):
    return pdp_data["products"][0]


@pytest.fixture
def pdp(page):
    return ProductDetailPage(page)


@pytest.fixture
def mini_cart(page):
    return MiniCartPage(page)


@pytest.fixture
def analytics(page):
    return AnalyticsFixture(page)

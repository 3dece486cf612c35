# ABOUTME: Product detail page reviews tests
# ABOUTME: Verifies the reviews preview and navigation to the reviews section

import pytest
from playwright.sync_api import expect

from storefront_e2e.pages import product_url

pytestmark = [pytest.mark.pdp, pytest.mark.regression, pytest.mark.smoke]


@pytest.fixture(autouse=True)
def open_default_product(page, default_product):
    page.goto(product_url(default_product.get("slug")))


def test_reviews_accordion_navigates_to_reviews_section(pdp):
    """Test that clicking the reviews count scrolls to the reviews section."""
    pdp.click_reviews_accordion()

    expect(pdp.get_reviews_section()).to_be_visible()


def test_reviews_preview_shown_in_product_info(pdp):
    """Test that the reviews preview appears next to the title and price."""
    expect(pdp.get_reviews().get_reviews_accordion()).to_be_visible()

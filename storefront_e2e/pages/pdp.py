# ABOUTME: Page object for the product detail page (PDP)
# ABOUTME: Composes the PDP components and the flows the specs drive

import logging
from typing import NamedTuple, Optional

from playwright.sync_api import Locator, Page

from ..components.pdp import (
    ColorSelectorComponent,
    ProductCTAComponent,
    ProductGalleryComponent,
    ProductInfoComponent,
    ReviewsComponent,
    SizeSelectorComponent,
)
from .base import BasePage

logger = logging.getLogger(__name__)


class ProductDetails(NamedTuple):
    name: str
    price: str


def product_url(slug: Optional[str]) -> str:
    return f"/products/{slug or 'default-product'}"


class ProductDetailPage(BasePage):
    """Product detail page composed of info, gallery, selectors, CTA and reviews."""

    def __init__(self, page: Page, url: Optional[str] = None):
        super().__init__(page, url)
        logger.debug("Initializing ProductDetailPage")

        self.product_section = page.get_by_test_id("product-options-section")

        self.product_info = self.register_component(
            "product_info", ProductInfoComponent(page, self.product_section)
        )
        self.product_gallery = self.register_component(
            "product_gallery", ProductGalleryComponent(page, self.product_section)
        )
        self.color_selector = self.register_component(
            "color_selector", ColorSelectorComponent(page, self.product_section)
        )
        self.size_selector = self.register_component(
            "size_selector", SizeSelectorComponent(page, self.product_section)
        )
        self.product_cta = self.register_component(
            "product_cta", ProductCTAComponent(page, self.product_section)
        )
        self.reviews = self.register_component("reviews", ReviewsComponent(page, "body"))

    def get_product_info(self) -> ProductInfoComponent:
        return self.product_info

    def get_product_gallery(self) -> ProductGalleryComponent:
        return self.product_gallery

    def get_color_selector(self) -> ColorSelectorComponent:
        return self.color_selector

    def get_size_selector(self) -> SizeSelectorComponent:
        return self.size_selector

    def get_product_cta(self) -> ProductCTAComponent:
        return self.product_cta

    def get_reviews(self) -> ReviewsComponent:
        return self.reviews

    def get_product_section(self) -> Locator:
        return self.product_section

    def get_reviews_section(self) -> Locator:
        return self.reviews.get_reviews_section()

    def get_product_info_from_pdp_details(self) -> ProductDetails:
        """Read the product name and price shown on the PDP."""
        self.product_info.wait_for_loaded()
        return ProductDetails(
            name=self.product_info.get_title_text().strip(),
            price=self.product_info.get_price_text().strip(),
        )

    def select_first_available_size_and_inseam(self) -> None:
        self.size_selector.select_first_available_size_and_inseam()

    def click_add_to_cart_button(self) -> None:
        self.product_cta.click_add_to_cart()

    def click_reviews_accordion(self) -> None:
        self.reviews.click_reviews_accordion()

# ABOUTME: Page object for the mini cart drawer
# ABOUTME: Picks the line item to validate, skipping a leading free gift

import logging
from typing import Optional

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page

from ..components.cart import (
    CART_DRAWER_SELECTOR,
    CartDrawerComponent,
    CartItemComponent,
    CartSummaryComponent,
)
from .base import BasePage

logger = logging.getLogger(__name__)


class MiniCartPage(BasePage):
    """The cart drawer that opens after adding a product."""

    def __init__(self, page: Page, url: Optional[str] = None):
        super().__init__(page, url)
        logger.debug("Initializing MiniCartPage")

        self.cart_drawer = self.register_component(
            "cart_drawer", CartDrawerComponent(page, CART_DRAWER_SELECTOR)
        )
        self.cart_item = self.register_component(
            "cart_item", CartItemComponent(page, page.locator(CART_DRAWER_SELECTOR))
        )
        self.cart_summary = self.register_component(
            "cart_summary", CartSummaryComponent(page, page.locator(CART_DRAWER_SELECTOR))
        )

    def get_mini_cart(self) -> Locator:
        return self.cart_drawer.get_cart_drawer()

    def get_cart_subtotal(self) -> Locator:
        return self.cart_summary.get_cart_subtotal()

    def get_product_title_in_cart(self, index: int = 0) -> Locator:
        return self.cart_item.get_product_title_in_cart(index)

    def get_product_price_in_cart(self, index: int = 0) -> Locator:
        return self.cart_item.get_product_price_in_cart(index)

    def get_item_quantity(self, index: int = 0) -> Locator:
        return self.cart_item.get_item_quantity(index)

    def has_free_gift_on_page(self) -> bool:
        logger.debug("Checking if there is a free gift on the page")
        try:
            visible = self.page.get_by_text("Free Gift", exact=True).first.is_visible()
        except PlaywrightError as e:
            logger.error(f"Error checking for free gift: {e}")
            return False

        if visible:
            logger.debug("Free gift detected on page")
        return visible

    def get_product_index_for_validation(self) -> int:
        """
        Index of the line item the specs should validate.

        A free gift is added ahead of the purchased product, so the second
        item is used when a gift is shown and the cart holds more than one.

        Returns:
            1 when a free gift precedes the product, otherwise 0
        """
        try:
            if not self.has_free_gift_on_page():
                return 0

            logger.debug("Free Gift detected on page, using second product for validation")
            if self.cart_item.get_product_grid_items().count() <= 1:
                logger.warning(
                    "Free gift detected but only one product in cart, falling back to index 0"
                )
                return 0
            return 1
        except PlaywrightError as e:
            logger.error(f"Error determining product index for validation: {e}")
            return 0

    def get_product_title_for_validation(self) -> Locator:
        index = self.get_product_index_for_validation()
        logger.debug(f"Using product index {index} for title validation")
        return self.get_product_title_in_cart(index)

    def get_product_price_for_validation(self) -> Locator:
        index = self.get_product_index_for_validation()
        logger.debug(f"Using product index {index} for price validation")
        return self.get_product_price_in_cart(index)

    def get_item_quantity_for_validation(self) -> Locator:
        index = self.get_product_index_for_validation()
        logger.debug(f"Using product index {index} for quantity validation")
        return self.get_item_quantity(index)

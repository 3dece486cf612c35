# ABOUTME: Product detail page components
# ABOUTME: Product info, gallery, color/size selectors, call-to-action and reviews

import logging
import re
from typing import List, Optional

from playwright.sync_api import Locator
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError
from playwright.sync_api import expect

from ..errors import SizeSelectionError
from .base import BaseComponent

logger = logging.getLogger(__name__)

COLOR_TITLE_PATTERN = re.compile(r"Color:\s*(.+)", re.IGNORECASE)
SIZE_TITLE_PATTERN = re.compile(r"Size:\s*(.+)", re.IGNORECASE)
SIZE_SELECT_TEST_ID = "productTextSelect"


class ProductInfoComponent(BaseComponent):
    """Product title, price and breadcrumbs."""

    def __init__(self, page, root_locator):
        super().__init__(page, root_locator)
        logger.debug("Initializing ProductInfoComponent")

        # The first title/price pair belongs to the sticky header
        self.product_title = self.page.get_by_test_id("productdescriptionprice-title").nth(1)
        self.product_price = self.page.get_by_test_id("productdescriptionprice-price").nth(1)
        self.breadcrumbs = self.page.get_by_label("breadcrumb")

    def get_title(self) -> Locator:
        return self.product_title

    def get_price(self) -> Locator:
        return self.product_price

    def get_breadcrumbs(self) -> Locator:
        return self.breadcrumbs

    def get_title_text(self) -> str:
        return self.product_title.text_content() or ""

    def get_price_text(self) -> str:
        return self.product_price.text_content() or ""

    def wait_for_loaded(self, timeout: Optional[float] = None) -> None:
        logger.debug("Waiting for product information to be loaded")
        self.product_title.wait_for(state="visible", timeout=timeout)
        self.product_price.wait_for(state="visible", timeout=timeout)


class ProductGalleryComponent(BaseComponent):
    """Product image gallery."""

    def __init__(self, page, root_locator):
        super().__init__(page, root_locator)
        logger.debug("Initializing ProductGalleryComponent")

        self.product_images = self.page.get_by_label("product image gallery")
        self.main_image = self.product_images.get_by_role("img").first

    def get_main_image(self) -> Locator:
        return self.main_image

    def get_image_count(self) -> int:
        return self.product_images.get_by_role("img").count()

    def wait_for_loaded(self, timeout: Optional[float] = None) -> None:
        logger.debug("Waiting for gallery to be loaded")
        self.main_image.wait_for(state="visible", timeout=timeout)


class ColorSelectorComponent(BaseComponent):
    """Color swatches and the selected color title."""

    OPTION_SELECTOR = '[data-radio-button="product-color-select"]'

    def __init__(self, page, root_locator):
        super().__init__(page, root_locator)
        logger.debug("Initializing ColorSelectorComponent")

        self.color_label = self.page.get_by_text("Color", exact=True)
        self.color_options = self.page.locator(self.OPTION_SELECTOR)
        self.selected_color_title = self.page.get_by_test_id("product-select-title").filter(
            has_text=re.compile("Color:", re.IGNORECASE)
        )

    def get_color_label(self) -> Locator:
        return self.color_label

    def get_color_options(self) -> Locator:
        return self.color_options

    def get_color_count(self) -> int:
        return self.color_options.count()

    def get_color_values(self) -> List[str]:
        return self.color_options.evaluate_all("nodes => nodes.map(node => node.value)")

    def get_selected_color(self) -> str:
        text = self.selected_color_title.text_content() or ""
        match = COLOR_TITLE_PATTERN.search(text)
        return match.group(1).strip() if match else text.strip()

    def select_color(self, color: str) -> None:
        logger.debug(f"Selecting color: {color}")
        self.page.locator(f'{self.OPTION_SELECTOR}[value="{color}"]').click()

    def wait_for_loaded(self, timeout: Optional[float] = None) -> None:
        logger.debug("Waiting for color selector to be loaded")
        self.color_label.wait_for(state="visible", timeout=timeout)
        self.color_options.first.wait_for(state="visible", timeout=timeout)


class SizeSelectorComponent(BaseComponent):
    """Size and inseam options, size chart and fit finder."""

    def __init__(self, page, root_locator):
        super().__init__(page, root_locator)
        logger.debug("Initializing SizeSelectorComponent")

        self.size_label = self.page.get_by_text("Size", exact=True).first
        self.size_options = self.page.get_by_test_id(SIZE_SELECT_TEST_ID)
        self.find_my_size_button = self.page.get_by_role("button", name="Find My Size")
        self.size_chart_link = self.page.get_by_test_id("sizeChartTestId")
        self.selected_size_text = self.page.get_by_text(
            re.compile("Size: ", re.IGNORECASE)
        ).first

    def get_size_label(self) -> Locator:
        return self.size_label

    def get_find_my_size_button(self) -> Locator:
        return self.find_my_size_button

    def get_size_chart_link(self) -> Locator:
        return self.size_chart_link

    def get_available_sizes(self) -> List[str]:
        return " ".join(self.size_options.all_inner_texts()).split()

    def get_selected_size(self) -> str:
        if not self.selected_size_text.is_visible():
            return ""

        text = self.selected_size_text.text_content() or ""
        match = SIZE_TITLE_PATTERN.search(text)
        return match.group(1).strip() if match else ""

    def select_first_available_size(self) -> str:
        """
        Click the first enabled size button.

        Returns:
            The selected size as shown in the size title

        Raises:
            SizeSelectionError: If there are no size buttons or all are disabled
        """
        logger.debug("Selecting first available size")

        size_buttons = self.size_options.first.locator("button").all()
        if not size_buttons:
            logger.warning("No size buttons found")
            raise SizeSelectionError("No size buttons found on the page")

        for size in size_buttons:
            if size.is_enabled():
                logger.debug(f"Clicking size button: {size.text_content() or 'unknown'}")
                size.click()
                selected = self.get_selected_size()
                logger.debug(f"Selected size: {selected}")
                return selected

        logger.warning("No enabled size buttons found - all sizes may be out of stock")
        raise SizeSelectionError("No available sizes found - all sizes may be out of stock")

    def select_first_available_inseam(self) -> bool:
        """
        Click the first enabled inseam button, if the product has inseams.

        Returns:
            True if an inseam was selected
        """
        logger.debug("Selecting first available inseam")

        # A second text selector, when present, holds the inseam options
        if self.size_options.count() < 2:
            logger.debug("No inseam selector found - product may not have inseam options")
            return False

        for inseam in self.size_options.nth(1).locator("button").all():
            if inseam.is_enabled():
                inseam.click()
                logger.debug("Selected inseam")
                return True

        logger.warning("No available inseam options found - all buttons are disabled")
        return False

    def select_first_available_size_and_inseam(self) -> None:
        """
        Select inseam (when present) then size.

        Inseam goes first because it can change which sizes are in stock.

        Raises:
            SizeSelectionError: If no size could be selected
        """
        logger.debug("Selecting first available size and inseam")
        selectors = self.size_options.count()

        if selectors == 0:
            logger.warning("No size selectors found on the page")
            return

        if selectors > 1:
            logger.debug("Product has multiple selectors, handling inseam first")
            self.select_first_available_inseam()

        self.select_first_available_size()

    def validate_sizes(self, expected_sizes: List[str]) -> bool:
        logger.debug(f"Validating sizes: {expected_sizes}")
        available = self.get_available_sizes()

        for expected in expected_sizes:
            if expected not in available:
                logger.error(
                    f'Expected size "{expected}" not found in available sizes: {available}'
                )
                return False
        return True

    def wait_for_loaded(self, timeout: Optional[float] = None) -> None:
        logger.debug("Waiting for size selector to be loaded")
        self.size_label.wait_for(state="visible", timeout=timeout)
        self.size_options.first.wait_for(state="visible", timeout=timeout)


class ProductCTAComponent(BaseComponent):
    """Add to cart / select size buttons."""

    def __init__(self, page, root_locator):
        super().__init__(page, root_locator)
        logger.debug("Initializing ProductCTAComponent")

        self.select_size_button = self.page.get_by_role(
            "button", name=re.compile("Select size", re.IGNORECASE)
        ).first
        self.add_to_cart_button = (
            self.page.get_by_role("button")
            .filter(has_text=re.compile(r"Add to (Cart|Bag)", re.IGNORECASE))
            .first
        )

    def get_add_to_cart_button(self) -> Locator:
        return self.add_to_cart_button

    def get_select_size_button(self) -> Locator:
        return self.select_size_button

    def click_add_to_cart(self) -> None:
        logger.debug("Clicking Add to Cart button")
        if not self.add_to_cart_button.is_visible():
            raise AssertionError("Add to Cart button is not visible")
        self.add_to_cart_button.click()

    def wait_for_loaded(self, timeout: Optional[float] = None) -> bool:
        """
        Wait for either the add to cart or the select size button.

        Returns:
            False if neither became visible before the timeout
        """
        logger.debug("Waiting for CTA section to be loaded")
        try:
            self.add_to_cart_button.or_(self.select_size_button).first.wait_for(
                state="visible", timeout=timeout
            )
        except PlaywrightTimeoutError:
            logger.warning("Neither Add to Cart nor Select size became visible")
            return False
        return True

    def wait_for_add_to_cart_enabled(self, timeout: Optional[float] = None) -> None:
        logger.debug("Waiting for Add to Cart button to be enabled")
        expect(self.add_to_cart_button).to_be_enabled(timeout=timeout)


class ReviewsComponent(BaseComponent):
    """Reviews accordion (desktop and mobile variants) and reviews section."""

    def __init__(self, page, root_locator):
        super().__init__(page, root_locator)
        logger.debug("Initializing ReviewsComponent")

        self.reviews_accordion_desktop = self.page.get_by_test_id(
            "pdptop-title-price"
        ).get_by_test_id("reviews-display-count")
        self.reviews_accordion_mobile = self.page.get_by_test_id(
            "pdptop-title-price-mobile"
        ).get_by_test_id("reviews-display-count")
        self.reviews_section = self.page.locator('div[data-a11y="pdp-reviews"]')

    def get_reviews_accordion(self) -> Locator:
        if self.reviews_accordion_desktop.is_visible():
            return self.reviews_accordion_desktop
        return self.reviews_accordion_mobile

    def get_reviews_section(self) -> Locator:
        return self.reviews_section

    def click_reviews_accordion(self) -> None:
        logger.debug("Clicking reviews accordion")
        self.get_reviews_accordion().click()

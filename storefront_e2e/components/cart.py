# ABOUTME: Cart drawer components
# ABOUTME: Drawer, line items and summary (subtotal, checkout)

from playwright.sync_api import Locator

from .base import BaseComponent

CART_DRAWER_SELECTOR = '[data-a11y="cart-drawer"]'


class CartDrawerComponent(BaseComponent):
    def __init__(self, page, root_locator=CART_DRAWER_SELECTOR):
        super().__init__(page, root_locator)
        self.cart_drawer = page.locator(CART_DRAWER_SELECTOR)
        self.close_button = page.get_by_label("Close Cart Drawer")

    def get_cart_drawer(self) -> Locator:
        return self.cart_drawer

    def close(self) -> None:
        self.close_button.click()


class CartItemComponent(BaseComponent):
    """Line items in the cart, addressed by index."""

    def __init__(self, page, root_locator=CART_DRAWER_SELECTOR):
        super().__init__(page, root_locator)
        self.product_grid_item = self.get_root().get_by_test_id("product-grid-item")

    def get_product_grid_items(self) -> Locator:
        return self.product_grid_item

    def get_product_grid_item_by_index(self, index: int = 0) -> Locator:
        return self.product_grid_item.nth(index)

    def get_product_title_in_cart(self, index: int = 0) -> Locator:
        return self.get_product_grid_item_by_index(index).get_by_test_id(
            "productdescriptionprice-title"
        )

    def get_product_price_in_cart(self, index: int = 0) -> Locator:
        return self.get_product_grid_item_by_index(index).get_by_test_id(
            "productdescriptionprice-price"
        )

    def get_item_quantity(self, index: int = 0) -> Locator:
        return self.get_product_grid_item_by_index(index).get_by_test_id("counter")

    def get_remove_button(self, index: int = 0) -> Locator:
        return self.get_product_grid_item_by_index(index).get_by_test_id(
            "cartproductitem-remove"
        )


class CartSummaryComponent(BaseComponent):
    def __init__(self, page, root_locator=CART_DRAWER_SELECTOR):
        super().__init__(page, root_locator)
        self.cart_subtotal = page.get_by_test_id("cart-subtotal")
        self.checkout_button = page.get_by_role("button", name="Checkout")

    def get_cart_subtotal(self) -> Locator:
        return self.cart_subtotal

    def click_checkout(self) -> None:
        self.checkout_button.click()

# ABOUTME: Base class for reusable UI components
# ABOUTME: Wraps a root locator and exposes visibility and child lookups

from typing import Optional, Union

from playwright.sync_api import Locator, Page


class BaseComponent:
    """A UI element that can appear on several pages, anchored at a root locator."""

    def __init__(self, page: Page, root_locator: Union[str, Locator]):
        """
        Create a component.

        Args:
            page: Playwright page object
            root_locator: CSS selector or Locator for the component root
        """
        self.page = page
        self.root = (
            page.locator(root_locator) if isinstance(root_locator, str) else root_locator
        )

    def is_visible(self) -> bool:
        return self.root.is_visible()

    def wait_for_visible(self, timeout: Optional[float] = None) -> None:
        self.root.wait_for(state="visible", timeout=timeout)

    def get_root(self) -> Locator:
        return self.root

    def get_element(self, selector: str) -> Locator:
        return self.root.locator(selector)

# ABOUTME: Base class for page objects
# ABOUTME: Navigation, title/URL access and a registry of composed components

from typing import Dict, Optional

from playwright.sync_api import Page

from ..components.base import BaseComponent
from ..errors import ComponentNotRegisteredError


class BasePage:
    """A complete page, composed of components, at a URL relative to the base URL."""

    def __init__(self, page: Page, url: Optional[str] = None):
        self.page = page
        self.url = url or "/"
        self.components: Dict[str, BaseComponent] = {}

    def goto(self, wait_until: Optional[str] = None) -> None:
        self.page.goto(self.url, wait_until=wait_until)

    def get_title(self) -> str:
        return self.page.title()

    def get_url(self) -> str:
        return self.page.url

    def register_component(self, name: str, component: BaseComponent) -> BaseComponent:
        self.components[name] = component
        return component

    def get_component(self, name: str) -> BaseComponent:
        """
        Look up a registered component.

        Args:
            name: Name the component was registered under

        Returns:
            The component instance

        Raises:
            ComponentNotRegisteredError: If no component has that name
        """
        try:
            return self.components[name]
        except KeyError:
            raise ComponentNotRegisteredError(name) from None

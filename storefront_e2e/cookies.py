# ABOUTME: Authentication cookies and storage state persistence
# ABOUTME: Injects the password-bypass cookies and saves the browser context state

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from playwright.sync_api import BrowserContext

logger = logging.getLogger(__name__)

AUTH_COOKIES = (
    ("vuori_access", "allowed"),
    ("automation", "true"),
)


def build_auth_cookies(cookie_domain: str) -> List[Dict[str, Any]]:
    """
    Build the cookies that bypass storefront password protection.

    Args:
        cookie_domain: Domain scope, normally with a leading dot

    Returns:
        Cookie records in Playwright's add_cookies format
    """
    return [
        {
            "name": name,
            "value": value,
            "domain": cookie_domain,
            "path": "/",
            "expires": -1,
            "httpOnly": False,
            "secure": False,
            "sameSite": "Lax",
        }
        for name, value in AUTH_COOKIES
    ]


class CookieManager:
    """Adds auth cookies to a context and persists its storage state."""

    @staticmethod
    def add_auth_cookies(context: BrowserContext, cookie_domain: str) -> None:
        context.add_cookies(build_auth_cookies(cookie_domain))
        logger.debug(f"Added auth cookies for {cookie_domain}")

    @staticmethod
    def save_context_state(context: BrowserContext, path: str) -> Dict[str, Any]:
        """
        Write the context's cookies and local storage to a file.

        The file is overwritten wholesale on every call.

        Args:
            context: Browser context to snapshot
            path: Destination JSON file

        Returns:
            The storage state that was written
        """
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        return context.storage_state(path=path)

    @staticmethod
    def read_state(path: str) -> Dict[str, Any]:
        with open(path, "r") as f:
            return json.load(f)

# ABOUTME: One-time global setup run before any storefront test
# ABOUTME: Resolves the target environment and writes the authenticated storage state

import logging
from dataclasses import replace
from typing import Callable, Optional

from playwright.sync_api import sync_playwright

from .config import RunConfig, get_config
from .cookies import CookieManager
from .env import Settings, env, load_settings
from .resolution import is_deploy_preview, parse_deploy_preview_url, resolve_target

logger = logging.getLogger(__name__)


def bootstrap_auth_state(
    cookie_domain: str,
    state_path: str,
    playwright_factory: Callable = sync_playwright,
) -> dict:
    """
    Launch a throwaway browser and persist a storage state with auth cookies.

    Args:
        cookie_domain: Domain the auth cookies are scoped to
        state_path: File the storage state is written to
        playwright_factory: Returns a Playwright context manager

    Returns:
        The storage state that was written
    """
    with playwright_factory() as playwright:
        browser = playwright.chromium.launch()
        try:
            context = browser.new_context()
            CookieManager.add_auth_cookies(context, cookie_domain)
            state = CookieManager.save_context_state(context, state_path)
            logger.info(f"Auth state saved with cookies to {state_path}")
            return state
        finally:
            browser.close()


def global_setup(
    settings: Optional[Settings] = None,
    config: Optional[RunConfig] = None,
    playwright_factory: Callable = sync_playwright,
    bootstrap: bool = True,
) -> Settings:
    """
    Resolve the environment and bootstrap the shared auth state.

    Any failure is logged and re-raised so the run aborts before tests start.

    Args:
        settings: Run settings; read from the environment when omitted
        config: Run configuration; loaded from YAML when omitted
        playwright_factory: Returns a Playwright context manager
        bootstrap: Write the auth state; False only resolves the base URL

    Returns:
        Settings carrying the resolved base URL
    """
    try:
        settings = settings or load_settings()
        config = config or get_config()

        logger.info("Global setup using environment variables:")
        logger.info(f"COUNTRY: {settings.country}")
        logger.info(f"BRANCH: {settings.branch}")

        preview_url = None
        if settings.deploy_preview_url:
            logger.info(f"DEPLOY_PREVIEW_URL: {settings.deploy_preview_url}")
            parse_deploy_preview_url(settings.deploy_preview_url)
            if is_deploy_preview():
                preview_url = env.DEPLOY_PRIME_URL

        target = resolve_target(settings, deploy_preview_url=preview_url)
        if target.deploy_preview:
            logger.info("Running tests against deploy preview")
        elif preview_url is not None:
            logger.warning(
                "Deploy preview URL has no host, falling back to normal configuration"
            )

        env.BASE_URL = target.base_url
        logger.info(f"Setting BASE_URL to: {target.base_url}")
        logger.info(f"Using cookie domain: {target.cookie_domain}")

        if bootstrap:
            bootstrap_auth_state(
                target.cookie_domain,
                config.auth_state_path,
                playwright_factory=playwright_factory,
            )
        else:
            logger.info(f"Reusing existing auth state at {config.auth_state_path}")
        return replace(settings, base_url=target.base_url)
    except Exception as e:
        logger.error(f"Error in global setup: {e}", exc_info=True)
        raise

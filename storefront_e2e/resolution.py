# ABOUTME: Environment and country resolution for a test run
# ABOUTME: Picks the target domain, base URL and cookie domain, incl. deploy previews

import logging
import os
from dataclasses import dataclass, replace
from typing import Optional
from urllib.parse import urlsplit

from .countries import CountryConfig, generate_test_countries
from .env import DEPLOY_PREVIEW_CONTEXT, Settings, env
from .errors import ConfigurationError, CountryNotFoundError

logger = logging.getLogger(__name__)

SUBDOMAIN_MARKER = "web."


@dataclass(frozen=True)
class Target:
    """Where the suite points: resolved country, base URL and cookie scope."""

    country: CountryConfig
    base_url: str
    cookie_domain: str
    deploy_preview: bool = False


def normalize_cookie_domain(domain: str, raw_cookie_domain: str) -> str:
    """
    Compute a leading-dot cookie domain valid across subdomains.

    If the domain contains "web." anywhere, everything after its first
    occurrence is used; otherwise the raw cookie domain is used.

    Args:
        domain: Resolved hostname
        raw_cookie_domain: Cookie domain from the country record

    Returns:
        Cookie domain prefixed with "."
    """
    if SUBDOMAIN_MARKER in domain:
        return f".{domain[domain.index(SUBDOMAIN_MARKER) + len(SUBDOMAIN_MARKER):]}"
    return f".{raw_cookie_domain}"


def get_environment_country_config(
    country_code: Optional[str] = None, branch: Optional[str] = None
) -> CountryConfig:
    """
    Resolve the branch-specific configuration for a country.

    Args:
        country_code: ISO country code; defaults to COUNTRY
        branch: Deployment branch; defaults to BRANCH

    Returns:
        A new CountryConfig with the normalized cookie domain

    Raises:
        CountryNotFoundError: If the country code has no record
    """
    country_code = country_code if country_code is not None else env.COUNTRY
    branch = branch if branch is not None else env.BRANCH

    # Must be visible before generating; later readers use the env value
    os.environ["BRANCH"] = branch

    match = next(
        (c for c in generate_test_countries(branch) if c.country_code == country_code),
        None,
    )
    if match is None:
        raise CountryNotFoundError(country_code)

    resolved = replace(
        match, cookie_domain=normalize_cookie_domain(match.domain, match.cookie_domain)
    )
    if not resolved.domain or resolved.cookie_domain == ".":
        raise ConfigurationError(
            f"Country configuration for {country_code} has an empty domain"
        )
    return resolved


def get_base_url(country_config: CountryConfig) -> str:
    return f"{country_config.protocol or 'https'}://{country_config.domain}"


def parse_deploy_preview_url(deploy_preview_url: Optional[str]) -> bool:
    """
    Mark the run as targeting a deploy preview.

    No URL validation is performed; any non-empty string is accepted.

    Args:
        deploy_preview_url: The preview URL

    Returns:
        True if the preview markers were set, False for empty input
    """
    if not deploy_preview_url:
        return False

    os.environ["DEPLOY_PRIME_URL"] = deploy_preview_url
    os.environ["CONTEXT"] = DEPLOY_PREVIEW_CONTEXT
    return True


def is_deploy_preview() -> bool:
    return env.CONTEXT == DEPLOY_PREVIEW_CONTEXT and bool(env.DEPLOY_PRIME_URL)


def deploy_preview_base_url(deploy_preview_url: str) -> str:
    """Turn a preview URL into a base URL (scheme added, trailing slash dropped)."""
    url = deploy_preview_url.strip()
    if "://" not in url:
        url = f"https://{url}"
    return url.rstrip("/")


def resolve_target(settings: Settings, deploy_preview_url: Optional[str] = None) -> Target:
    """
    Decide the base URL and cookie domain for a run.

    A non-blank deploy preview URL replaces the country/branch domain as
    the base URL; the country is still resolved so an unknown COUNTRY fails.

    Args:
        settings: Run settings snapshot
        deploy_preview_url: Parsed preview URL, if the run targets one

    Returns:
        The resolved Target
    """
    country = get_environment_country_config(settings.country, settings.branch)

    if deploy_preview_url and deploy_preview_url.strip():
        base_url = deploy_preview_base_url(deploy_preview_url)
        host = urlsplit(base_url).hostname or ""
        cookie_domain = (
            normalize_cookie_domain(host, host) if host else country.cookie_domain
        )
        logger.info(f"Deploy preview bypasses domain resolution: {base_url}")
        return Target(
            country=country,
            base_url=base_url,
            cookie_domain=cookie_domain,
            deploy_preview=True,
        )

    return Target(
        country=country,
        base_url=get_base_url(country),
        cookie_domain=country.cookie_domain,
    )

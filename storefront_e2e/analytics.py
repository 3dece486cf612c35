# ABOUTME: Analytics and consent tag configuration plus page inspection helpers
# ABOUTME: Reads cookies, window variables, page source and localStorage

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from playwright.sync_api import Page

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OneTrustConfig:
    cookie_name: str = "OptanonConsent"
    active_groups_variable: str = "OnetrustActiveGroups"
    required_parameters: tuple = ()


@dataclass(frozen=True)
class GtmConfig:
    script_url: str = "https://www.googletagmanager.com/gtm.js"
    ids: Dict[str, str] = field(
        default_factory=lambda: {
            "production": "GTM-TCVZ9HT",
            "staging": "GTM-TCVZ9HT",
            "development": "GTM-TCVZ9HT",
        }
    )


@dataclass(frozen=True)
class ElevarConfig:
    data_layer_variable: str = "ElevarDataLayer"
    required_properties: tuple = ()


@dataclass(frozen=True)
class ConsentConfig:
    local_storage_key: str = "consentSettings"
    required_parameters: tuple = (
        "ad_personalization",
        "ad_storage",
        "ad_user_data",
        "analytics_storage",
        "functionality_storage",
        "personalization_storage",
        "security_storage",
    )


@dataclass(frozen=True)
class AnalyticsConfig:
    onetrust: OneTrustConfig = field(default_factory=OneTrustConfig)
    gtm: GtmConfig = field(default_factory=GtmConfig)
    elevar: ElevarConfig = field(default_factory=ElevarConfig)
    consent: ConsentConfig = field(default_factory=ConsentConfig)


ANALYTICS_CONFIG = AnalyticsConfig()


def gtm_id_for_branch(branch: str, config: AnalyticsConfig = ANALYTICS_CONFIG) -> str:
    """GTM container ID for a branch, falling back to production."""
    return config.gtm.ids.get(branch) or config.gtm.ids["production"]


class AnalyticsFixture:
    """Read-only accessors used by the analytics integration specs."""

    def __init__(self, page: Page):
        self.page = page

    def cookie_exists(self, name: str) -> bool:
        return any(c["name"] == name for c in self.page.context.cookies())

    def get_cookie_value(self, name: str) -> Optional[str]:
        for cookie in self.page.context.cookies():
            if cookie["name"] == name:
                return cookie["value"]
        return None

    def js_variable_exists(self, variable_name: str) -> bool:
        return self.page.evaluate(
            "name => typeof window[name] !== 'undefined'", variable_name
        )

    def get_js_variable_value(self, variable_name: str) -> Any:
        return self.page.evaluate("name => window[name]", variable_name)

    def page_source_contains(self, text: str) -> bool:
        return text in self.page.content()

    def local_storage_item_exists(self, key: str) -> bool:
        return self.page.evaluate("key => localStorage.getItem(key) !== null", key)

    def get_local_storage_item(self, key: str) -> Any:
        """
        Read a localStorage item, decoding JSON when possible.

        Args:
            key: localStorage key

        Returns:
            The decoded value, the raw string if it is not JSON, or None
        """
        raw = self.page.evaluate("key => localStorage.getItem(key)", key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except ValueError:
            return raw

    def local_storage_item_has_properties(self, key: str, properties: List[str]) -> bool:
        """
        Check that a JSON localStorage item has every listed property.

        Args:
            key: localStorage key
            properties: Property names that must be present

        Returns:
            False if the item is missing, not a JSON object, or lacks a property
        """
        item = self.get_local_storage_item(key)
        if not isinstance(item, dict):
            logger.debug(f"localStorage item {key} is not a JSON object")
            return False
        return all(prop in item for prop in properties)

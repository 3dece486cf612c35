# ABOUTME: Country configuration table for storefront locales
# ABOUTME: Loads base records from YAML and derives branch-specific domains

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .env import env
from .errors import ConfigurationError, CountryNotFoundError

logger = logging.getLogger(__name__)

COUNTRIES_PATH = Path(__file__).parent / "data" / "countries.yaml"

REQUIRED_FIELDS = ("country_code", "domain", "cookie_domain")


@dataclass(frozen=True)
class CountryConfig:
    """Per-country storefront settings."""

    country_code: str
    domain: str
    cookie_domain: str
    checkout_domain: str = ""
    headless_checkout_return_domain: str = ""
    label: Optional[str] = None
    locale: Optional[str] = None
    currency: Optional[str] = None
    language: Optional[str] = None
    protocol: str = "https"


@dataclass(frozen=True)
class CountryTable:
    """Base country records plus the rule for deriving branch domains."""

    countries: List[CountryConfig]
    branch_domain_template: str = "{branch}.web.{domain}"
    production_branches: tuple = ("production",)


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        raise ConfigurationError(f"Country table not found: {path}")
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in country table {path}: {e}")

    if not isinstance(data, dict):
        raise ConfigurationError(f"Country table {path} must be a mapping")
    return data


def load_country_table(path: Optional[str] = None) -> CountryTable:
    """
    Load the country table from YAML.

    Args:
        path: Path to the YAML table; defaults to the bundled countries.yaml

    Returns:
        CountryTable with one CountryConfig per record

    Raises:
        ConfigurationError: If the file is missing, invalid, or a record lacks
            a required field
    """
    table_path = Path(path) if path else COUNTRIES_PATH
    data = _load_yaml(table_path)

    known = set(CountryConfig.__annotations__)
    countries = []
    for record in data.get("countries") or []:
        if not isinstance(record.get("country_code", ""), str):
            raise ConfigurationError(
                f"Country code {record['country_code']!r} is not a string; quote it in the table"
            )
        missing = [name for name in REQUIRED_FIELDS if not record.get(name)]
        if missing:
            raise ConfigurationError(
                f"Country record {record!r} is missing {', '.join(missing)}"
            )
        countries.append(
            CountryConfig(**{k: v for k, v in record.items() if k in known})
        )

    table = CountryTable(countries=countries)
    if isinstance(data.get("branch_domain_template"), str):
        table = replace(table, branch_domain_template=data["branch_domain_template"])
    if isinstance(data.get("production_branches"), list):
        table = replace(table, production_branches=tuple(data["production_branches"]))
    return table


def countries(path: Optional[str] = None) -> List[CountryConfig]:
    """Return the base (production) country records."""
    return list(load_country_table(path).countries)


def branch_domain(domain: str, branch: str, table: CountryTable) -> str:
    """
    Compute the hostname of a domain for a deployment branch.

    Args:
        domain: Production hostname
        branch: Branch name, e.g. "staging"
        table: Country table holding the domain template

    Returns:
        The production domain for production branches, else the templated one
    """
    if not domain or not branch or branch in table.production_branches:
        return domain
    return table.branch_domain_template.format(branch=branch, domain=domain)


def generate_test_countries(
    branch: Optional[str] = None, path: Optional[str] = None
) -> List[CountryConfig]:
    """
    Generate country configurations with branch-specific domains.

    The branch is read from the environment at call time unless given, so the
    result is never cached across branch changes.

    Args:
        branch: Branch to generate for; defaults to the current BRANCH
        path: Optional path to an alternative country table

    Returns:
        New CountryConfig objects, one per country
    """
    branch = branch if branch is not None else env.BRANCH
    table = load_country_table(path)
    logger.debug(f"Generating {len(table.countries)} country configs for branch {branch}")

    return [
        replace(
            country,
            domain=branch_domain(country.domain, branch, table),
            headless_checkout_return_domain=branch_domain(
                country.headless_checkout_return_domain, branch, table
            ),
        )
        for country in table.countries
    ]


def get_country_config(country_code: str, path: Optional[str] = None) -> CountryConfig:
    """
    Look up the base record for a country.

    Args:
        country_code: ISO country code, e.g. "GB"
        path: Optional path to an alternative country table

    Returns:
        The production CountryConfig for the code

    Raises:
        CountryNotFoundError: If no record matches
    """
    for country in countries(path):
        if country.country_code == country_code:
            return country
    raise CountryNotFoundError(country_code)

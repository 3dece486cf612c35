# ABOUTME: Environment variable access for test runs
# ABOUTME: Live (uncached) reads, a settings snapshot, and .env loading

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from .errors import MissingEnvironmentVariableError

logger = logging.getLogger(__name__)

DEFAULT_COUNTRY = "US"
DEFAULT_BRANCH = "production"
DEPLOY_PREVIEW_CONTEXT = "deploy-preview"


def get_env(name: str, default: Optional[str] = None, required: bool = False) -> str:
    """
    Read an environment variable, falling back to a default.

    The process environment is consulted on every call so that values written
    later in the run (branch, deploy preview markers, base URL) are visible.

    Args:
        name: Name of the environment variable
        default: Value used when the variable is unset or empty
        required: Raise if neither the variable nor the default is non-empty

    Returns:
        The resolved value, or an empty string

    Raises:
        MissingEnvironmentVariableError: If required and nothing resolved
    """
    value = os.environ.get(name) or default

    if required and not value:
        raise MissingEnvironmentVariableError(name)

    return value or ""


class EnvironmentConfig:
    """Live view over the environment variables a run depends on."""

    @property
    def COUNTRY(self) -> str:
        return get_env("COUNTRY", DEFAULT_COUNTRY)

    @property
    def BRANCH(self) -> str:
        return get_env("BRANCH", DEFAULT_BRANCH)

    @property
    def HEADLESS(self) -> bool:
        return get_env("HEADLESS", "false") == "true"

    @property
    def BASE_URL(self) -> str:
        return os.environ.get("BASE_URL", "")

    @BASE_URL.setter
    def BASE_URL(self, value: str) -> None:
        os.environ["BASE_URL"] = value

    @property
    def DEPLOY_PREVIEW_URL(self) -> str:
        return get_env("DEPLOY_PREVIEW_URL", "")

    @property
    def DEPLOY_PRIME_URL(self) -> str:
        return get_env("DEPLOY_PRIME_URL", "")

    @property
    def CONTEXT(self) -> str:
        return get_env("CONTEXT", "")

    @property
    def CI(self) -> bool:
        return get_env("CI", "").lower() not in ("", "0", "false", "no")


env = EnvironmentConfig()


@dataclass(frozen=True)
class Settings:
    """Snapshot of the run inputs, passed explicitly through global setup."""

    country: str = DEFAULT_COUNTRY
    branch: str = DEFAULT_BRANCH
    headless: bool = False
    base_url: str = ""
    deploy_preview_url: str = ""


def load_settings() -> Settings:
    """
    Take a snapshot of the current environment.

    Returns:
        Settings built from the live environment values
    """
    return Settings(
        country=env.COUNTRY,
        branch=env.BRANCH,
        headless=env.HEADLESS,
        base_url=env.BASE_URL,
        deploy_preview_url=env.DEPLOY_PREVIEW_URL,
    )


def load_env(path: Optional[str] = None) -> bool:
    """
    Load variables from a .env file without overriding the process environment.

    Args:
        path: Path to the .env file; searched upwards from the cwd when omitted

    Returns:
        True if at least one variable was loaded
    """
    dotenv_path = path or find_dotenv(usecwd=True)
    loaded = load_dotenv(dotenv_path=dotenv_path, override=False, verbose=False)
    if loaded:
        logger.debug(f"Loaded environment from {dotenv_path}")
    return loaded

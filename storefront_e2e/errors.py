# ABOUTME: Exception types raised by the storefront test framework
# ABOUTME: Configuration errors abort a run; page-object errors fail a single test


class ConfigurationError(Exception):
    """Raised when the run cannot be configured (env vars, country table)."""


class MissingEnvironmentVariableError(ConfigurationError):
    """A required environment variable is unset or empty."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Required environment variable {name} is not set")


class CountryNotFoundError(ConfigurationError):
    """No country record matches the requested country code."""

    def __init__(self, country_code: str):
        self.country_code = country_code
        super().__init__(
            f"Test country configuration not found for country code: {country_code}"
        )


class ComponentNotRegisteredError(LookupError):
    """A page was asked for a component it never registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Component '{name}' is not registered with this page")


class SizeSelectionError(Exception):
    """No size option could be selected on the product detail page."""

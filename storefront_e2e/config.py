# ABOUTME: Run configuration loader module
# ABOUTME: Loads timeouts and artifact paths from YAML with sensible defaults

import os
from dataclasses import dataclass, fields
from typing import Optional

import yaml


@dataclass
class RunConfig:
    """Run configuration data class with default values."""

    auth_state_path: str = "./.auth/auth-state.json"
    screenshots_dir: str = "./reports/screenshots"
    test_results_dir: str = "./reports/test-results"
    expect_timeout_ms: int = 5000
    action_timeout_ms: int = 10000
    navigation_timeout_ms: int = 30000


def get_config(config_path: Optional[str] = None) -> RunConfig:
    """
    Load run configuration from a YAML file with defaults for missing keys.

    Args:
        config_path: Path to the YAML file; defaults to $E2E_CONFIG or e2e.yaml

    Returns:
        RunConfig object with loaded or default values
    """
    config = RunConfig()
    config_path = config_path or os.environ.get("E2E_CONFIG") or "e2e.yaml"

    try:
        with open(config_path, "r") as f:
            yaml_data = yaml.safe_load(f) or {}
    except (FileNotFoundError, yaml.YAMLError):
        # Use all defaults if file missing or invalid
        return config

    if not isinstance(yaml_data, dict):
        return config

    # Only accept values whose type matches the default; bool is not an int here
    for field in fields(RunConfig):
        value = yaml_data.get(field.name)
        expected = type(getattr(config, field.name))
        if isinstance(value, bool) and expected is not bool:
            continue
        if isinstance(value, expected):
            setattr(config, field.name, value)

    return config

#!/usr/bin/env python3
# ABOUTME: Main entry point for the storefront end-to-end suite
# ABOUTME: Runs the live specs once per browser/device project, retrying failures on CI

import argparse
import logging
import os
import subprocess
import sys
from typing import List, Optional

import pytest

from storefront_e2e.constants import PROJECTS, get_project, retries_for, workers_for
from storefront_e2e.env import env, load_env

SPECS_DIR = "specs"


def parse_args(argv: Optional[List[str]] = None):
    """Parse command-line options; unknown options are passed to pytest."""
    parser = argparse.ArgumentParser(description="Run the storefront e2e suite")
    parser.add_argument("--country", help="Country code, e.g. US or GB")
    parser.add_argument("--branch", help="Deployment branch, e.g. production or staging")
    parser.add_argument("--deploy-preview-url", help="Run against a deploy preview")
    parser.add_argument(
        "--project",
        action="append",
        dest="projects",
        help="Browser/device project (repeatable); default all",
    )
    parser.add_argument("--headless", action="store_true", help="Run browsers headless")
    parser.add_argument("--list-projects", action="store_true")
    return parser.parse_known_args(argv)


def export_overrides(args) -> None:
    """Write command-line overrides into the environment the specs read."""
    if args.country:
        os.environ["COUNTRY"] = args.country
    if args.branch:
        os.environ["BRANCH"] = args.branch
    if args.deploy_preview_url:
        os.environ["DEPLOY_PREVIEW_URL"] = args.deploy_preview_url
    if args.headless:
        os.environ["HEADLESS"] = "true"


def run_pytest(args: List[str]) -> int:
    return subprocess.run([sys.executable, "-m", "pytest", SPECS_DIR, *args]).returncode


def run_project(project, pytest_args: List[str], retries: int, workers: str = "auto") -> int:
    """
    Run the specs for one project, re-running only failed tests on retry.

    Retries keep a Playwright trace for every test that fails again.

    Args:
        project: BrowserProject to run under
        pytest_args: Extra arguments for pytest
        retries: How many times failed tests are re-run
        workers: pytest-xdist worker count passed to -n

    Returns:
        The final pytest exit code
    """
    print(f"🌐 Project: {project.name}")
    base_args = [*project.pytest_args(), "-n", workers]
    exit_code = run_pytest([*base_args, *pytest_args])

    attempt = 0
    while exit_code == pytest.ExitCode.TESTS_FAILED and attempt < retries:
        attempt += 1
        print(f"🔁 Retrying failed tests for {project.name} ({attempt}/{retries})")
        exit_code = run_pytest(
            [*base_args, "--last-failed", "--tracing", "retain-on-failure", *pytest_args]
        )

    return exit_code


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO").upper())
    args, pytest_args = parse_args(argv)

    if args.list_projects:
        for project in PROJECTS:
            print(f"{project.name}: --browser {project.browser} --device {project.device}")
        return 0

    load_env()
    export_overrides(args)

    print("🛍️ Storefront e2e suite")
    print(f"🌍 Country: {env.COUNTRY}")
    print(f"🌿 Branch: {env.BRANCH}")
    if env.DEPLOY_PREVIEW_URL:
        print(f"🔍 Deploy preview: {env.DEPLOY_PREVIEW_URL}")

    projects = [get_project(name) for name in args.projects] if args.projects else PROJECTS
    retries = retries_for(env.CI)
    workers = workers_for(env.CI)

    exit_codes = [run_project(project, pytest_args, retries, workers) for project in projects]
    return max(exit_codes, default=0)


if __name__ == "__main__":
    sys.exit(main())

# ABOUTME: Browser/device projects and CI execution policy (retries, workers)
# ABOUTME: Maps project names onto pytest-playwright --browser/--device options

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class BrowserProject:
    """A browser, optionally emulating a device, the suite runs under."""

    name: str
    browser: str
    device: Optional[str] = None

    def pytest_args(self) -> List[str]:
        args = ["--browser", self.browser]
        if self.device:
            args += ["--device", self.device]
        return args


PROJECTS = (
    BrowserProject("chromium", "chromium", "Desktop Chrome"),
    BrowserProject("webkit", "webkit", "Desktop Safari"),
    BrowserProject("Mobile Chrome", "chromium", "Pixel 5"),
    BrowserProject("Mobile Safari", "webkit", "iPhone 12"),
)


def get_project(name: str) -> BrowserProject:
    for project in PROJECTS:
        if project.name.lower() == name.lower():
            return project
    names = ", ".join(p.name for p in PROJECTS)
    raise ValueError(f"Unknown project: {name} (expected one of {names})")


def retries_for(ci: bool) -> int:
    """Failed tests are retried on CI only."""
    return 2 if ci else 0


def workers_for(ci: bool) -> str:
    """pytest-xdist worker count: one on CI, one per CPU locally."""
    return "1" if ci else "auto"

# ABOUTME: Fixtures shared by the analytics integration specs
# ABOUTME: Every analytics check starts from the homepage

import pytest


@pytest.fixture(autouse=True)
def open_homepage(page):
    page.goto("/")

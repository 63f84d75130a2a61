"""
Fixtures for the example browser tests.

The ``driver`` fixture comes from harness.plugin: every test gets its own
browser session, closed after the test, with a screenshot saved when the
test failed. This module adds the demo site and page objects on top.
"""

from __future__ import annotations

from collections.abc import Generator

import pytest
from playwright.sync_api import Page

from shared.live_server import live_site_url
from tests.e2e.pages.dynamic_loading_page import DynamicLoadingPage
from tests.e2e.pages.login_page import LoginPage


@pytest.fixture(scope="session")
def live_server() -> Generator[str, None, None]:
    """
    Return a live demo site URL for the example tests.

    If TEST_BASE_URL is set, use that site. Otherwise serve the demo site
    in-process for the duration of the session.
    """
    yield from live_site_url(base_url_env="TEST_BASE_URL", config_name="testing")


@pytest.fixture
def credentials(harness_config) -> dict[str, str]:
    return {
        "username": harness_config.DEMO_USERNAME,
        "password": harness_config.DEMO_PASSWORD,
    }


@pytest.fixture
def login_page(driver: Page, live_server: str) -> LoginPage:
    return LoginPage(driver, live_server)


@pytest.fixture
def dynamic_loading_page(driver: Page, live_server: str) -> DynamicLoadingPage:
    return DynamicLoadingPage(driver, live_server)

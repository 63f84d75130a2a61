"""
Browser-automation providers.

The manager depends on two small capabilities:

- BrowserProvider.start_session(config) -> SessionHandle
- SessionHandle.close() and, optionally, SessionHandle.capture_artifact(name)

PlaywrightProvider is the implementation used by the test suite. Any other
provider (including the fakes in shared.test_helpers) can be substituted.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from playwright.sync_api import Browser, BrowserContext, Page, Playwright
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from harness.errors import ProvisioningError
from harness.session import DriverConfig

logger = logging.getLogger(__name__)


class SessionHandle(ABC):
    """Transport handle for one running browser."""

    @abstractmethod
    def close(self) -> None:
        """Release the browser and everything it owns."""

    def capture_artifact(self, name: str) -> bytes | None:
        """
        Capture a diagnostic artifact for the current browser state.

        Providers that cannot capture anything return None.
        """
        return None


class BrowserProvider(ABC):
    """Starts browser sessions for a DriverConfig."""

    @abstractmethod
    def start_session(self, config: DriverConfig) -> SessionHandle:
        """Start a new browser session or raise ProvisioningError."""


class PlaywrightSessionHandle(SessionHandle):
    """
    Session handle backed by a Playwright browser, context and page.

    Attributes:
        playwright: Running Playwright driver.
        browser: Launched browser.
        context: Isolated browser context for the test.
        page: Page (tab) the test body drives.
    """

    def __init__(
        self,
        playwright: Playwright,
        browser: Browser,
        context: BrowserContext,
        page: Page,
    ):
        self.playwright = playwright
        self.browser = browser
        self.context = context
        self.page = page

    def capture_artifact(self, name: str) -> bytes:
        """Return a full-page PNG screenshot."""
        return self.page.screenshot(full_page=True)

    def close(self) -> None:
        try:
            self.context.close()
            self.browser.close()
        finally:
            self.playwright.stop()


class PlaywrightProvider(BrowserProvider):
    """Launches a fresh Playwright browser for every session."""

    def start_session(self, config: DriverConfig) -> PlaywrightSessionHandle:
        try:
            playwright = sync_playwright().start()
        except PlaywrightError as exc:
            raise ProvisioningError(f"Could not start Playwright: {exc}") from exc

        browser = None
        try:
            browser_type = getattr(playwright, config.browser)
            browser = browser_type.launch(headless=config.headless)
            context = browser.new_context(
                viewport={"width": config.viewport_width, "height": config.viewport_height},
                ignore_https_errors=True,
            )
            context.set_default_timeout(config.timeout_ms)
            page = context.new_page()
        except PlaywrightError as exc:
            if browser is not None:
                browser.close()
            playwright.stop()
            raise ProvisioningError(
                f"Could not launch {config.browser}: {exc}"
            ) from exc

        logger.debug("Launched %s (headless=%s)", config.browser, config.headless)
        return PlaywrightSessionHandle(playwright, browser, context, page)

"""Login page object for the form authentication example."""

from __future__ import annotations

from playwright.sync_api import Page

from tests.e2e.pages.base_page import BasePage


class LoginPage(BasePage):
    """
    Page object for the login page.

    Provides methods for:
    - Entering credentials
    - Submitting the login form
    - Checking the outcome message
    """

    URL_PATH = "/login"

    USERNAME_INPUT = "#username"
    PASSWORD_INPUT = "#password"
    SUBMIT_BUTTON = "button[type='submit']"
    SUCCESS_MESSAGE = ".flash.success"
    FAILURE_MESSAGE = ".flash.error"
    LOGOUT_LINK = "[data-testid='logout-link']"

    def __init__(self, page: Page, base_url: str):
        super().__init__(page, base_url)

    def navigate(self) -> "LoginPage":
        """
        Navigate to the login page.

        Returns:
            Self for method chaining.
        """
        self.visit(self.URL_PATH)
        return self

    def login(self, username: str, password: str) -> None:
        """
        Fill credentials and submit the login form.

        Args:
            username: Username to enter.
            password: Password to enter.
        """
        self.type(username, self.USERNAME_INPUT)
        self.type(password, self.PASSWORD_INPUT)
        self.submit(self.SUBMIT_BUTTON)

    def logout(self) -> None:
        self.click(self.LOGOUT_LINK)
        self.page.wait_for_load_state()

    def success_message_present(self) -> bool:
        return self.wait_for_displayed(self.SUCCESS_MESSAGE, timeout=2000)

    def failure_message_present(self) -> bool:
        return self.wait_for_displayed(self.FAILURE_MESSAGE, timeout=2000)

"""
Page Object Model (POM) classes for the example browser tests.

This package contains page objects that encapsulate page-specific
locators and interactions. The POM pattern provides:
- Separation of test logic from page details
- Reusable page interactions
- Maintainable test code (changes to UI only require updates in one place)
"""

from tests.e2e.pages.base_page import BasePage
from tests.e2e.pages.dynamic_loading_page import DynamicLoadingPage
from tests.e2e.pages.login_page import LoginPage

__all__ = ["BasePage", "DynamicLoadingPage", "LoginPage"]

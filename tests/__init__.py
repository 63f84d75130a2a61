"""
Test suite for the browser session harness.

This package contains:
- unit/: Session manager, providers, artifacts and configuration
- integration/: pytest plugin behaviour and the demo site routes
- e2e/: Example browser tests using the Page Object Model
"""

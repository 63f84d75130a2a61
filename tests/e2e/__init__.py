"""
Browser test package.

This package contains Playwright-based example tests and demonstrates:
- Page Object Model (POM) pattern
- One browser session per test, provisioned by the harness
- Screenshot capture on failure
"""

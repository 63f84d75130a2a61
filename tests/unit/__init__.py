"""Unit tests for the browser session harness."""

"""Root conftest: loads the browser session harness plugin for the suite."""

pytest_plugins = ["harness.plugin", "pytester"]

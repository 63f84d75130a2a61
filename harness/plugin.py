"""
pytest integration for the browser session harness.

Each test that asks for ``driver`` (or ``session_manager``) gets its own
DriverSessionManager. The session is created in fixture setup, so a
provisioning failure reports the test as errored, and torn down in fixture
teardown with the outcome taken from the test's own reports.

Override ``browser_provider`` or ``artifact_sink`` in a conftest.py to
substitute another provider or artifact destination.
"""

from __future__ import annotations

from collections.abc import Generator

import pytest
from playwright.sync_api import Page

from config import Config, get_config
from harness.artifacts import ArtifactSink, FileSystemArtifactSink
from harness.manager import DriverSessionManager
from harness.providers import BrowserProvider, PlaywrightProvider
from harness.session import DriverConfig, SessionOutcome

phase_reports_key = pytest.StashKey[dict]()


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Keep each phase report on the item so fixtures can see the outcome."""
    outcome = yield
    report = outcome.get_result()
    item.stash.setdefault(phase_reports_key, {})[report.when] = report


def outcome_for(item: pytest.Item) -> SessionOutcome:
    """Build the SessionOutcome for a test from its setup and call reports."""
    reports = item.stash.get(phase_reports_key, {})
    passed = not any(report.failed for report in reports.values())
    return SessionOutcome(test_name=item.nodeid, passed=passed)


@pytest.fixture(scope="session")
def harness_config() -> type[Config]:
    """Configuration class selected by HARNESS_ENV."""
    return get_config()


@pytest.fixture(scope="session")
def driver_config(harness_config: type[Config]) -> DriverConfig:
    return DriverConfig.from_config(harness_config)


@pytest.fixture(scope="session")
def browser_provider() -> BrowserProvider:
    return PlaywrightProvider()


@pytest.fixture(scope="session")
def artifact_sink(harness_config: type[Config]) -> ArtifactSink | None:
    return FileSystemArtifactSink(harness_config.ARTIFACT_DIR)


@pytest.fixture(scope="function")
def session_manager(
    request: pytest.FixtureRequest,
    browser_provider: BrowserProvider,
    driver_config: DriverConfig,
    artifact_sink: ArtifactSink | None,
) -> Generator[DriverSessionManager, None, None]:
    """
    Provide a manager with an active session for one test.

    Yields:
        DriverSessionManager: Manager in the active state.
    """
    manager = DriverSessionManager(browser_provider, driver_config, artifact_sink)
    manager.create()
    yield manager
    manager.teardown(outcome_for(request.node))


@pytest.fixture(scope="function")
def driver(session_manager: DriverSessionManager) -> Page:
    """Playwright page of the current test's session."""
    return session_manager.current().handle.page

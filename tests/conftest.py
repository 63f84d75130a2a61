"""
Shared pytest fixtures for the harness test suite.

Fixtures here build managers around the fake provider and in-memory sink
from shared.test_helpers, so unit tests never launch a real browser.

Key Concepts Demonstrated:
- Test doubles behind an explicit provider interface
- Fixture dependencies
- Test data factories
"""

import os

import pytest
from faker import Faker

# Set testing environment before importing config users
os.environ.setdefault("HARNESS_ENV", "testing")

from harness.manager import DriverSessionManager
from harness.session import DriverConfig
from shared.test_helpers import FakeBrowserProvider, RecordingArtifactSink


# Initialize Faker for generating test data
fake = Faker()


@pytest.fixture
def fake_provider() -> FakeBrowserProvider:
    """Provider that records sessions instead of launching browsers."""
    return FakeBrowserProvider()


@pytest.fixture
def recording_sink() -> RecordingArtifactSink:
    """Artifact sink that keeps artifacts in memory."""
    return RecordingArtifactSink()


@pytest.fixture
def fake_driver_config() -> DriverConfig:
    return DriverConfig(browser="firefox", timeout_ms=5000)


@pytest.fixture
def manager(fake_provider, fake_driver_config, recording_sink) -> DriverSessionManager:
    """Idle manager wired to the fake provider and recording sink."""
    return DriverSessionManager(fake_provider, fake_driver_config, recording_sink)


@pytest.fixture
def test_name_factory():
    """Factory for realistic pytest node ids."""

    def _make(prefix: str = "test") -> str:
        words = "_".join(fake.words(nb=3))
        return f"tests/e2e/test_{fake.word()}.py::{prefix}_{words}"

    return _make

"""
Browser session harness.

Provisions one browser-automation session per test, exposes it to the test
body and always tears it down afterwards, saving a screenshot when the test
failed.
"""

from harness.artifacts import ArtifactSink, FileSystemArtifactSink, sanitize_artifact_name
from harness.errors import (
    ArtifactCaptureError,
    HarnessError,
    NoActiveSessionError,
    ProvisioningError,
)
from harness.manager import DriverSessionManager
from harness.providers import BrowserProvider, PlaywrightProvider, SessionHandle
from harness.session import DriverConfig, Session, SessionOutcome, SessionState

__all__ = [
    "ArtifactCaptureError",
    "ArtifactSink",
    "BrowserProvider",
    "DriverConfig",
    "DriverSessionManager",
    "FileSystemArtifactSink",
    "HarnessError",
    "NoActiveSessionError",
    "PlaywrightProvider",
    "ProvisioningError",
    "Session",
    "SessionHandle",
    "SessionOutcome",
    "SessionState",
    "sanitize_artifact_name",
]

"""
Exceptions raised by the browser session harness.

Propagation policy:
- ProvisioningError reaches the test framework so the test is reported
  as errored rather than failed.
- NoActiveSessionError signals misuse of the manager (calls out of order).
- ArtifactCaptureError is raised internally during teardown, logged and
  then dropped. It never prevents the session from being closed.
"""


class HarnessError(Exception):
    """Base class for all harness errors."""


class ProvisioningError(HarnessError):
    """The browser-automation provider could not start a session."""


class NoActiveSessionError(HarnessError):
    """An operation needed an active session but none exists."""


class ArtifactCaptureError(HarnessError):
    """A diagnostic artifact could not be captured or persisted."""

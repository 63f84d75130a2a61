"""
Driver session lifecycle manager.

One DriverSessionManager owns exactly one browser session per test:

    Idle --create()--> Active --teardown()--> Closed --reset()--> Idle

create() runs in the before-each-test hook, teardown() in the after-each-test
hook. teardown() always closes the session, whatever happened to the test or
to the failure screenshot.
"""

from __future__ import annotations

import logging
from collections.abc import Generator
from contextlib import contextmanager

from harness.artifacts import ArtifactSink, sanitize_artifact_name
from harness.errors import (
    ArtifactCaptureError,
    HarnessError,
    NoActiveSessionError,
    ProvisioningError,
)
from harness.providers import BrowserProvider
from harness.session import DriverConfig, Session, SessionOutcome, SessionState

logger = logging.getLogger(__name__)


class DriverSessionManager:
    """
    Create, expose and tear down one browser session.

    Attributes:
        provider: Browser-automation provider used to start sessions.
        config: Static driver configuration passed to the provider.
        artifact_sink: Where failure artifacts go. None disables capture.
        artifact_paths: Locations of artifacts saved by this manager.
    """

    def __init__(
        self,
        provider: BrowserProvider,
        config: DriverConfig,
        artifact_sink: ArtifactSink | None = None,
    ):
        self.provider = provider
        self.config = config
        self.artifact_sink = artifact_sink
        self.artifact_paths: list[str] = []
        self._state = SessionState.IDLE
        self._session: Session | None = None

    @property
    def state(self) -> SessionState:
        """Current lifecycle state."""
        return self._state

    def create(self) -> Session:
        """
        Provision a new session.

        Returns:
            The new active Session.

        Raises:
            ProvisioningError: The provider could not start a session. The
                manager stays Idle.
            HarnessError: The manager is not Idle.
        """
        if self._state is not SessionState.IDLE:
            raise HarnessError(
                f"create() requires an idle manager, state is {self._state.value}"
            )

        try:
            handle = self.provider.start_session(self.config)
        except ProvisioningError:
            logger.error("Provisioning %s session failed", self.config.browser)
            raise
        except Exception as exc:
            logger.error("Provisioning %s session failed: %s", self.config.browser, exc)
            raise ProvisioningError(
                f"Could not start {self.config.browser} session: {exc}"
            ) from exc

        self._session = Session(handle=handle)
        self._state = SessionState.ACTIVE
        logger.info("Session %s started (%s)", self._session.session_id, self.config.browser)
        return self._session

    def current(self) -> Session:
        """Return the active session for the test body."""
        if self._state is not SessionState.ACTIVE or self._session is None:
            raise NoActiveSessionError(
                f"No active session (manager state is {self._state.value})"
            )
        return self._session

    def teardown(self, outcome: SessionOutcome) -> None:
        """
        Finish the session for a completed test.

        Captures a failure artifact when the test failed, then closes the
        session. Capture and close errors are logged, never raised.

        Args:
            outcome: Name and pass/fail status of the finished test.

        Raises:
            NoActiveSessionError: There is no active session to tear down.
        """
        session = self.current()
        try:
            if not outcome.passed and self.artifact_sink is not None:
                self.capture_artifact(session, outcome.test_name)
        except ArtifactCaptureError as exc:
            logger.warning("%s", exc)
        finally:
            self._session = None
            self._state = SessionState.CLOSED
            try:
                session.handle.close()
            except Exception as exc:
                logger.error("Closing session %s failed: %s", session.session_id, exc)
            else:
                logger.info(
                    "Session %s closed (%s: %s)",
                    session.session_id,
                    outcome.test_name,
                    "passed" if outcome.passed else "failed",
                )

    def reset(self) -> None:
        """Return a closed manager to Idle so it can serve another test."""
        if self._state is SessionState.ACTIVE:
            raise HarnessError("reset() while a session is active; call teardown() first")
        self._state = SessionState.IDLE

    @contextmanager
    def session(self, test_name: str) -> Generator[Session, None, None]:
        """
        Scope one session to a block.

        The session is torn down when the block exits, unless the block already
        tore it down. The outcome counts as failed if the block raised; the
        exception still propagates.
        """
        session = self.create()
        passed = False
        try:
            yield session
            passed = True
        finally:
            if self._session is session:
                self.teardown(SessionOutcome(test_name=test_name, passed=passed))

    def capture_artifact(self, session: Session, test_name: str) -> str | None:
        """
        Capture an artifact from the session and store it in the sink.

        Args:
            session: Session to capture from.
            test_name: Test name the artifact is named after.

        Returns:
            Location reported by the sink, or None when the session
            cannot capture artifacts or no sink is configured.

        Raises:
            ArtifactCaptureError: Capturing or saving failed.
        """
        if self.artifact_sink is None:
            return None

        name = sanitize_artifact_name(test_name)
        try:
            data = session.handle.capture_artifact(name)
            if data is None:
                logger.debug("Session %s cannot capture artifacts", session.session_id)
                return None
            location = self.artifact_sink.save(name, data)
        except Exception as exc:
            raise ArtifactCaptureError(f"Failed to capture artifact {name!r}: {exc}") from exc

        self.artifact_paths.append(location)
        return location

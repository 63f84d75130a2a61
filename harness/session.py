"""
Data model for browser sessions.

A Session is created by DriverSessionManager.create(), handed to the test
body by reference and destroyed by DriverSessionManager.teardown(). A
SessionOutcome is produced once per test at teardown time.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from harness.providers import SessionHandle

SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")


class SessionState(str, Enum):
    """Lifecycle states of a DriverSessionManager."""

    IDLE = "idle"
    ACTIVE = "active"
    CLOSED = "closed"


@dataclass(frozen=True)
class DriverConfig:
    """
    Static configuration passed to the browser-automation provider.

    Attributes:
        browser: Which engine to launch (chromium, firefox, webkit).
        timeout_ms: Maximum wait per browser command, in milliseconds.
        headless: Run the browser without a visible window.
        viewport_width: Page viewport width in pixels.
        viewport_height: Page viewport height in pixels.
    """

    browser: str = "chromium"
    timeout_ms: int = 30000
    headless: bool = True
    viewport_width: int = 1280
    viewport_height: int = 720

    def __post_init__(self) -> None:
        if self.browser not in SUPPORTED_BROWSERS:
            raise ValueError(
                f"Unsupported browser {self.browser!r}; "
                f"expected one of {', '.join(SUPPORTED_BROWSERS)}"
            )
        if self.timeout_ms <= 0:
            raise ValueError("timeout_ms must be a positive integer")

    @classmethod
    def from_config(cls, config_class: Any) -> "DriverConfig":
        """Build a DriverConfig from a config class (see config.py)."""
        return cls(
            browser=str(config_class.BROWSER).lower(),
            timeout_ms=int(config_class.TIMEOUT_MS),
            headless=bool(config_class.HEADLESS),
            viewport_width=int(config_class.VIEWPORT_WIDTH),
            viewport_height=int(config_class.VIEWPORT_HEIGHT),
        )


@dataclass(frozen=True)
class SessionOutcome:
    """Name and pass/fail status of a finished test."""

    test_name: str
    passed: bool


@dataclass(eq=False)
class Session:
    """
    Handle to one running browser-automation instance.

    Attributes:
        handle: Provider transport handle (see harness.providers.SessionHandle).
        session_id: Unique identifier for the session.
        created_at: Timestamp when the session was provisioned.
    """

    handle: "SessionHandle"
    session_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> dict[str, Any]:
        """Convert the session metadata to a dictionary for logging."""
        return {
            "session_id": self.session_id,
            "created_at": self.created_at.isoformat(),
            "handle": type(self.handle).__name__,
        }

"""
Failure artifact naming and persistence.

The manager asks the session for an artifact (a screenshot) when a test
fails, then hands the bytes to an ArtifactSink together with a name derived
from the test name.
"""

from __future__ import annotations

import hashlib
import logging
import re
from abc import ABC, abstractmethod
from pathlib import Path

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 150
DIGEST_LENGTH = 8
_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def sanitize_artifact_name(test_name: str) -> str:
    """
    Turn a test name into a string that is safe as a file name.

    Names that are already safe are kept as they are. Any other name gets a
    short digest of the original appended, so two tests never share a name.

    Examples:
        tests/e2e/test_login.py::test_login[chromium] becomes
        tests_e2e_test_login.py_test_login_chromium-<8 hex digits>

    Args:
        test_name: Test node id or title.

    Returns:
        Sanitized name, never empty.
    """
    name = test_name.replace("::", "_").replace("/", "_")
    name = _UNSAFE_CHARS.sub("_", name).strip("._")
    if name and name == test_name and len(name) <= MAX_NAME_LENGTH:
        return name

    digest = hashlib.sha1(test_name.encode("utf-8")).hexdigest()[:DIGEST_LENGTH]
    name = name[: MAX_NAME_LENGTH - DIGEST_LENGTH - 1].rstrip("._") or "artifact"
    return f"{name}-{digest}"


class ArtifactSink(ABC):
    """Persists captured artifacts by name."""

    @abstractmethod
    def save(self, name: str, data: bytes) -> str:
        """Store the artifact and return where it went."""


class FileSystemArtifactSink(ArtifactSink):
    """Writes artifacts as files into a directory."""

    def __init__(self, directory: str | Path, suffix: str = ".png"):
        self.directory = Path(directory)
        self.suffix = suffix

    def save(self, name: str, data: bytes) -> str:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.directory / f"{name}{self.suffix}"
        path.write_bytes(data)
        logger.info("Artifact saved: %s", path)
        return str(path)

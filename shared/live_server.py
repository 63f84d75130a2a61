"""Shared live-server helpers for the E2E test suite."""

from __future__ import annotations

import logging
import os
import threading
import time
from collections.abc import Generator

import requests
from werkzeug.serving import make_server

from demo_site import create_app

logger = logging.getLogger(__name__)


def is_site_ready(url: str, timeout: int = 2) -> bool:
    """Return True when the demo site health endpoint responds with 200."""
    try:
        response = requests.get(f"{url}/health", timeout=timeout)
    except requests.RequestException:
        return False
    return response.status_code == 200


def wait_for_site_healthy(url: str, timeout: int = 30, interval: float = 0.2) -> None:
    """Poll the health endpoint until ready or timeout."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        if is_site_ready(url):
            return
        time.sleep(interval)
    raise RuntimeError(f"Demo site at {url} not healthy after {timeout}s")


def live_site_url(
    *,
    base_url_env: str = "TEST_BASE_URL",
    config_name: str = "testing",
    host: str = "127.0.0.1",
) -> Generator[str, None, None]:
    """
    Yield a healthy demo site base URL, serving one in-process when needed.

    Priority:
    1. Use explicit base URL from `base_url_env` (and wait for health).
    2. Serve the demo site on a free local port in a background thread,
       then shut it down on exit.
    """
    provided_base_url = os.getenv(base_url_env)
    if provided_base_url:
        wait_for_site_healthy(provided_base_url)
        yield provided_base_url
        return

    app = create_app(config_name)
    server = make_server(host, 0, app, threaded=True)
    base_url = f"http://{host}:{server.server_port}"

    server_thread = threading.Thread(target=server.serve_forever, daemon=True)
    server_thread.start()
    logger.info("Serving demo site at %s", base_url)

    try:
        wait_for_site_healthy(base_url)
        yield base_url
    finally:
        server.shutdown()
        server.server_close()
        server_thread.join(timeout=5)

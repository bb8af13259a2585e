"""Test helpers.

Utility functions for common test operations: waiting, retrying flaky
operations and building collision-resistant artifact names.
"""

from __future__ import annotations

import hashlib
import logging
import re
import secrets
import time
from typing import Callable, TypeVar

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page

logger = logging.getLogger(__name__)

T = TypeVar("T")


def sleep(ms: int) -> None:
    """Wait for a fixed amount of time.

    Use sparingly; prefer waiting for a specific condition.
    """
    time.sleep(ms / 1000)


def retry(fn: Callable[[], T], max_retries: int = 3, delay_ms: int = 1000) -> T:
    """Call ``fn`` until it succeeds or ``max_retries`` attempts are used up.

    :param fn: Zero-argument callable to retry
    :param max_retries: Maximum number of attempts
    :param delay_ms: Delay between attempts in milliseconds
    :return: Whatever ``fn`` returns on its first successful attempt
    :raises Exception: The last error raised by ``fn``
    """
    if max_retries < 1:
        raise ValueError("max_retries must be at least 1")

    last_error: Exception | None = None
    for attempt in range(1, max_retries + 1):
        try:
            return fn()
        except Exception as e:  # noqa: BLE001
            last_error = e
            logger.info("Retry attempt %d/%d failed: %s", attempt, max_retries, e)
            if attempt < max_retries:
                sleep(delay_ms)

    assert last_error is not None
    raise last_error


def epoch_ms() -> int:
    """Current time as integer milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def generate_test_id() -> str:
    """Generate a unique identifier for test data."""
    return f"test-{epoch_ms()}-{secrets.token_hex(3)}"


def sanitize_file_name(name: str) -> str:
    """Lowercase ``name`` and replace every non-alphanumeric character with ``_``."""
    return re.sub(r"[^a-zA-Z0-9]", "_", name).lower()


def failure_screenshot_name(scenario_name: str, timestamp: int | None = None) -> str:
    """Build the file stem used for a failed scenario's screenshot.

    The sanitized name alone can map two scenario names onto the same
    string ("a b" and "a-b"), so a short digest of the raw name is part of
    the stem as well.
    """
    if timestamp is None:
        timestamp = epoch_ms()
    digest = hashlib.sha1(scenario_name.encode("utf-8")).hexdigest()[:8]
    return f"FAILED-{sanitize_file_name(scenario_name)}-{digest}-{timestamp}"


def capture_console_errors(page: Page) -> list[str]:
    """Start collecting ``console.error`` messages emitted by ``page``.

    The returned list is filled in place as the page logs errors.
    """
    errors: list[str] = []

    def _on_console(message) -> None:
        if message.type == "error":
            errors.append(message.text)

    page.on("console", _on_console)
    return errors


def wait_for_network_idle(page: Page, timeout: int = 5000) -> bool:
    """Wait for the network to go idle, giving up quietly after ``timeout``.

    :return: True if the page reached ``networkidle`` in time
    """
    try:
        page.wait_for_load_state("networkidle", timeout=timeout)
    except PlaywrightError as e:
        logger.warning("Network did not become idle within %dms: %s", timeout, e)
        return False
    return True

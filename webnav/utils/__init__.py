"""Utility helpers and shared constants."""

from .constants import TIMEOUTS, VIEWPORTS
from .helpers import (
    capture_console_errors,
    epoch_ms,
    failure_screenshot_name,
    generate_test_id,
    retry,
    sanitize_file_name,
    sleep,
    wait_for_network_idle,
)

__all__ = [
    "TIMEOUTS",
    "VIEWPORTS",
    "capture_console_errors",
    "epoch_ms",
    "failure_screenshot_name",
    "generate_test_id",
    "retry",
    "sanitize_file_name",
    "sleep",
    "wait_for_network_idle",
]

"""Mock classes for unit testing page objects and step definitions."""

from .mock_playwright import PNG_BYTES, MockElement, MockLocator, MockPage
from .mock_world import MockWorld

__all__ = [
    "PNG_BYTES",
    "MockElement",
    "MockLocator",
    "MockPage",
    "MockWorld",
]

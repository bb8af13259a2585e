"""Exceptions raised by the page objects and the scenario world."""

from __future__ import annotations


class WebNavError(Exception):
    """Base class for all webnav errors."""


class NavigationTabNotFoundError(WebNavError, AssertionError):
    """A navigation tab is not attached anywhere in the navigation container."""

    def __init__(self, tab_name: str, site: str | None = None):
        self.tab_name = tab_name
        self.site = site
        message = f'Navigation tab "{tab_name}" not found'
        if site:
            message += f" on {site}"
        super().__init__(message)


class UnknownSiteError(WebNavError, KeyError):
    """No site profile matches the requested key or display name."""

    def __init__(self, site: str, known: list[str]):
        self.site = site
        self.known = known
        super().__init__(f"Unknown site '{site}'. Known sites: {', '.join(known)}")

    def __str__(self) -> str:
        return self.args[0]


class BrowserNotStartedError(WebNavError, RuntimeError):
    """An operation needs the browser session but none is open."""

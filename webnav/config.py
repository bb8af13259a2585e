"""World parameters.

Everything a scenario needs to start a browser session is carried in one
``WorldParameters`` value that is built once per test session and handed to
each World, instead of being read from module-level globals.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Optional

from .utils.constants import DEFAULT_USER_AGENT, SCREENSHOTS_DIR, TIMEOUTS, VIEWPORTS

DEFAULT_SITE = "storefront"
BROWSER_ENGINES = ("chromium", "firefox", "webkit")


def _env_flag(environ: Mapping[str, str], name: str) -> bool:
    return environ.get(name, "").strip().lower() == "true"


@dataclass
class WorldParameters:
    """Configuration for one scenario's browser session."""

    # None means "use the selected site profile's base URL"
    base_url: Optional[str] = None
    default_timeout: int = TIMEOUTS["DEFAULT"]
    navigation_timeout: int = TIMEOUTS["PAGE_LOAD"]
    slow_timeout: int = TIMEOUTS["LONG"]
    site: str = DEFAULT_SITE
    browser_name: str = "chromium"
    headless: bool = False
    slow_mo: int = 50
    viewport: Dict[str, int] = field(default_factory=lambda: dict(VIEWPORTS["DESKTOP"]))
    ignore_https_errors: bool = True
    user_agent: Optional[str] = DEFAULT_USER_AGENT
    screenshots_dir: str = SCREENSHOTS_DIR

    def __post_init__(self) -> None:
        if self.browser_name not in BROWSER_ENGINES:
            raise ValueError(
                f"Unsupported browser '{self.browser_name}'. "
                f"Expected one of: {', '.join(BROWSER_ENGINES)}"
            )
        if self.default_timeout <= 0:
            raise ValueError("default_timeout must be a positive number of milliseconds")
        if self.base_url:
            self.base_url = self.base_url.rstrip("/")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "WorldParameters":
        """Build parameters from environment flags.

        ``HEADLESS=true`` runs without a window (headed is the default),
        ``DEBUG=true`` slows every action down to 100ms instead of 50ms.
        ``BASE_URL``, ``SITE``, ``BROWSER`` and ``DEFAULT_TIMEOUT`` override
        the defaults when set.
        """
        if environ is None:
            environ = os.environ

        kwargs: Dict[str, Any] = {
            "headless": _env_flag(environ, "HEADLESS"),
            "slow_mo": 100 if _env_flag(environ, "DEBUG") else 50,
        }
        if environ.get("BASE_URL"):
            kwargs["base_url"] = environ["BASE_URL"]
        if environ.get("SITE"):
            kwargs["site"] = environ["SITE"]
        if environ.get("BROWSER"):
            kwargs["browser_name"] = environ["BROWSER"].lower()
        if environ.get("DEFAULT_TIMEOUT"):
            kwargs["default_timeout"] = int(environ["DEFAULT_TIMEOUT"])
        return cls(**kwargs)

    @classmethod
    def from_pytest_config(
        cls, config: Any, environ: Optional[Mapping[str, str]] = None
    ) -> "WorldParameters":
        """Environment defaults overridden by the root conftest options."""
        params = cls.from_env(environ)
        overrides: Dict[str, Any] = {}

        site = config.getoption("site", default=None)
        if site:
            overrides["site"] = site
        base_url = config.getoption("site_base_url", default=None)
        if base_url:
            overrides["base_url"] = base_url
        timeout = config.getoption("default_timeout", default=None)
        if timeout:
            overrides["default_timeout"] = int(timeout)
        engine = config.getoption("browser_engine", default=None)
        if engine:
            overrides["browser_name"] = engine

        return params.with_overrides(**overrides) if overrides else params

    def with_overrides(self, **overrides: Any) -> "WorldParameters":
        """Copy of these parameters with some fields replaced."""
        return replace(self, **overrides)

    @property
    def launch_options(self) -> Dict[str, Any]:
        return {"headless": self.headless, "slow_mo": self.slow_mo}

    @property
    def context_options(self) -> Dict[str, Any]:
        options: Dict[str, Any] = {
            "viewport": dict(self.viewport),
            "ignore_https_errors": self.ignore_https_errors,
        }
        if self.user_agent:
            options["user_agent"] = self.user_agent
        return options

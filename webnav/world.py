"""Scenario world.

The World is the context object shared by all steps of a single scenario.
It owns the Playwright driver, the browser session, one isolated browser
context and one page, plus the page objects bound to that page. A new World
is built for every scenario and nothing in it survives the scenario.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

from playwright.sync_api import Browser, BrowserContext, Page, Playwright, sync_playwright

from .config import WorldParameters
from .exceptions import BrowserNotStartedError
from .pages import HomePage, home_page_for
from .sites import SiteProfile, get_site_profile, load_site_profiles
from .utils.helpers import capture_console_errors, epoch_ms

logger = logging.getLogger(__name__)


class ScenarioState(str, Enum):
    NOT_STARTED = "not_started"
    BROWSER_READY = "browser_ready"
    DONE = "done"


class World:
    """Browser session and page objects for one scenario.

    :param parameters: Session configuration; built from the environment
        when omitted
    :param named: Free-form overrides. ``base_url``/``baseUrl`` and
        ``default_timeout``/``defaultTimeout`` map onto ``parameters``;
        anything else is kept in ``extra``.
    """

    _ALIASES = {"baseUrl": "base_url", "defaultTimeout": "default_timeout"}

    def __init__(
        self,
        parameters: Optional[WorldParameters] = None,
        sites: Optional[Dict[str, SiteProfile]] = None,
        scenario_name: str = "",
        **named: Any,
    ):
        if parameters is None:
            parameters = WorldParameters.from_env()

        overrides: Dict[str, Any] = {}
        self.extra: Dict[str, Any] = {}
        known = set(parameters.__dataclass_fields__)
        for name, value in named.items():
            name = self._ALIASES.get(name, name)
            if name in known:
                overrides[name] = value
            else:
                self.extra[name] = value
        if overrides:
            parameters = parameters.with_overrides(**overrides)

        self.parameters = parameters
        self.sites = sites if sites is not None else load_site_profiles()
        self.site: SiteProfile = get_site_profile(parameters.site, self.sites)
        self.base_url: str = parameters.base_url or self.site.base_url
        self.default_timeout: int = parameters.default_timeout
        self.scenario_name = scenario_name

        self.playwright: Optional[Playwright] = None
        self.browser: Optional[Browser] = None
        self.context: Optional[BrowserContext] = None
        self.page: Optional[Page] = None
        self.home_page: Optional[HomePage] = None
        self.console_errors: List[str] = []
        self.state = ScenarioState.NOT_STARTED

    @property
    def is_ready(self) -> bool:
        return self.state == ScenarioState.BROWSER_READY and self.page is not None

    def init_browser(self) -> None:
        """Launch the browser, open a context and a page, build page objects.

        Calling it again while the browser is ready does nothing. If any
        launch step fails, whatever was already opened is released before
        the error propagates.
        """
        if self.is_ready:
            logger.warning("Browser already initialized for '%s'", self.scenario_name)
            return

        params = self.parameters
        try:
            self.playwright = sync_playwright().start()
            engine = getattr(self.playwright, params.browser_name)
            self.browser = engine.launch(**params.launch_options)
            self.context = self.browser.new_context(**params.context_options)
            self.context.set_default_timeout(self.default_timeout)
            self.context.set_default_navigation_timeout(params.navigation_timeout)
            self.page = self.context.new_page()
        except Exception:
            logger.error("Failed to start %s for '%s'", params.browser_name, self.scenario_name)
            self.close_browser()
            raise

        self.console_errors = capture_console_errors(self.page)
        self._init_page_objects()
        self.state = ScenarioState.BROWSER_READY
        logger.info(
            "Started %s (headless=%s) for '%s' against %s",
            params.browser_name,
            params.headless,
            self.scenario_name,
            self.base_url,
        )

    def _init_page_objects(self) -> None:
        self.home_page = home_page_for(self.page, self.site, base_url=self.base_url)

    def use_site(self, key_or_name: str) -> HomePage:
        """Point the page objects at another configured site.

        The base URL follows the new site. Asking for the site already
        selected keeps the configured base URL.
        """
        site = get_site_profile(key_or_name, self.sites)
        if site.key != self.site.key:
            self.site = site
            self.base_url = site.base_url
            logger.info("Switched scenario '%s' to site %s", self.scenario_name, site.name)
        if self.page is not None:
            self._init_page_objects()
        return self.home_page

    def set_default_timeout(self, timeout: int) -> None:
        self.default_timeout = timeout
        if self.context is not None:
            self.context.set_default_timeout(timeout)

    def close_browser(self) -> None:
        """Release page, context, browser and driver, in that order.

        Handles that were never opened are skipped. A failure closing one
        handle is logged and the remaining handles are still released.
        """
        errors = []
        for attr, method in (
            ("page", "close"),
            ("context", "close"),
            ("browser", "close"),
            ("playwright", "stop"),
        ):
            handle = getattr(self, attr)
            if handle is None:
                continue
            try:
                getattr(handle, method)()
            except Exception as e:  # noqa: BLE001
                errors.append(f"{attr}: {e}")
            finally:
                setattr(self, attr, None)

        self.home_page = None
        if self.state == ScenarioState.BROWSER_READY:
            self.state = ScenarioState.DONE

        for error in errors:
            logger.warning("Error while closing browser for '%s': %s", self.scenario_name, error)

    def take_screenshot(self, name: Optional[str] = None) -> bytes:
        """Capture the full page and return the PNG bytes.

        The image is also written to ``<screenshots_dir>/<name>.png``, with
        ``screenshot-<epoch-ms>`` used when no name is given.
        """
        if self.page is None:
            raise BrowserNotStartedError("Cannot take a screenshot: no page is open")

        screenshot_name = name or f"screenshot-{epoch_ms()}"
        path = self.screenshot_path(screenshot_name)
        path.parent.mkdir(parents=True, exist_ok=True)
        return self.page.screenshot(path=str(path), full_page=True)

    def screenshot_path(self, name: str) -> Path:
        return Path(self.parameters.screenshots_dir) / f"{name}.png"
